"""Files 资源 handle"""

from ..decoding import decode_json
from ..models.enums import FilePurpose
from ..models.file import File, FileList, FileUploadParameters
from ..models.shared import DeletedObject
from ..transport import encode_multipart
from .base import Resource, api_path


class Files(Resource):
    async def list(self, purpose: FilePurpose | None = None) -> FileList:
        """列出文件，可按 purpose 过滤"""
        return await self._client.request(
            FileList,
            "GET",
            api_path("files"),
            query={"purpose": str(purpose)} if purpose else None,
        )

    async def upload(self, parameters: FileUploadParameters) -> File:
        """以 multipart/form-data 上传文件"""
        body, content_type = encode_multipart(
            fields={"purpose": str(parameters.purpose)},
            files={"file": (parameters.filename, parameters.content)},
        )
        resp = await self._client.send(
            "POST", api_path("files"), body=body, content_type=content_type
        )
        return decode_json(File, resp.body)

    async def retrieve(self, file_id: str) -> File:
        return await self._client.request(File, "GET", api_path("files", file_id))

    async def delete(self, file_id: str) -> DeletedObject:
        return await self._client.request(
            DeletedObject, "DELETE", api_path("files", file_id)
        )

    async def retrieve_content(self, file_id: str) -> bytes:
        """下载文件原始内容"""
        resp = await self._client.send("GET", api_path("files", file_id, "content"))
        return resp.body
