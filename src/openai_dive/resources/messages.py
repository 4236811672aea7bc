"""Messages 资源 handle

所有操作都挂在 thread 下；thread_id 由调用方从之前的调用中获得，
客户端不跟踪也不校验这种关联。
"""

from ..models.message import (
    Message,
    MessageFile,
    MessageFileList,
    MessageList,
    MessageParameters,
    ModifyMessageParameters,
)
from ..models.shared import ListParameters
from .base import Resource, api_path


class Messages(Resource):
    beta = True

    async def create(self, thread_id: str, parameters: MessageParameters) -> Message:
        return await self._client.request(
            Message,
            "POST",
            api_path("threads", thread_id, "messages"),
            params=parameters,
            beta=self.beta,
        )

    async def list(
        self, thread_id: str, query: ListParameters | None = None
    ) -> MessageList:
        return await self._client.request(
            MessageList,
            "GET",
            api_path("threads", thread_id, "messages"),
            query=query.to_query() if query else None,
            beta=self.beta,
        )

    async def retrieve(self, thread_id: str, message_id: str) -> Message:
        return await self._client.request(
            Message,
            "GET",
            api_path("threads", thread_id, "messages", message_id),
            beta=self.beta,
        )

    async def modify(
        self,
        thread_id: str,
        message_id: str,
        parameters: ModifyMessageParameters,
    ) -> Message:
        return await self._client.request(
            Message,
            "POST",
            api_path("threads", thread_id, "messages", message_id),
            params=parameters,
            beta=self.beta,
        )

    async def list_files(
        self,
        thread_id: str,
        message_id: str,
        query: ListParameters | None = None,
    ) -> MessageFileList:
        """列出消息附带的文件"""
        return await self._client.request(
            MessageFileList,
            "GET",
            api_path("threads", thread_id, "messages", message_id, "files"),
            query=query.to_query() if query else None,
            beta=self.beta,
        )

    async def retrieve_file(
        self, thread_id: str, message_id: str, file_id: str
    ) -> MessageFile:
        return await self._client.request(
            MessageFile,
            "GET",
            api_path("threads", thread_id, "messages", message_id, "files", file_id),
            beta=self.beta,
        )
