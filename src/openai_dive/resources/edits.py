"""Edits 资源 handle"""

from ..models.edit import EditParameters, EditResponse
from .base import Resource, api_path


class Edits(Resource):
    async def create(self, parameters: EditParameters) -> EditResponse:
        """按 instruction 修改 input"""
        return await self._client.request(
            EditResponse, "POST", api_path("edits"), params=parameters
        )
