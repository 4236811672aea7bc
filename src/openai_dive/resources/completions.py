"""Completions 资源 handle"""

from ..models.completion import CompletionParameters, CompletionResponse
from .base import Resource, api_path


class Completions(Resource):
    async def create(self, parameters: CompletionParameters) -> CompletionResponse:
        """根据 prompt 生成 completion"""
        return await self._client.request(
            CompletionResponse, "POST", api_path("completions"), params=parameters
        )
