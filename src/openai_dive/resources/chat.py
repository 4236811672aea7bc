"""Chat 资源 handle"""

from ..models.chat_completion import ChatCompletionParameters, ChatCompletionResponse
from .base import Resource, api_path


class Chat(Resource):
    async def create(self, parameters: ChatCompletionParameters) -> ChatCompletionResponse:
        """根据对话消息生成回复"""
        return await self._client.request(
            ChatCompletionResponse,
            "POST",
            api_path("chat", "completions"),
            params=parameters,
        )
