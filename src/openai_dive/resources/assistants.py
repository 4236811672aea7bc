"""Assistants 资源 handle"""

from ..models.assistant import (
    Assistant,
    AssistantList,
    AssistantParameters,
    ModifyAssistantParameters,
)
from ..models.shared import DeletedObject, ListParameters
from .base import Resource, api_path


class Assistants(Resource):
    beta = True

    async def create(self, parameters: AssistantParameters) -> Assistant:
        return await self._client.request(
            Assistant, "POST", api_path("assistants"), params=parameters, beta=self.beta
        )

    async def list(self, query: ListParameters | None = None) -> AssistantList:
        return await self._client.request(
            AssistantList,
            "GET",
            api_path("assistants"),
            query=query.to_query() if query else None,
            beta=self.beta,
        )

    async def retrieve(self, assistant_id: str) -> Assistant:
        return await self._client.request(
            Assistant, "GET", api_path("assistants", assistant_id), beta=self.beta
        )

    async def modify(
        self, assistant_id: str, parameters: ModifyAssistantParameters
    ) -> Assistant:
        """修改 assistant，只提交已设置的字段"""
        return await self._client.request(
            Assistant,
            "POST",
            api_path("assistants", assistant_id),
            params=parameters,
            beta=self.beta,
        )

    async def delete(self, assistant_id: str) -> DeletedObject:
        return await self._client.request(
            DeletedObject, "DELETE", api_path("assistants", assistant_id), beta=self.beta
        )
