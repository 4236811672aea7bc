"""Threads 资源 handle"""

from ..models.shared import DeletedObject
from ..models.thread import ModifyThreadParameters, Thread, ThreadParameters
from .base import Resource, api_path


class Threads(Resource):
    beta = True

    async def create(self, parameters: ThreadParameters | None = None) -> Thread:
        """创建 thread；parameters 为 None 时创建空 thread"""
        return await self._client.request(
            Thread,
            "POST",
            api_path("threads"),
            params=parameters or ThreadParameters(),
            beta=self.beta,
        )

    async def retrieve(self, thread_id: str) -> Thread:
        return await self._client.request(
            Thread, "GET", api_path("threads", thread_id), beta=self.beta
        )

    async def modify(self, thread_id: str, parameters: ModifyThreadParameters) -> Thread:
        return await self._client.request(
            Thread,
            "POST",
            api_path("threads", thread_id),
            params=parameters,
            beta=self.beta,
        )

    async def delete(self, thread_id: str) -> DeletedObject:
        return await self._client.request(
            DeletedObject, "DELETE", api_path("threads", thread_id), beta=self.beta
        )
