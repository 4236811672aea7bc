"""Models 资源 handle"""

from ..models.model import Model, ModelList
from ..models.shared import DeletedObject
from .base import Resource, api_path


class Models(Resource):
    async def list(self) -> ModelList:
        """列出当前可用的模型"""
        return await self._client.request(ModelList, "GET", api_path("models"))

    async def get(self, model_id: str) -> Model:
        """查询单个模型"""
        return await self._client.request(Model, "GET", api_path("models", model_id))

    async def delete(self, model_id: str) -> DeletedObject:
        """删除 fine-tune 模型（需要所属组织的 owner 权限）"""
        return await self._client.request(
            DeletedObject, "DELETE", api_path("models", model_id)
        )
