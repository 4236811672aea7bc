"""Model 资源"""

from pydantic import Field

from .base import ApiObject
from .shared import ListObject


class Model(ApiObject):
    """可用模型的基本信息"""

    id: str = Field(description="模型 ID，可在 API 中引用")
    object: str = Field(description="始终为 model")
    created: int = Field(description="创建时间（Unix 秒）")
    owned_by: str = Field(description="所属组织")


class ModelList(ListObject[Model]):
    pass
