"""各资源共用的数据模型"""

from typing import Generic, TypeVar

from pydantic import Field

from .base import ApiObject, ApiParameters
from .enums import ListOrder

T = TypeVar("T")


class Usage(ApiObject):
    """Token 使用统计"""

    prompt_tokens: int = Field(ge=0, description="输入 token 数")
    completion_tokens: int | None = Field(default=None, ge=0, description="输出 token 数")
    total_tokens: int = Field(ge=0, description="总 token 数")


class DeletedObject(ApiObject):
    """删除操作的返回"""

    id: str
    object: str
    deleted: bool


class ListObject(ApiObject, Generic[T]):
    """列表响应

    Assistants 系列接口带分页游标（first_id/last_id/has_more），
    其他接口（如 models）只有 object + data。
    """

    object: str = Field(description="始终为 list")
    data: list[T]
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool | None = None


class ListParameters(ApiParameters):
    """列表查询参数（游标分页）"""

    limit: int | None = Field(default=None, ge=1, le=100, description="返回数量，1-100")
    order: ListOrder | None = Field(default=None, description="按 created_at 排序方向")
    after: str | None = Field(default=None, description="游标：返回该 ID 之后的对象")
    before: str | None = Field(default=None, description="游标：返回该 ID 之前的对象")

    def to_query(self) -> dict[str, str]:
        """编码为 URL 查询参数"""
        return {key: str(value) for key, value in self.to_wire().items()}


class ErrorDetail(ApiObject):
    """服务端 error 对象"""

    message: str = ""
    type: str | None = None
    param: str | None = None
    code: str | int | None = None


class ErrorBody(ApiObject):
    """非 2xx 响应体：{"error": {...}}"""

    error: ErrorDetail
