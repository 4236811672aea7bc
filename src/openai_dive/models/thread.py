"""Thread 资源"""

from pydantic import Field

from .base import ApiObject, ApiParameters
from .message import MessageParameters


class Thread(ApiObject):
    id: str
    object: str = Field(description="始终为 thread")
    created_at: int
    metadata: dict[str, str] | None = None


class ThreadParameters(ApiParameters):
    """创建 thread 的参数，可携带初始消息"""

    messages: list[MessageParameters] | None = None
    metadata: dict[str, str] | None = None


class ModifyThreadParameters(ApiParameters):
    metadata: dict[str, str] | None = None
