"""Chat Completion 资源"""

from typing import Any

from pydantic import Field

from .base import ApiObject, ApiParameters
from .enums import ChatRole
from .shared import Usage


class FunctionCall(ApiObject):
    """模型发起的函数调用，arguments 为 JSON 字符串"""

    name: str
    arguments: str


class ChatMessage(ApiObject):
    """响应 choices 中的一条消息

    assistant 发起函数调用时 content 为 null。
    """

    role: ChatRole
    content: str | None = None
    name: str | None = None
    function_call: FunctionCall | None = None


class FunctionCallParameters(ApiParameters):
    name: str
    arguments: str


class ChatMessageParameters(ApiParameters):
    """请求中的一条消息

    回传 assistant 的函数调用时 content 传 None，请求体中写为 null。
    """

    role: ChatRole
    content: str | None = None
    name: str | None = None
    function_call: FunctionCallParameters | None = None

    @classmethod
    def from_message(cls, message: ChatMessage) -> "ChatMessageParameters":
        """把响应中的消息转为下一轮请求的历史消息"""
        return cls.model_validate(message.to_wire())


class FunctionDefinition(ApiParameters):
    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(description="JSON Schema 描述的参数")


class ChatCompletionParameters(ApiParameters):
    """创建 chat completion 的参数"""

    model: str
    messages: list[ChatMessageParameters] = Field(min_length=1)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    n: int | None = Field(default=None, ge=1)
    stop: str | list[str] | None = None
    max_tokens: int | None = Field(default=None, ge=1)
    presence_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: dict[str, int] | None = None
    user: str | None = None
    functions: list[FunctionDefinition] | None = None
    # "none" / "auto" / {"name": "..."}
    function_call: str | dict[str, str] | None = None

    def to_wire(self) -> dict[str, Any]:
        """编码为请求体；每条消息都带 content 键，未设置时为 null"""
        wire = super().to_wire()
        for message in wire["messages"]:
            message.setdefault("content", None)
        return wire


class ChatCompletionChoice(ApiObject):
    index: int
    message: ChatMessage
    finish_reason: str | None = None


class ChatCompletionResponse(ApiObject):
    id: str
    object: str = Field(description="始终为 chat.completion")
    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage | None = None
    system_fingerprint: str | None = None
