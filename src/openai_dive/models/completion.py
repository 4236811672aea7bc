"""Completion 资源"""

from pydantic import Field

from .base import ApiObject, ApiParameters
from .shared import Usage


class CompletionParameters(ApiParameters):
    """创建 completion 的参数

    model 接受任意字符串，常用取值见 OpenAIModel。
    """

    model: str
    prompt: str | list[str]
    suffix: str | None = None
    max_tokens: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    n: int | None = Field(default=None, ge=1)
    logprobs: int | None = Field(default=None, ge=0, le=5)
    echo: bool | None = None
    stop: str | list[str] | None = None
    presence_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    best_of: int | None = Field(default=None, ge=1)
    logit_bias: dict[str, int] | None = None
    user: str | None = None


class CompletionLogprobs(ApiObject):
    tokens: list[str] = Field(default_factory=list)
    token_logprobs: list[float | None] = Field(default_factory=list)
    top_logprobs: list[dict[str, float] | None] | None = None
    text_offset: list[int] = Field(default_factory=list)


class CompletionChoice(ApiObject):
    text: str
    index: int
    logprobs: CompletionLogprobs | None = None
    finish_reason: str | None = None


class CompletionResponse(ApiObject):
    id: str
    object: str = Field(description="始终为 text_completion")
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage | None = None
