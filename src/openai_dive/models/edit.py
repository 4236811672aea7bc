"""Edit 资源"""

from pydantic import Field

from .base import ApiObject, ApiParameters
from .shared import Usage


class EditParameters(ApiParameters):
    model: str
    instruction: str = Field(description="告诉模型如何修改 input")
    input: str | None = None
    n: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)


class EditChoice(ApiObject):
    text: str
    index: int


class EditResponse(ApiObject):
    object: str = Field(description="始终为 edit")
    created: int
    choices: list[EditChoice]
    usage: Usage
