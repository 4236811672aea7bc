"""Assistant 资源"""

from typing import Annotated, Any, Literal

from pydantic import Field

from .base import ApiObject, ApiParameters
from .chat_completion import FunctionDefinition
from .shared import ListObject


class CodeInterpreterTool(ApiObject):
    type: Literal["code_interpreter"]


class RetrievalTool(ApiObject):
    type: Literal["retrieval"]


class FunctionSpec(ApiObject):
    name: str
    description: str | None = None
    parameters: dict[str, Any]


class FunctionTool(ApiObject):
    type: Literal["function"]
    function: FunctionSpec


AssistantTool = Annotated[
    CodeInterpreterTool | RetrievalTool | FunctionTool,
    Field(discriminator="type"),
]


class CodeInterpreterToolParameters(ApiParameters):
    type: Literal["code_interpreter"] = "code_interpreter"


class RetrievalToolParameters(ApiParameters):
    type: Literal["retrieval"] = "retrieval"


class FunctionToolParameters(ApiParameters):
    type: Literal["function"] = "function"
    function: FunctionDefinition


# 请求中的工具声明，与 AssistantTool 取值相同但不接受未声明字段
AssistantToolParameters = Annotated[
    CodeInterpreterToolParameters | RetrievalToolParameters | FunctionToolParameters,
    Field(discriminator="type"),
]


class Assistant(ApiObject):
    id: str
    object: str = Field(description="始终为 assistant")
    created_at: int
    name: str | None = None
    description: str | None = None
    model: str
    instructions: str | None = None
    tools: list[AssistantTool]
    file_ids: list[str]
    metadata: dict[str, str] | None = None


class AssistantList(ListObject[Assistant]):
    pass


class AssistantParameters(ApiParameters):
    """创建 assistant 的参数"""

    model: str
    name: str | None = Field(default=None, max_length=256)
    description: str | None = Field(default=None, max_length=512)
    instructions: str | None = None
    tools: list[AssistantToolParameters] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


class ModifyAssistantParameters(ApiParameters):
    """修改 assistant 的参数，全部可选"""

    model: str | None = None
    name: str | None = Field(default=None, max_length=256)
    description: str | None = Field(default=None, max_length=512)
    instructions: str | None = None
    tools: list[AssistantToolParameters] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
