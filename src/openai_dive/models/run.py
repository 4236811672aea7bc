"""Run 资源 -- 在 thread 上执行 assistant"""

from pydantic import Field

from .assistant import AssistantTool, AssistantToolParameters
from .base import ApiObject, ApiParameters
from .enums import TERMINAL_RUN_STATUSES, RunStatus
from .shared import ListObject


class ToolCallFunction(ApiObject):
    name: str
    arguments: str


class RequiredToolCall(ApiObject):
    id: str
    type: str = Field(description="目前始终为 function")
    function: ToolCallFunction


class SubmitToolOutputsAction(ApiObject):
    tool_calls: list[RequiredToolCall]


class RequiredAction(ApiObject):
    """status 为 requires_action 时需要调用方提交的内容"""

    type: str = Field(description="目前始终为 submit_tool_outputs")
    submit_tool_outputs: SubmitToolOutputsAction


class RunError(ApiObject):
    code: str
    message: str


class Run(ApiObject):
    id: str
    object: str = Field(description="始终为 thread.run")
    created_at: int
    thread_id: str
    assistant_id: str
    status: RunStatus
    required_action: RequiredAction | None = None
    last_error: RunError | None = None
    expires_at: int | None = None
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str
    instructions: str | None = None
    tools: list[AssistantTool]
    file_ids: list[str]
    metadata: dict[str, str] | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_RUN_STATUSES


class RunList(ListObject[Run]):
    pass


class RunParameters(ApiParameters):
    """创建 run 的参数，model/instructions/tools 覆盖 assistant 的配置"""

    assistant_id: str
    model: str | None = None
    instructions: str | None = None
    tools: list[AssistantToolParameters] | None = None
    metadata: dict[str, str] | None = None


class ModifyRunParameters(ApiParameters):
    metadata: dict[str, str] | None = None


class ToolOutput(ApiParameters):
    tool_call_id: str
    output: str


class SubmitToolOutputsParameters(ApiParameters):
    tool_outputs: list[ToolOutput] = Field(min_length=1)
