"""枚举定义

包含消息角色、Run 状态、文件用途，以及已知模型名称常量。
"""

from enum import StrEnum


class MessageRole(StrEnum):
    """Assistants 消息角色 -- 仅两个合法取值"""

    USER = "user"
    ASSISTANT = "assistant"


class ChatRole(StrEnum):
    """Chat Completions 消息角色"""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class RunStatus(StrEnum):
    """Run 状态"""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"


# 终态：不会再变化
TERMINAL_RUN_STATUSES: set[RunStatus] = {
    RunStatus.CANCELLED,
    RunStatus.FAILED,
    RunStatus.COMPLETED,
    RunStatus.EXPIRED,
}


class FilePurpose(StrEnum):
    """文件用途"""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"


class ListOrder(StrEnum):
    """列表排序方向（按 created_at）"""

    ASC = "asc"
    DESC = "desc"


class OpenAIModel(StrEnum):
    """已知模型名称常量

    参数中的 model 字段类型为 str：这里只是常用取值的集合，
    未列出的新模型名称可直接传入字符串。
    """

    GPT_4 = "gpt-4"
    GPT_4_0613 = "gpt-4-0613"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_4_VISION_PREVIEW = "gpt-4-vision-preview"
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
    GPT_3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_3_5_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT_3_5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_EDIT_001 = "text-davinci-edit-001"
    TEXT_CURIE_001 = "text-curie-001"
    TEXT_BABBAGE_001 = "text-babbage-001"
    TEXT_ADA_001 = "text-ada-001"


def is_known_model(name: str) -> bool:
    """判断模型名称是否在已知常量集合中"""
    return name in OpenAIModel._value2member_map_
