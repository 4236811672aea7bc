"""openai-dive 数据模型 -- 公共类型导出

所有请求参数与响应类型从此入口导入。
"""

from .assistant import (
    Assistant,
    AssistantList,
    AssistantParameters,
    AssistantTool,
    AssistantToolParameters,
    CodeInterpreterTool,
    CodeInterpreterToolParameters,
    FunctionSpec,
    FunctionTool,
    FunctionToolParameters,
    ModifyAssistantParameters,
    RetrievalTool,
    RetrievalToolParameters,
)
from .base import ApiObject, ApiParameters
from .chat_completion import (
    ChatCompletionChoice,
    ChatCompletionParameters,
    ChatCompletionResponse,
    ChatMessage,
    ChatMessageParameters,
    FunctionCall,
    FunctionCallParameters,
    FunctionDefinition,
)
from .completion import (
    CompletionChoice,
    CompletionLogprobs,
    CompletionParameters,
    CompletionResponse,
)
from .edit import EditChoice, EditParameters, EditResponse
from .enums import (
    TERMINAL_RUN_STATUSES,
    ChatRole,
    FilePurpose,
    ListOrder,
    MessageRole,
    OpenAIModel,
    RunStatus,
    is_known_model,
)
from .file import File, FileList, FileUploadParameters
from .message import (
    FileCitation,
    FileCitationAnnotation,
    FilePath,
    FilePathAnnotation,
    ImageFile,
    ImageFileContent,
    Message,
    MessageContent,
    MessageFile,
    MessageFileList,
    MessageList,
    MessageParameters,
    ModifyMessageParameters,
    Text,
    TextAnnotation,
    TextContent,
)
from .model import Model, ModelList
from .run import (
    ModifyRunParameters,
    RequiredAction,
    RequiredToolCall,
    Run,
    RunError,
    RunList,
    RunParameters,
    SubmitToolOutputsAction,
    SubmitToolOutputsParameters,
    ToolCallFunction,
    ToolOutput,
)
from .shared import (
    DeletedObject,
    ErrorBody,
    ErrorDetail,
    ListObject,
    ListParameters,
    Usage,
)
from .thread import ModifyThreadParameters, Thread, ThreadParameters

__all__ = [
    # 基类
    "ApiObject",
    "ApiParameters",
    # 枚举
    "MessageRole",
    "ChatRole",
    "RunStatus",
    "TERMINAL_RUN_STATUSES",
    "FilePurpose",
    "ListOrder",
    "OpenAIModel",
    "is_known_model",
    # 共用
    "Usage",
    "DeletedObject",
    "ListObject",
    "ListParameters",
    "ErrorBody",
    "ErrorDetail",
    # Model
    "Model",
    "ModelList",
    # Completion
    "CompletionParameters",
    "CompletionResponse",
    "CompletionChoice",
    "CompletionLogprobs",
    # Chat
    "ChatMessage",
    "ChatMessageParameters",
    "FunctionCall",
    "FunctionCallParameters",
    "FunctionDefinition",
    "ChatCompletionParameters",
    "ChatCompletionResponse",
    "ChatCompletionChoice",
    # Edit
    "EditParameters",
    "EditResponse",
    "EditChoice",
    # Assistant
    "Assistant",
    "AssistantList",
    "AssistantParameters",
    "ModifyAssistantParameters",
    "AssistantTool",
    "CodeInterpreterTool",
    "RetrievalTool",
    "FunctionTool",
    "FunctionSpec",
    "AssistantToolParameters",
    "CodeInterpreterToolParameters",
    "RetrievalToolParameters",
    "FunctionToolParameters",
    # Thread
    "Thread",
    "ThreadParameters",
    "ModifyThreadParameters",
    # Message
    "Message",
    "MessageList",
    "MessageContent",
    "ImageFileContent",
    "ImageFile",
    "TextContent",
    "Text",
    "TextAnnotation",
    "FileCitationAnnotation",
    "FileCitation",
    "FilePathAnnotation",
    "FilePath",
    "MessageFile",
    "MessageFileList",
    "MessageParameters",
    "ModifyMessageParameters",
    # Run
    "Run",
    "RunList",
    "RunParameters",
    "ModifyRunParameters",
    "RequiredAction",
    "RequiredToolCall",
    "SubmitToolOutputsAction",
    "ToolCallFunction",
    "RunError",
    "ToolOutput",
    "SubmitToolOutputsParameters",
    # File
    "File",
    "FileList",
    "FileUploadParameters",
]
