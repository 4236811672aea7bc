"""openai-dive -- OpenAI API 异步类型化客户端

公开接口导出。
"""

from .client import Client

# 配置
from .config import ClientConfig, load_client_config

# 解码
from .decoding import (
    decode,
    decode_json,
    decode_message_content,
    decode_text_annotation,
    encode,
)

# 异常
from .exceptions import APIError, DecodeError, DiveError, TransportError
from .logging_config import enable_logging
from .models import MessageRole, OpenAIModel
from .transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "Client",
    "ClientConfig",
    "load_client_config",
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "decode",
    "decode_json",
    "decode_message_content",
    "decode_text_annotation",
    "encode",
    "DiveError",
    "DecodeError",
    "APIError",
    "TransportError",
    "enable_logging",
    "MessageRole",
    "OpenAIModel",
]
