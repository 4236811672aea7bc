"""openai-dive 测试 fixtures"""

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest
from openai_dive.client import Client
from openai_dive.config import ClientConfig
from openai_dive.transport import TransportResponse
from pydantic import SecretStr


def json_response(payload: Any, status_code: int = 200) -> TransportResponse:
    """构造 JSON 响应"""
    return TransportResponse(
        status_code=status_code,
        headers={"content-type": "application/json"},
        body=json.dumps(payload).encode("utf-8"),
    )


@pytest.fixture
def config() -> ClientConfig:
    """测试用客户端配置"""
    return ClientConfig(
        api_key=SecretStr("sk-test"),
        base_url="https://api.test/v1",
    )


@pytest.fixture
def transport() -> AsyncMock:
    """Mock Transport，默认返回空 JSON 对象"""
    mock = AsyncMock()
    mock.send = AsyncMock(return_value=json_response({}))
    return mock


@pytest.fixture
def client(config, transport) -> Client:
    """使用 Mock Transport 的客户端"""
    return Client(config, transport=transport)


@pytest.fixture
def text_content_payload() -> dict:
    """带一个 file_citation annotation 的 text content"""
    return {
        "type": "text",
        "text": {
            "value": "Hi [1]",
            "annotations": [
                {
                    "type": "file_citation",
                    "text": "[1]",
                    "file_citation": {"file_id": "file-abc", "quote": "hello"},
                    "start_index": 3,
                    "end_index": 6,
                }
            ],
        },
    }


@pytest.fixture
def image_content_payload() -> dict:
    return {"type": "image_file", "image_file": {"file_id": "file-img"}}


@pytest.fixture
def message_payload(text_content_payload, image_content_payload) -> dict:
    """完整的 thread.message 响应"""
    return {
        "id": "msg_abc123",
        "object": "thread.message",
        "created_at": 1699017614,
        "thread_id": "thread_abc123",
        "role": "assistant",
        "content": [text_content_payload, image_content_payload],
        "assistant_id": "asst_abc123",
        "run_id": "run_abc123",
        "file_ids": ["file-abc"],
        "metadata": {"source": "test"},
    }
