"""Client 单元测试

Mock Transport，验证请求组装（方法、路径、请求头、请求体）、
非 2xx 映射为 APIError、传输失败映射为 TransportError。
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from conftest import json_response
from openai_dive.client import Client
from openai_dive.config import ClientConfig
from openai_dive.exceptions import APIError, DecodeError, TransportError
from openai_dive.models import Message, Model, ModelList
from openai_dive.transport import TransportResponse
from pydantic import SecretStr


def _sent(transport: AsyncMock) -> tuple[str, str, dict, bytes | None, dict | None]:
    """取出最近一次 send() 的参数"""
    call = transport.send.call_args
    return (
        call.args[0],
        call.args[1],
        call.kwargs["headers"],
        call.kwargs["body"],
        call.kwargs["params"],
    )


MODEL_PAYLOAD = {
    "id": "text-davinci-003",
    "object": "model",
    "created": 1669599635,
    "owned_by": "openai-internal",
}


class TestRequest:
    """Client.request() 通用行为"""

    async def test_authorization_header(self, client, transport):
        """携带 Bearer 凭证"""
        transport.send.return_value = json_response(MODEL_PAYLOAD)

        await client.request(Model, "GET", "/models/text-davinci-003")

        method, url, headers, body, params = _sent(transport)
        assert method == "GET"
        assert url == "https://api.test/v1/models/text-davinci-003"
        assert headers["Authorization"] == "Bearer sk-test"
        assert "OpenAI-Organization" not in headers
        assert "OpenAI-Beta" not in headers
        assert body is None
        assert params is None

    async def test_organization_header(self, transport):
        """配置了组织 ID 时附带 OpenAI-Organization"""
        config = ClientConfig(api_key=SecretStr("sk-test"), organization="org-123")
        client = Client(config, transport=transport)
        transport.send.return_value = json_response(MODEL_PAYLOAD)

        await client.request(Model, "GET", "/models/x")

        _, url, headers, _, _ = _sent(transport)
        assert url == "https://api.openai.com/v1/models/x"
        assert headers["OpenAI-Organization"] == "org-123"

    async def test_returns_typed_result(self, client, transport):
        transport.send.return_value = json_response(MODEL_PAYLOAD)

        result = await client.request(Model, "GET", "/models/text-davinci-003")

        assert isinstance(result, Model)
        assert result.owned_by == "openai-internal"

    async def test_concurrent_requests(self, client, transport):
        """同一客户端可并发调用"""
        transport.send.return_value = json_response(MODEL_PAYLOAD)

        results = await asyncio.gather(
            *(client.request(Model, "GET", f"/models/m{i}") for i in range(5))
        )

        assert len(results) == 5
        assert transport.send.call_count == 5


class TestAPIError:
    """非 2xx 响应"""

    async def test_structured_error_body(self, client, transport):
        """error 对象中的 message / code 原样保留"""
        transport.send.return_value = json_response(
            {"error": {"message": "invalid model", "code": "model_not_found"}},
            status_code=404,
        )

        with pytest.raises(APIError) as exc_info:
            await client.models().get("gpt-9")

        err = exc_info.value
        assert err.status_code == 404
        assert err.code == "model_not_found"
        assert err.message == "invalid model"
        assert err.recoverable is False

    async def test_error_type_and_param(self, client, transport):
        transport.send.return_value = json_response(
            {
                "error": {
                    "message": "'messages' is a required property",
                    "type": "invalid_request_error",
                    "param": "messages",
                    "code": None,
                }
            },
            status_code=400,
        )

        with pytest.raises(APIError) as exc_info:
            await client.request(Model, "POST", "/chat/completions")

        assert exc_info.value.error_type == "invalid_request_error"
        assert exc_info.value.param == "messages"
        assert exc_info.value.code is None

    async def test_plain_text_body(self, client, transport):
        """非 JSON 错误体以文本作为 message"""
        transport.send.return_value = TransportResponse(
            status_code=502, body=b"Bad Gateway from upstream"
        )

        with pytest.raises(APIError) as exc_info:
            await client.request(Model, "GET", "/models/x")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway from upstream"
        assert exc_info.value.code is None
        assert exc_info.value.recoverable is True

    async def test_empty_body_uses_status_phrase(self, client, transport):
        transport.send.return_value = TransportResponse(status_code=429, body=b"")

        with pytest.raises(APIError) as exc_info:
            await client.request(Model, "GET", "/models/x")

        assert exc_info.value.message == "Too Many Requests"
        assert exc_info.value.recoverable is True

    async def test_numeric_error_code(self, client, transport):
        transport.send.return_value = json_response(
            {"error": {"message": "quota", "code": 1008}}, status_code=403
        )

        with pytest.raises(APIError) as exc_info:
            await client.request(Model, "GET", "/models/x")

        assert exc_info.value.code == "1008"


class TestTransportFailure:
    """传输层失败"""

    async def test_transport_error_passthrough(self, client, transport):
        """Transport 已包装的 TransportError 原样抛出"""
        original = TransportError(url="https://api.test/v1/models", original_error=OSError())
        transport.send.side_effect = original

        with pytest.raises(TransportError) as exc_info:
            await client.models().list()

        assert exc_info.value is original

    async def test_connection_error_wrapped(self, client, transport):
        """未包装的连接错误映射为 TransportError"""
        transport.send.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(TransportError) as exc_info:
            await client.models().list()

        assert "api.test" in exc_info.value.url
        assert isinstance(exc_info.value.original_error, ConnectionRefusedError)
        assert exc_info.value.recoverable is True

    async def test_timeout_wrapped(self, client, transport):
        transport.send.side_effect = TimeoutError("timed out")

        with pytest.raises(TransportError):
            await client.models().list()

    async def test_cancellation_propagates(self, client, transport):
        """取消不被吞掉"""
        transport.send.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await client.models().list()


class TestDecodeFailure:
    async def test_malformed_response(self, client, transport):
        """2xx 但响应体不符合类型时抛出 DecodeError"""
        transport.send.return_value = json_response({"id": "m", "object": "model"})

        with pytest.raises(DecodeError) as exc_info:
            await client.models().get("m")

        assert exc_info.value.model == "Model"

    async def test_role_system_rejected(self, client, transport, message_payload):
        """role 为 system 的消息响应解码失败"""
        message_payload["role"] = "system"
        transport.send.return_value = json_response(message_payload)

        with pytest.raises(DecodeError) as exc_info:
            await client.messages().retrieve("thread_abc123", "msg_abc123")

        assert exc_info.value.field_path == "role"


class TestLifecycle:
    async def test_aclose_closes_transport(self, client, transport):
        await client.aclose()
        transport.aclose.assert_awaited_once()

    async def test_async_context_manager(self, config, transport):
        async with Client(config, transport=transport) as client:
            assert isinstance(client, Client)
        transport.aclose.assert_awaited_once()

    async def test_from_env(self, monkeypatch, transport):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1")
        transport.send.return_value = json_response({"object": "list", "data": []})

        client = Client.from_env(transport=transport)
        result = await client.models().list()

        assert isinstance(result, ModelList)
        assert result.data == []
        _, url, headers, _, _ = _sent(transport)
        assert url == "http://localhost:8080/v1/models"
        assert headers["Authorization"] == "Bearer sk-env"


async def test_message_round_trip_through_client(client, transport, message_payload):
    """经 Client 解码的消息与原始 payload 字段一致"""
    transport.send.return_value = json_response(message_payload)

    message = await client.messages().retrieve("thread_abc123", "msg_abc123")

    assert isinstance(message, Message)
    assert message.to_wire() == message_payload
