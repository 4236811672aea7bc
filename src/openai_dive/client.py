"""Client -- API 客户端入口

每个资源族一个 handle（client.models()、client.threads() ...）；
handle 负责组装请求，Client.request() 负责发送、状态码检查与解码。
"""

import json
import time
from http import HTTPStatus
from typing import TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from .config import ClientConfig, load_client_config
from .decoding import decode_json
from .exceptions import APIError, DiveError, TransportError
from .models.base import ApiParameters
from .models.shared import ErrorBody
from .resources import (
    Assistants,
    Chat,
    Completions,
    Edits,
    Files,
    Messages,
    Models,
    Runs,
    Threads,
)
from .transport import HttpxTransport, Transport, TransportResponse

log = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)

# Assistants 系列接口（assistants/threads/messages/runs）需要的 beta 请求头
ASSISTANTS_BETA_HEADER = {"OpenAI-Beta": "assistants=v1"}

# 传输层实现未自行包装时，这些异常同样视为"请求未完成"
_CONNECTION_ERROR_TYPES = (ConnectionError, OSError, TimeoutError)


class Client:
    """openai-dive 客户端

    只持有不可变配置和传输层，可在多个并发任务间共享。
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport | None = None,
    ) -> None:
        """初始化客户端

        Args:
            config: 客户端配置（API key、base URL、组织 ID）
            transport: 传输层实现，None 时使用 HttpxTransport
        """
        self.config = config
        self._transport = transport or HttpxTransport(timeout_s=config.timeout_s)

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> "Client":
        """从环境变量构造客户端"""
        return cls(load_client_config(), transport=transport)

    def models(self) -> Models:
        return Models(self)

    def completions(self) -> Completions:
        return Completions(self)

    def chat(self) -> Chat:
        return Chat(self)

    def edits(self) -> Edits:
        return Edits(self)

    def assistants(self) -> Assistants:
        return Assistants(self)

    def threads(self) -> Threads:
        return Threads(self)

    def messages(self) -> Messages:
        return Messages(self)

    def runs(self) -> Runs:
        return Runs(self)

    def files(self) -> Files:
        return Files(self)

    async def request(
        self,
        response_model: type[M],
        method: str,
        path: str,
        *,
        params: ApiParameters | None = None,
        query: dict[str, str] | None = None,
        beta: bool = False,
    ) -> M:
        """发送 JSON 请求并解码响应

        Args:
            response_model: 响应类型
            method: HTTP 方法
            path: 已完成路径参数替换的路径（如 /threads/thread_abc/messages）
            params: 请求参数，None 字段不会写入请求体
            query: URL 查询参数
            beta: 是否附带 Assistants beta 请求头

        Returns:
            解码后的 response_model 实例

        Raises:
            APIError: 非 2xx 状态码
            TransportError: 请求未完成
            DecodeError: 响应体不符合 response_model
        """
        body = None
        content_type = None
        if params is not None:
            body = json.dumps(params.to_wire()).encode("utf-8")
            content_type = "application/json"

        resp = await self.send(
            method,
            path,
            body=body,
            content_type=content_type,
            query=query,
            beta=beta,
        )
        return decode_json(response_model, resp.body)

    async def send(
        self,
        method: str,
        path: str,
        *,
        body: bytes | None = None,
        content_type: str | None = None,
        query: dict[str, str] | None = None,
        beta: bool = False,
    ) -> TransportResponse:
        """发送请求并检查状态码，返回原始响应

        Raises:
            APIError: 非 2xx 状态码
            TransportError: 请求未完成
        """
        url = self.config.api_url(path)
        headers = self.config.default_headers()
        if content_type is not None:
            headers["Content-Type"] = content_type
        if beta:
            headers.update(ASSISTANTS_BETA_HEADER)

        start_time = time.monotonic()
        log.debug("api_request_start", method=method, path=path)

        try:
            resp = await self._transport.send(
                method,
                url,
                headers=headers,
                body=body,
                params=query,
            )
        except DiveError:
            raise
        except _CONNECTION_ERROR_TYPES as e:
            log.warning(
                "transport_error",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(url=url, original_error=e) from e

        duration_ms = int((time.monotonic() - start_time) * 1000)

        if not resp.is_success:
            error = _api_error(resp)
            log.warning(
                "api_request_failed",
                method=method,
                path=path,
                status_code=resp.status_code,
                code=error.code,
                duration_ms=duration_ms,
            )
            raise error

        log.info(
            "api_request_completed",
            method=method,
            path=path,
            status_code=resp.status_code,
            duration_ms=duration_ms,
        )
        return resp

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _api_error(resp: TransportResponse) -> APIError:
    """把非 2xx 响应映射为 APIError

    响应体是 {"error": {...}} 时保留服务端的 message/code/type/param，
    否则以响应文本（或状态码短语）作为 message。
    """
    try:
        detail = ErrorBody.model_validate_json(resp.body).error
    except ValidationError:
        text = resp.body.decode("utf-8", errors="replace").strip()
        return APIError(
            status_code=resp.status_code,
            message=text or _status_phrase(resp.status_code),
            body=resp.body,
        )

    return APIError(
        status_code=resp.status_code,
        message=detail.message or _status_phrase(resp.status_code),
        code=str(detail.code) if detail.code is not None else None,
        error_type=detail.type,
        param=detail.param,
        body=resp.body,
    )


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP {status_code}"
