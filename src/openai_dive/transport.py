"""Transport -- HTTP 传输适配层

Client 只依赖 Transport Protocol；默认实现 HttpxTransport 基于 httpx.AsyncClient。
超时策略属于传输层，核心不做任何超时、重试、连接池管理。
"""

from typing import Protocol

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import TransportError

log = structlog.get_logger()


class TransportResponse(BaseModel):
    """一次 HTTP 交换的原始结果"""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(description="HTTP 状态码")
    headers: dict[str, str] = Field(default_factory=dict, description="响应头")
    body: bytes = Field(default=b"", description="响应体原始字节")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """传输层接口

    实现方负责把传输层失败包装为 TransportError；
    非 2xx 状态码照常返回，由 Client 映射为 APIError。
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        params: dict[str, str] | None = None,
    ) -> TransportResponse:
        """发送请求并返回原始响应"""
        ...

    async def aclose(self) -> None:
        """释放底层资源"""
        ...


class HttpxTransport:
    """基于 httpx.AsyncClient 的默认传输实现"""

    def __init__(
        self,
        timeout_s: float = 600,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """初始化传输层

        Args:
            timeout_s: 请求超时（秒）
            http_client: 外部注入的 httpx.AsyncClient；注入时由调用方负责关闭
        """
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout_s)

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        params: dict[str, str] | None = None,
    ) -> TransportResponse:
        try:
            resp = await self._http_client.request(
                method,
                url,
                headers=headers,
                content=body,
                params=params,
            )
        except httpx.TransportError as e:
            log.warning(
                "transport_error",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(url=url, original_error=e) from e

        return TransportResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def encode_multipart(
    fields: dict[str, str],
    files: dict[str, tuple[str, bytes]],
) -> tuple[bytes, str]:
    """用 httpx 的编码器生成 multipart/form-data 请求体

    Args:
        fields: 普通表单字段
        files: 文件字段，值为 (文件名, 内容)

    Returns:
        (请求体字节, Content-Type 请求头取值)
    """
    request = httpx.Request("POST", "http://multipart.invalid", data=fields, files=files)
    return request.read(), request.headers["Content-Type"]
