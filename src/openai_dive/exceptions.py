"""openai-dive 异常体系

三类错误：解码失败、API 返回非 2xx、传输层失败。
所有公开操作只会抛出 DiveError 的子类。
"""

from typing import Any

# 可重试的 HTTP 状态码（由调用方自行决定是否重试）
RECOVERABLE_STATUS_CODES = {408, 409, 429}


class DiveError(Exception):
    """openai-dive 基础异常"""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可通过重试恢复
        """
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


class DecodeError(DiveError):
    """响应 payload 无法解码为目标类型

    包括缺失必填字段、未知 discriminant、索引区间非法等。
    不会返回部分填充的对象。
    """

    def __init__(
        self,
        model: str,
        reason: str,
        field_path: str = "",
        discriminant: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """
        Args:
            model: 目标类型名称
            reason: 失败原因
            field_path: 出错字段路径（如 content[0].text.annotations[1]）
            discriminant: 未识别的 type 取值（如有）
            errors: pydantic 原始错误列表
        """
        location = field_path or "<root>"
        message = f"无法解码 {model} ({location}): {reason}"
        if discriminant is not None:
            message = f"{message} [type={discriminant!r}]"
        super().__init__(message, recoverable=False)
        self.model = model
        self.reason = reason
        self.field_path = field_path
        self.discriminant = discriminant
        self.errors = errors or []


class APIError(DiveError):
    """API 返回非 2xx 状态码

    message / code 原样保留服务端 error 对象的内容。
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
        error_type: str | None = None,
        param: str | None = None,
        body: bytes = b"",
    ) -> None:
        super().__init__(
            f"[{status_code}] {message}",
            recoverable=status_code in RECOVERABLE_STATUS_CODES or status_code >= 500,
        )
        self.status_code = status_code
        self.message = message
        self.code = code
        self.error_type = error_type
        self.param = param
        self.body = body


class TransportError(DiveError):
    """请求未能完成（DNS、连接、超时、TLS 等）

    与 APIError 区分："API 拒绝了请求" vs "请求根本没有完成"。
    """

    def __init__(self, url: str, original_error: Exception) -> None:
        """
        Args:
            url: 请求地址
            original_error: 原始异常
        """
        super().__init__(f"请求未完成: {url} -- {original_error}", recoverable=True)
        self.url = url
        self.original_error = original_error
