"""ClientConfig -- 客户端配置

不可变配置对象，显式传入 Client，不使用全局状态。
load_client_config() 提供从环境变量加载的便捷入口。
"""

import os

import structlog
from pydantic import BaseModel, ConfigDict, Field, SecretStr

log = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_S = 600


class ClientConfig(BaseModel):
    """客户端配置

    环境变量:
        OPENAI_API_KEY: API 密钥（Bearer 凭证）
        OPENAI_BASE_URL: API 基础 URL（默认 https://api.openai.com/v1）
        OPENAI_ORGANIZATION: 组织 ID（可选，映射到 OpenAI-Organization 请求头）
        OPENAI_DIVE_TIMEOUT_S: 传输层超时（秒，默认 600）
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(description="API 密钥")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API 基础 URL")
    organization: str | None = Field(default=None, description="组织 ID")
    timeout_s: int = Field(
        default=DEFAULT_TIMEOUT_S,
        ge=1,
        description="传输层超时（秒），仅由 HttpxTransport 使用",
    )

    def api_url(self, path: str) -> str:
        """拼接完整请求 URL"""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def default_headers(self) -> dict[str, str]:
        """每个请求都携带的请求头"""
        headers = {
            "Authorization": f"Bearer {self.api_key.get_secret_value()}",
        }
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers


def load_client_config() -> ClientConfig:
    """从环境变量加载客户端配置

    环境变量映射:
        OPENAI_API_KEY -> api_key (默认 "")
        OPENAI_BASE_URL -> base_url
        OPENAI_ORGANIZATION -> organization
        OPENAI_DIVE_TIMEOUT_S -> timeout_s

    Returns:
        ClientConfig 实例
    """
    kwargs: dict = {"api_key": SecretStr(os.environ.get("OPENAI_API_KEY", ""))}

    if val := os.environ.get("OPENAI_BASE_URL"):
        kwargs["base_url"] = val

    if val := os.environ.get("OPENAI_ORGANIZATION"):
        kwargs["organization"] = val

    if val := os.environ.get("OPENAI_DIVE_TIMEOUT_S"):
        try:
            kwargs["timeout_s"] = int(val)
        except ValueError:
            log.warning(
                "invalid_timeout_config",
                env_var="OPENAI_DIVE_TIMEOUT_S",
                value=val,
                fallback=DEFAULT_TIMEOUT_S,
            )

    if not kwargs["api_key"].get_secret_value():
        log.warning("api_key_missing", env_var="OPENAI_API_KEY")

    return ClientConfig(**kwargs)
