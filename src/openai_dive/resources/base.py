"""资源 handle 基类"""

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from ..client import Client


def api_path(*segments: str) -> str:
    """拼接路径，并对每个路径参数做 URL 转义"""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


class Resource:
    """单个资源族的操作集合

    只持有 Client 引用，本身无状态。
    """

    # Assistants 系列资源设为 True，请求附带 OpenAI-Beta 头
    beta: bool = False

    def __init__(self, client: "Client") -> None:
        self._client = client
