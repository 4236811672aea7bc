"""模型基类

ApiObject: 服务端返回的对象，只通过解码构造，构造后不可变。
ApiParameters: 调用方构造的请求参数，未设置的可选字段不会出现在请求体中。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiObject(BaseModel):
    """响应对象基类

    - frozen: 解码后不可变，每次调用产生新实例
    - extra="ignore": 服务端新增字段不影响解码
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """编码为 JSON 兼容 dict

        按解码时的字段存在性输出（exclude_unset）：
        缺省的可选字段保持缺省，显式 null 保持 null。
        """
        return self.model_dump(mode="json", exclude_unset=True)


class ApiParameters(BaseModel):
    """请求参数基类

    extra="forbid": 不接受未声明的字段。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_wire(self) -> dict[str, Any]:
        """编码为请求体，None 字段不输出"""
        return self.model_dump(mode="json", exclude_none=True)
