"""响应解码

把原始 JSON 解码为类型化对象。多态 content / annotation 由 pydantic 按 type
字段分派（discriminated union）；这里负责把 ValidationError 转换为带
字段路径与 discriminant 的 DecodeError。
"""

import json
import types
import typing
from typing import Annotated, Any, TypeVar, get_args, get_origin

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from .exceptions import DecodeError
from .models.base import ApiObject
from .models.message import MessageContent, TextAnnotation

log = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)

_MESSAGE_CONTENT_ADAPTER: TypeAdapter = TypeAdapter(MessageContent)
_TEXT_ANNOTATION_ADAPTER: TypeAdapter = TypeAdapter(TextAnnotation)


def decode(model: type[M], payload: Any) -> M:
    """将已解析的 JSON 对象解码为 model

    Raises:
        DecodeError: payload 不符合 model 的结构
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise _to_decode_error(model.__name__, model, e) from e


def decode_json(model: type[M], raw: bytes | str) -> M:
    """将原始响应体解码为 model

    Raises:
        DecodeError: 响应体不是合法 JSON，或不符合 model 的结构
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        log.warning("decode_failed", model=model.__name__, reason="invalid_json")
        raise DecodeError(model=model.__name__, reason=f"响应体不是合法 JSON: {e}") from e
    return decode(model, payload)


def decode_message_content(payload: Any) -> ApiObject:
    """解码单个 MessageContent（ImageFileContent 或 TextContent）"""
    try:
        return _MESSAGE_CONTENT_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise _to_decode_error("MessageContent", MessageContent, e) from e


def decode_text_annotation(payload: Any) -> ApiObject:
    """解码单个 TextAnnotation（FileCitationAnnotation 或 FilePathAnnotation）"""
    try:
        return _TEXT_ANNOTATION_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise _to_decode_error("TextAnnotation", TextAnnotation, e) from e


def encode(obj: ApiObject) -> dict[str, Any]:
    """编码为 JSON 兼容 dict，decode(type(obj), encode(obj)) == obj"""
    return obj.to_wire()


def _to_decode_error(name: str, root: Any, error: ValidationError) -> DecodeError:
    errors = error.errors(include_url=False)
    first = errors[0]
    field_path, discriminant = _render_location(root, first["loc"])

    if first["type"] == "union_tag_invalid":
        discriminant = _raw_tag(first)
    elif first["type"] == "union_tag_not_found":
        discriminant = None

    log.warning(
        "decode_failed",
        model=name,
        field_path=field_path,
        discriminant=discriminant,
        error_type=first["type"],
        error_count=len(errors),
    )
    return DecodeError(
        model=name,
        reason=first["msg"],
        field_path=field_path,
        discriminant=discriminant,
        errors=[
            {"loc": err["loc"], "type": err["type"], "msg": err["msg"]}
            for err in errors
        ],
    )


def _raw_tag(error: dict[str, Any]) -> str | None:
    """取出输入中的 type 原值，null 保持为 None（ctx 中的 tag 会渲染为字符串）"""
    payload = error.get("input")
    if isinstance(payload, dict):
        tag = payload.get("type")
        return None if tag is None else str(tag)
    return str((error.get("ctx") or {}).get("tag"))


def _render_location(root: Any, loc: tuple) -> tuple[str, str | None]:
    """把 pydantic 的 loc 渲染为字段路径

    pydantic 会在 discriminated union 的位置插入变体 tag，
    这里沿类型注解同步遍历，识别并剔除 tag，同时记录最内层的 discriminant。

    Returns:
        (字段路径, discriminant)
    """
    path = ""
    discriminant: str | None = None
    tp, tagged = _unwrap(root)

    for item in loc:
        if tagged and isinstance(item, str):
            variant = _match_variant(tp, item)
            if variant is not None:
                discriminant = item
                tp, tagged = variant, False
                continue

        if isinstance(item, int):
            path += f"[{item}]"
        else:
            path += f".{item}" if path else str(item)
        tp, tagged = _step(tp, item)

    return path, discriminant


def _unwrap(tp: Any) -> tuple[Any, bool]:
    """剥离 Annotated / Optional，返回 (类型, 是否为 discriminated union)"""
    tagged = False
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            args = get_args(tp)
            if any(isinstance(m, FieldInfo) and m.discriminator for m in args[1:]):
                tagged = True
            tp = args[0]
        elif origin in (typing.Union, types.UnionType):
            members = [a for a in get_args(tp) if a is not type(None)]
            if len(members) != 1:
                return tp, tagged
            tp = members[0]
        else:
            return tp, tagged


def _match_variant(union: Any, tag: str) -> type[BaseModel] | None:
    for member in get_args(union):
        if isinstance(member, type) and issubclass(member, BaseModel):
            field = member.model_fields.get("type")
            if field is not None and tag in get_args(field.annotation):
                return member
    return None


def _step(tp: Any, item: Any) -> tuple[Any, bool]:
    """沿 loc 的一个片段进入子类型；无法识别时返回 (None, False)"""
    origin = get_origin(tp)
    if origin is list and isinstance(item, int):
        return _unwrap(get_args(tp)[0])
    if origin is dict and isinstance(item, str):
        return _unwrap(get_args(tp)[1])
    if isinstance(tp, type) and issubclass(tp, BaseModel) and isinstance(item, str):
        field = tp.model_fields.get(item)
        if field is None:
            return None, False
        inner, tagged = _unwrap(field.annotation)
        return inner, tagged or bool(field.discriminator)
    return None, False
