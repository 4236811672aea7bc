"""Message 及其多态 content / annotation

MessageContent 与 TextAnnotation 都是按 type 字段分派的封闭联合：
未知或缺失的 type 直接解码失败，不会退化为默认变体。
"""

from typing import Annotated, Literal

from pydantic import Field, model_validator

from .base import ApiObject, ApiParameters
from .enums import MessageRole
from .shared import ListObject


class FileCitation(ApiObject):
    """引用来源文件"""

    file_id: str = Field(description="被引用文件 ID")
    quote: str = Field(description="文件中被引用的原文")


class FilePath(ApiObject):
    """生成文件"""

    file_id: str = Field(description="生成文件 ID")


class _AnnotationSpan(ApiObject):
    """annotation 公共字段：text 中 [start_index, end_index) 区间"""

    text: str = Field(description="content 中需要替换的文本")
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)

    @model_validator(mode="after")
    def check_span(self):
        if self.end_index < self.start_index:
            raise ValueError(
                f"end_index ({self.end_index}) 小于 start_index ({self.start_index})"
            )
        return self


class FileCitationAnnotation(_AnnotationSpan):
    type: Literal["file_citation"]
    file_citation: FileCitation


class FilePathAnnotation(_AnnotationSpan):
    type: Literal["file_path"]
    file_path: FilePath


TextAnnotation = Annotated[
    FileCitationAnnotation | FilePathAnnotation,
    Field(discriminator="type"),
]


class Text(ApiObject):
    """文本内容及其 annotation"""

    value: str
    annotations: list[TextAnnotation]

    @model_validator(mode="after")
    def check_annotation_bounds(self):
        length = len(self.value)
        for i, annotation in enumerate(self.annotations):
            if annotation.end_index > length:
                raise ValueError(
                    f"annotations[{i}] end_index ({annotation.end_index}) "
                    f"超出文本长度 ({length})"
                )
        return self


class ImageFile(ApiObject):
    file_id: str = Field(description="图片文件 ID")


class ImageFileContent(ApiObject):
    type: Literal["image_file"]
    image_file: ImageFile


class TextContent(ApiObject):
    type: Literal["text"]
    text: Text


MessageContent = Annotated[
    ImageFileContent | TextContent,
    Field(discriminator="type"),
]


class Message(ApiObject):
    """Thread 中的一条消息"""

    id: str
    object: str = Field(description="始终为 thread.message")
    created_at: int = Field(description="创建时间（Unix 秒）")
    thread_id: str
    role: MessageRole
    content: list[MessageContent] = Field(description="文本和/或图片内容，可为空列表")
    assistant_id: str | None = None
    run_id: str | None = None
    # 最多 10 个，由服务端校验
    file_ids: list[str]
    # 最多 16 个键值对，由服务端校验；原样保留
    metadata: dict[str, str] | None = None

    def text_values(self) -> list[str]:
        """按顺序提取所有文本 content 的 value"""
        return [block.text.value for block in self.content if isinstance(block, TextContent)]


class MessageList(ListObject[Message]):
    pass


class MessageFile(ApiObject):
    """附加到消息上的文件"""

    id: str
    object: str = Field(description="始终为 thread.message.file")
    created_at: int
    message_id: str


class MessageFileList(ListObject[MessageFile]):
    pass


class MessageParameters(ApiParameters):
    """创建消息的参数

    目前 API 只允许以 user 身份创建消息。
    """

    role: MessageRole = MessageRole.USER
    content: str
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


class ModifyMessageParameters(ApiParameters):
    metadata: dict[str, str] | None = None
