"""File 资源"""

from pydantic import Field

from .base import ApiObject, ApiParameters
from .enums import FilePurpose
from .shared import ListObject


class File(ApiObject):
    id: str
    object: str = Field(description="始终为 file")
    bytes: int = Field(ge=0, description="文件大小（字节）")
    created_at: int
    filename: str
    purpose: str


class FileList(ListObject[File]):
    pass


class FileUploadParameters(ApiParameters):
    """上传文件的参数（multipart/form-data）"""

    filename: str
    content: bytes = Field(repr=False)
    purpose: FilePurpose
