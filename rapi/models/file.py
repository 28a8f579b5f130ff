import enum
from typing import Optional

from pydantic import Field, NonNegativeInt

from .base import Model

__all__ = ("MetadataType", "Metadata", "File")


class MetadataType(str, enum.Enum):
    FILE = "File"
    TEXT = "Text"
    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"


class Metadata(Model):
    """What the CDN figured out about an uploaded file"""

    type: MetadataType
    width: Optional[int] = None
    """ Only present for images and videos """
    height: Optional[int] = None
    """ Only present for images and videos """


class File(Model):
    """A file stored on the CDN (avatars, icons, attachments...)"""

    id: str = Field(alias="_id")
    tag: str
    """ The bucket the file was uploaded to """
    filename: str
    content_type: str
    size: NonNegativeInt
    metadata: Metadata
    deleted: Optional[bool] = None
    reported: Optional[bool] = None
    message_id: Optional[str] = None
    user_id: Optional[str] = None
    server_id: Optional[str] = None
    object_id: Optional[str] = None
