import enum
from typing import Any, Optional, Union

from pydantic import Field, StrictStr, ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_core import PydanticCustomError

from .base import Model
from .file import File

__all__ = (
    "EmbedType",
    "ImageSize",
    "EmbeddedImage",
    "EmbeddedVideo",
    "RemoteContentType",
    "RemoteContentKindTag",
    "RemoteContentKind",
    "SpecialRemoteContent",
    "Embed",
    "SendableEmbed",
)


class EmbedType(str, enum.Enum):
    WEBSITE = "Website"
    IMAGE = "Image"
    VIDEO = "Video"
    TEXT = "Text"
    NONE = "None"


class ImageSize(str, enum.Enum):
    LARGE = "Large"
    PREVIEW = "Preview"


class EmbeddedImage(Model):
    url: str
    width: int
    height: int
    size: ImageSize


class EmbeddedVideo(Model):
    url: str
    width: int
    height: int


class RemoteContentType(str, enum.Enum):
    """The service a link was recognised as"""

    NONE = "None"
    GIF = "GIF"
    YOUTUBE = "YouTube"
    LIGHTSPEED = "Lightspeed"
    TWITCH = "Twitch"
    SPOTIFY = "Spotify"
    SOUNDCLOUD = "Soundcloud"
    BANDCAMP = "Bandcamp"
    STREAMABLE = "Streamable"


class RemoteContentKindTag(str, enum.Enum):
    # Twitch
    VIDEO = "Video"
    CLIP = "Clip"

    # Bandcamp
    ALBUM = "Album"
    TRACK = "Track"

    # Lightspeed and Twitch
    CHANNEL = "Channel"


class RemoteContentKind(Model):
    """Structured form of `SpecialRemoteContent.content_type`"""

    type: RemoteContentKindTag


class SpecialRemoteContent(Model):
    """Extra information for links to well known services"""

    type: RemoteContentType
    id: Optional[str] = None
    """ Not present for `None`, `GIF` and `Soundcloud` """
    timestamp: Optional[str] = None
    """ YouTube only """
    content_type: Optional[Union[StrictStr, RemoteContentKind]] = Field(
        default=None, union_mode="left_to_right"
    )
    """ Lightspeed, Bandcamp, Spotify and Twitch. Either a plain string
    or a `RemoteContentKind`, the string form is tried first.
    """

    @field_validator("content_type", mode="wrap")
    @classmethod
    def _string_or_kind(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError(
                "type_mismatch",
                "expected a string or an object with a content type tag, got {kind}",
                {"kind": type(value).__name__},
            ) from None


class Embed(Model):
    """An embed attached to a message, which fields are set depends
    on `type`
    """

    type: EmbedType
    url: Optional[str] = None
    original_url: Optional[str] = None
    special: Optional[SpecialRemoteContent] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[EmbeddedImage] = None
    video: Optional[EmbeddedVideo] = None
    site_name: Optional[str] = None
    icon_url: Optional[str] = None
    colour: Optional[str] = None
    """ CSS colour """
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[ImageSize] = None
    media: Optional[File] = None


class SendableEmbed(Model):
    """An embed you can attach when sending or editing a message"""

    icon_url: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    media: Optional[str] = None
    """ ID of an uploaded file """
    colour: Optional[str] = None
