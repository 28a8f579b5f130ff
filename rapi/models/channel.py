import enum
from typing import Dict, List, Optional

from pydantic import Field, NonNegativeInt

from .base import Model
from .file import File

__all__ = ("ChannelType", "PermissionOverride", "Channel", "ChannelRemoveField")


class ChannelType(str, enum.Enum):
    SAVED_MESSAGES = "SavedMessages"
    DIRECT_MESSAGE = "DirectMessage"
    GROUP = "Group"
    TEXT_CHANNEL = "TextChannel"
    VOICE_CHANNEL = "VoiceChannel"


class PermissionOverride(Model):
    """Allow / deny bit pair"""

    allow: NonNegativeInt = Field(alias="a")
    deny: NonNegativeInt = Field(alias="d")


class Channel(Model):
    """Any kind of channel, which fields are set depends on `channel_type`"""

    id: str = Field(alias="_id")
    channel_type: ChannelType

    # SavedMessages
    user: Optional[str] = None

    # DirectMessage
    active: Optional[bool] = None

    # Group
    owner: Optional[str] = None
    permissions: Optional[NonNegativeInt] = None

    # DirectMessage and Group
    recipients: Optional[List[str]] = None

    # TextChannel and VoiceChannel
    server: Optional[str] = None
    default_permissions: Optional[PermissionOverride] = None
    role_permissions: Optional[Dict[str, PermissionOverride]] = None

    last_message_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[File] = None
    nsfw: Optional[bool] = None


class ChannelRemoveField(str, enum.Enum):
    """Fields that can be cleared when editing a channel"""

    DESCRIPTION = "Description"
    ICON = "Icon"
    DEFAULT_PERMISSIONS = "DefaultPermissions"
