import enum
from typing import List, Optional

from pydantic import Field

from .base import Model
from .file import File

__all__ = (
    "Presence",
    "Relationship",
    "Status",
    "Profile",
    "BotInformation",
    "User",
    "UserRemoveField",
    "Mutuals",
)


class Presence(str, enum.Enum):
    ONLINE = "Online"
    IDLE = "Idle"
    FOCUS = "Focus"
    BUSY = "Busy"
    INVISIBLE = "Invisible"


class Relationship(str, enum.Enum):
    NONE = "None"
    USER = "User"
    FRIEND = "Friend"
    OUTGOING = "Outgoing"
    INCOMING = "Incoming"
    BLOCKED = "Blocked"
    BLOCKED_OTHER = "BlockedOther"


class Status(Model):
    text: Optional[str] = None
    presence: Optional[Presence] = None


class Profile(Model):
    content: Optional[str] = None
    background: Optional[File] = None


class BotInformation(Model):
    """Present on users that are bots"""

    owner: str


class User(Model):
    id: str = Field(alias="_id")
    username: str
    discriminator: str
    display_name: Optional[str] = None
    avatar: Optional[File] = None
    relations: Optional[List[Relationship]] = None
    badges: Optional[int] = None
    status: Optional[Status] = None
    profile: Optional[Profile] = None
    flags: Optional[int] = None
    privileged: Optional[bool] = None
    bot: Optional[BotInformation] = None
    relationship: Optional[Relationship] = None
    online: Optional[bool] = None


class UserRemoveField(str, enum.Enum):
    """Fields that can be cleared when editing a user"""

    AVATAR = "Avatar"
    STATUS_TEXT = "StatusText"
    STATUS_PRESENCE = "StatusPresence"
    PROFILE_CONTENT = "ProfileContent"
    PROFILE_BACKGROUND = "ProfileBackground"
    DISPLAY_NAME = "DisplayName"


class Mutuals(Model):
    users: List[str]
    servers: List[str]
