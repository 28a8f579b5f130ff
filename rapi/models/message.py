import enum
from typing import Dict, List, Optional

from pydantic import Field

from .base import Model
from .embed import Embed
from .file import File
from .user import User

__all__ = (
    "MessageSort",
    "Reply",
    "Masquerade",
    "Interactions",
    "Message",
    "MemberId",
    "Member",
    "MessagesWithUsers",
)


class MessageSort(str, enum.Enum):
    RELEVANCE = "Relevance"
    LATEST = "Latest"
    OLDEST = "Oldest"


class Reply(Model):
    """A reference to a message being replied to"""

    id: str
    mention: bool = False


class Masquerade(Model):
    """Name / avatar override shown instead of the author's"""

    name: Optional[str] = None
    avatar: Optional[str] = None
    colour: Optional[str] = None


class Interactions(Model):
    reactions: Optional[List[str]] = None
    """ Reactions that are added to the message by default """
    restrict_reactions: bool = False
    """ Only allow the reactions listed above """


class Message(Model):
    id: str = Field(alias="_id")
    channel: str
    author: str
    nonce: Optional[str] = None
    content: Optional[str] = None
    attachments: Optional[List[File]] = None
    edited: Optional[str] = None
    embeds: Optional[List[Embed]] = None
    mentions: Optional[List[str]] = None
    replies: Optional[List[str]] = None
    reactions: Optional[Dict[str, List[str]]] = None
    interactions: Optional[Interactions] = None
    masquerade: Optional[Masquerade] = None


class MemberId(Model):
    server: str
    user: str


class Member(Model):
    """A user's membership in a server"""

    id: MemberId = Field(alias="_id")
    joined_at: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[File] = None
    roles: Optional[List[str]] = None
    timeout: Optional[str] = None


class MessagesWithUsers(Model):
    """Messages together with the users (and server members) that
    appear in them
    """

    messages: List[Message]
    users: List[User]
    members: Optional[List[Member]] = None
