import enum

from pydantic import Field

from .base import Model

__all__ = ("InviteType", "Invite")


class InviteType(str, enum.Enum):
    SERVER = "Server"
    GROUP = "Group"


class Invite(Model):
    type: InviteType
    code: str = Field(alias="_id")
    server: str
    creator: str
    channel: str
