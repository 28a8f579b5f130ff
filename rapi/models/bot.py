import enum
from typing import Optional

from pydantic import Field, NonNegativeInt

from .base import Model
from .file import File

__all__ = ("Bot", "PublicBot", "BotRemoveField")


class Bot(Model):
    """A bot owned by the current user"""

    id: str = Field(alias="_id")
    owner: str
    token: str = Field(repr=False)
    public: bool
    analytics: Optional[bool] = None
    discoverable: Optional[bool] = None
    interactions_url: Optional[str] = None
    terms_of_service_url: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    flags: Optional[NonNegativeInt] = None


class PublicBot(Model):
    """What anyone can see about a public bot before inviting it"""

    id: str = Field(alias="_id")
    username: str
    avatar: Optional[File] = None
    description: Optional[str] = None


class BotRemoveField(str, enum.Enum):
    TOKEN = "Token"
    INTERACTIONS_URL = "InteractionsURL"
