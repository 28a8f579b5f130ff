import enum
from typing import Final, Optional, final

import attr

__all__ = ("CredentialKind", "Credential", "CredentialHolder", "MissingCredential")

BOT_TOKEN_HEADER: Final[str] = "x-bot-token"
SESSION_TOKEN_HEADER: Final[str] = "x-session-token"


class CredentialKind(enum.Enum):
    """The kind of account a token belongs to"""

    BOT = "bot"
    SESSION = "session"


@final
@attr.define(frozen=True)
class Credential:
    """A token together with the kind of account it authenticates."""

    value: str = attr.field(repr=False)
    """ The raw token, do not share this with anyone! """

    kind: CredentialKind = attr.field(default=CredentialKind.BOT)
    """ Whether the token is a bot token or a user session token """

    @property
    def header(self) -> str:
        """The header the token is sent in"""
        if self.kind is CredentialKind.BOT:
            return BOT_TOKEN_HEADER
        return SESSION_TOKEN_HEADER


@attr.define
class CredentialHolder:
    """Holds the credential used by a client. It may be swapped at any
    time; requests that are already in flight keep the credential they
    started with.
    """

    _credential: Optional[Credential] = attr.field(default=None)

    def current(self) -> Optional[Credential]:
        """Returns the active credential, if any."""
        return self._credential

    def set(self, credential: Optional[Credential]) -> None:
        """Replaces the active credential, `None` clears it."""
        self._credential = credential


class MissingCredential(RuntimeError):
    """Raised when a request is attempted without a credential. This is
    a usage error and is not part of the client exception hierarchy.
    """
