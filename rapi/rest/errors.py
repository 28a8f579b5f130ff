from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

import attr

if TYPE_CHECKING:
    from ..models.permissions import Permission

__all__ = (
    "ClientException",
    "InvalidResponse",
    "DecodeError",
    "APIError",
    "TooMany",
    "MissingPermission",
    "MissingUserPermission",
    "Unauthorized",
    "GenericAPIError",
)


class ClientException(Exception):
    """Base class for HTTP client exceptions"""


@attr.define(init=False, repr=False, eq=False)
class InvalidResponse(ClientException):
    """The HTTP call could not be completed, no usable response was
    received from the server (DNS failure, connection reset, malformed
    status line and so on).
    """

    cause: Optional[BaseException] = attr.field()
    """ The transport error that caused this """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause

        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidResponse({self.args[0]!r})"


@attr.define(init=False, repr=False, eq=False)
class DecodeError(ClientException):
    """The server answered, but the body did not have the expected
    shape. The underlying parse error is kept in `cause`.
    """

    cause: BaseException = attr.field()
    """ The original parse/validation error """

    path: Tuple[Union[str, int], ...] = attr.field()
    """ Coding path of the first field that failed, empty when the
    document itself could not be parsed
    """

    kind: str = attr.field()
    """ Short tag describing the failure, e.g. `type_mismatch` """

    def __init__(
        self,
        cause: BaseException,
        *,
        path: Tuple[Union[str, int], ...] = (),
        kind: str = "invalid",
    ):
        self.cause = cause
        self.path = path
        self.kind = kind

        super().__init__(repr(self))

    @classmethod
    def from_validation_error(cls, error: Any) -> "DecodeError":
        """Builds a `DecodeError` out of a `pydantic.ValidationError`,
        pointing at the first failing location.
        """

        details = error.errors()
        if not details:
            return cls(error)

        first = details[0]
        return cls(error, path=tuple(first.get("loc", ())), kind=first.get("type", "invalid"))

    @property
    def location(self) -> str:
        """The coding path rendered as a dotted string"""
        return ".".join(map(str, self.path)) or "<root>"

    def __repr__(self) -> str:
        return f"{self.kind} at {self.location}: {self.cause}"


@attr.define(init=False, repr=False, eq=False)
class APIError(ClientException):
    """Base class for well-formed error responses from the API. The
    concrete subclass tells you what went wrong, there is no need to
    look at the message.
    """

    status: Optional[int] = attr.field()
    """ The HTTP status code of the response """

    def __init__(self, status: Optional[int] = None):
        self.status = status

        super().__init__(repr(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__} (HTTP {self.status})"


@attr.define(init=False, repr=False, eq=False)
class TooMany(APIError):
    """A limit was hit, e.g. `TooManyServers` or `GroupTooLarge`"""

    type: str = attr.field()
    """ The error tag sent by the server """

    max: int = attr.field()
    """ The limit that was exceeded """

    def __init__(self, type: str, max: int, *, status: Optional[int] = None):
        self.type = type
        self.max = max

        super().__init__(status)

    def __repr__(self) -> str:
        return f"{self.type} (max {self.max})"


@attr.define(init=False, repr=False, eq=False)
class MissingPermission(APIError):
    """You lack a permission needed for the action"""

    permission: "Permission" = attr.field()

    def __init__(self, permission: "Permission", *, status: Optional[int] = None):
        self.permission = permission

        super().__init__(status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}: {self.permission.value}"


@attr.define(init=False, repr=False, eq=False)
class MissingUserPermission(APIError):
    """The target user does not grant you a permission needed for the
    action (for example they do not accept friend requests)
    """

    permission: "Permission" = attr.field()

    def __init__(self, permission: "Permission", *, status: Optional[int] = None):
        self.permission = permission

        super().__init__(status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}: {self.permission.value}"


@attr.define(init=False, repr=False, eq=False)
class Unauthorized(APIError):
    """The token was rejected"""

    def __init__(self, *, status: Optional[int] = 401):
        super().__init__(status)


@attr.define(init=False, repr=False, eq=False)
class GenericAPIError(APIError):
    """Any error the client has no dedicated class for, `type` carries
    the server's tag, e.g. `NotFound` or `InvalidOperation`.
    """

    type: str = attr.field()

    def __init__(self, type: str, *, status: Optional[int] = None):
        self.type = type

        super().__init__(status)

    def __repr__(self) -> str:
        return f"{self.type} (HTTP {self.status})"
