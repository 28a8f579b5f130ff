from typing import Callable, Final, Optional, Tuple

from pydantic import NonNegativeInt

from ..models.base import Model
from ..models.permissions import Permission
from .errors import (
    APIError,
    DecodeError,
    GenericAPIError,
    MissingPermission,
    MissingUserPermission,
    TooMany,
)

__all__ = ("ServerErrorBody", "RULES", "classify")


class ServerErrorBody(Model):
    """The JSON body of a failed request"""

    type: str
    """ The error tag, e.g. `TooManyServers` or `NotFound` """

    max: Optional[NonNegativeInt] = None
    """ Present for `TooMany*` tags and `GroupTooLarge` """

    permission: Optional[Permission] = None
    """ Present for `MissingPermission` and `MissingUserPermission` """


Predicate = Callable[[ServerErrorBody], bool]
Constructor = Callable[[ServerErrorBody, Optional[int]], APIError]


def _require(body: ServerErrorBody, field: str):
    value = getattr(body, field)
    if value is None:
        raise DecodeError(
            ValueError(f"`{body.type}` error is missing `{field}`"),
            path=(field,),
            kind="missing",
        )
    return value


def _too_many(body: ServerErrorBody, status: Optional[int]) -> APIError:
    return TooMany(body.type, _require(body, "max"), status=status)


def _missing_permission(body: ServerErrorBody, status: Optional[int]) -> APIError:
    return MissingPermission(_require(body, "permission"), status=status)


def _missing_user_permission(body: ServerErrorBody, status: Optional[int]) -> APIError:
    return MissingUserPermission(_require(body, "permission"), status=status)


def _generic(body: ServerErrorBody, status: Optional[int]) -> APIError:
    return GenericAPIError(body.type, status=status)


# Evaluated top to bottom, the first matching rule wins.
RULES: Final[Tuple[Tuple[Predicate, Constructor], ...]] = (
    (lambda body: "TooMany" in body.type or body.type == "GroupTooLarge", _too_many),
    (lambda body: body.type == "MissingPermission", _missing_permission),
    (lambda body: body.type == "MissingUserPermission", _missing_user_permission),
    (lambda body: True, _generic),
)


def classify(body: ServerErrorBody, status: Optional[int] = None) -> APIError:
    """Maps a server error body to the matching `APIError`.

    Parameters
    ----------
    body : rapi.rest.classifier.ServerErrorBody
        The decoded error body.
    status : typing.Optional[builtins.int]
        HTTP status of the response, stored on the error.

    Raises
    ------
    rapi.rest.errors.DecodeError
        The tag requires a field (`max` or `permission`) that the body
        does not carry.

    Returns
    -------
    rapi.rest.errors.APIError
        The error to raise, this function does not raise it itself.
    """

    for matches, construct in RULES:
        if matches(body):
            return construct(body, status)

    raise AssertionError("the last rule always matches")
