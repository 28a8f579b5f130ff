from typing import Optional, Tuple, final

import attr

from .route import Route

__all__ = ("Request",)


@final
@attr.define(frozen=True)
class Request:
    """Represents a HTTP request that has not been sent yet. Built
    fresh for every call and never modified afterwards.
    """

    route: Route = attr.field()
    """ Where the request goes """

    query: Tuple[Tuple[str, str], ...] = attr.field(default=(), converter=tuple)
    """ Query string parameters, in order """

    body: Optional[bytes] = attr.field(default=None)
    """ The encoded JSON body, `None` when the request has none """

    @property
    def has_body(self) -> bool:
        """Whether the request carries a JSON body"""
        return self.body is not None
