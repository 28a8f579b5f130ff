from typing import final

import attr

__all__ = ("Response",)


@final
@attr.define
class Response:
    """The object that represents the response that the API sends
    back after a HTTP request.
    """

    code: int = attr.field()
    """ The status code of the response """

    data: bytes = attr.field(repr=False)
    """ The raw body of the response """

    content_type: str = attr.field(default="")
    """ The content-type of the response, most likely
    application/json but could be something else.
    """

    @property
    def ok(self) -> bool:
        """Whether the status code is in the 2xx range"""
        return 200 <= self.code < 300

    def text(self) -> str:
        """The body decoded as UTF-8, invalid bytes are replaced"""
        return self.data.decode("utf-8", errors="replace")
