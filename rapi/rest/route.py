import enum
from typing import Any, Dict, final
from urllib import parse

import attr
import yarl

__all__ = ("Method", "Route")


class Method(str, enum.Enum):
    """HTTP methods the API uses"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@final
@attr.define(init=False, frozen=True)
class Route:
    """Container class for routes that the http client will interact with,
    contains the method, the path template and the parameters that get
    interpolated into it.
    """

    method: Method = attr.field()
    """ HTTP method the request will take """

    path: str = attr.field()
    """ The path of the Route (not interpolated with the parameters) """

    params: Dict[str, Any] = attr.field()
    """ The parameters that the route will take """

    def __init__(self, method: Method, path: str, **params: Any):
        object.__setattr__(self, "method", Method(method))
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "params", dict(params))

    def compile(self) -> str:
        """The path interpolated with the parameters"""
        return self.path.format_map(self.params)

    def url(self, base: yarl.URL) -> yarl.URL:
        """Joins the path onto a REST base URL, a leading slash on the
        path does not reset the base's own path.

        Each parameter is quoted as a single path segment, so `/` in a
        value is sent as `%2F` and cannot reach another route.

        Raises
        ------
        builtins.ValueError
            A parameter is empty, `.` or `..`.
        """

        quoted: Dict[str, str] = {}
        for key, value in self.params.items():
            value = str(value)
            if value in ("", ".", ".."):
                raise ValueError(f"{value!r} is not a valid value for path parameter {key!r}")
            quoted[key] = parse.quote(value, safe="@:")

        segments = [
            segment.format_map(quoted) for segment in self.path.split("/") if segment
        ]
        return base.joinpath(*segments, encoded=True)
