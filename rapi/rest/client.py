from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Final, Optional, Type, TypeVar

import aiohttp
import attr

from .. import TRACE, __version__
from .auth import Credential, CredentialHolder, CredentialKind, MissingCredential
from .builders import JSONBuilder, ParamsBuilder
from .classifier import ServerErrorBody, classify
from .codec import DEFAULT_CODEC, Codec
from .config import Config
from .endpoints import BotEndpoints, ChannelEndpoints, UserEndpoints
from .errors import InvalidResponse, Unauthorized
from .request import Request
from .response import Response
from .route import Route

__all__ = ("RESTClient",)

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)

USER_AGENT: Final[str] = f"rapi ({__version__})"


@attr.define(kw_only=True)
class RESTClient(BotEndpoints, ChannelEndpoints, UserEndpoints):
    """Client that handles HTTP requests to the Revolt REST API, this
    does not create a session itself and needs one passed to it.

    Every call goes through `execute`: one HTTP request, no retries,
    and any non 2xx answer is raised as a typed error. The client keeps
    no per-request state, so it is safe to run many calls concurrently.
    """

    session: aiohttp.ClientSession = attr.field()
    """ The actual session that the client uses for its HTTP requests,
    configure timeouts on it, the client does not enforce any.
    """

    config: Config = attr.field(factory=Config)
    """ Where the API lives """

    credentials: CredentialHolder = attr.field(factory=CredentialHolder)
    """ Holds the token used for authorization, it is important to note
    that you should not share it with anyone!
    """

    codec: Codec = attr.field(default=DEFAULT_CODEC)
    """ Encoder / decoder shared by every request """

    user_agent: str = attr.field(default=USER_AGENT)
    """ The user agent that you want to use for your HTTP client """

    def set_token(self, token: Optional[str], *, bot: bool = True) -> None:
        """Sets (or clears, with `None`) the token used from the next
        request on.

        Parameters
        ----------
        token : typing.Optional[builtins.str]
            The token.
        bot : builtins.bool
            Whether it is a bot token or a user session token.
        """

        if token is None:
            self.credentials.set(None)
        else:
            kind = CredentialKind.BOT if bot else CredentialKind.SESSION
            self.credentials.set(Credential(token, kind))

    def build_request(
        self,
        route: Route,
        *,
        query: Optional[ParamsBuilder] = None,
        body: Optional[JSONBuilder] = None,
    ) -> Request:
        """Encodes the body and freezes everything into a `Request`.

        Returns
        -------
        rapi.rest.request.Request
        """

        return Request(
            route,
            query=query.build() if query is not None else (),
            body=body.build(self.codec) if body is not None else None,
        )

    async def send(self, request: Request) -> Response:
        """Sends an already built request and returns the response as is,
        whatever its status.

        Raises
        ------
        rapi.rest.auth.MissingCredential
            No credential was set on the client.
        rapi.rest.errors.InvalidResponse
            The HTTP call itself failed.

        Returns
        -------
        rapi.rest.response.Response
        """

        credential = self.credentials.current()
        if credential is None:
            raise MissingCredential("a token must be set before making requests")

        method = request.route.method.value
        path = request.route.compile()

        _LOGGER.log(TRACE, "Making request %s %s", method, path)

        headers: Dict[str, str] = {
            credential.header: credential.value,
            "User-Agent": self.user_agent,
        }

        kwargs: Dict[str, Any] = {"headers": headers}
        if request.has_body:
            headers["Content-Type"] = "application/json"
            kwargs["data"] = request.body

        url = request.route.url(self.config.rest_base_url())
        if request.query:
            url = url.with_query(request.query)

        try:
            async with self.session.request(method, url, **kwargs) as response:
                data = await response.read()
                return Response(
                    response.status,
                    data=data,
                    content_type=response.content_type,
                )
        except (aiohttp.ClientError, OSError, asyncio.TimeoutError) as exc:
            raise InvalidResponse(f"{method} {path} failed: {exc!r}", exc) from exc

    async def execute(
        self,
        route: Route,
        *,
        query: Optional[ParamsBuilder] = None,
        body: Optional[JSONBuilder] = None,
    ) -> bytes:
        """Makes a HTTP request to the provided `Route`.

        Parameters
        ----------
        route : rapi.rest.route.Route
            The route to request to.
        query : typing.Optional[rapi.rest.builders.ParamsBuilder]
            The query string parameters, sent in the order they were
            added.
        body : typing.Optional[rapi.rest.builders.JSONBuilder]
            JSON body of the request.

        Raises
        ------
        rapi.rest.auth.MissingCredential
            No credential was set on the client.
        rapi.rest.errors.InvalidResponse
            The HTTP call itself failed.
        rapi.rest.errors.Unauthorized
            The server answered 401, the body is not looked at.
        rapi.rest.errors.APIError
            Any other error response, see `rapi.rest.classifier`.
        rapi.rest.errors.DecodeError
            An error response whose body could not be understood.

        Returns
        -------
        builtins.bytes
            The raw body of the 2xx response.
        """

        request = self.build_request(route, query=query, body=body)
        response = await self.send(request)

        if response.ok:
            return response.data

        _LOGGER.error(
            "%s %s: response status code %s is not 2xx",
            route.method.value,
            route.compile(),
            response.code,
        )
        _LOGGER.debug("Raw response: %s", response.text())

        if response.code == 401:
            raise Unauthorized(status=response.code)

        error = self.codec.decode(ServerErrorBody, response.data)
        raise classify(error, response.code)

    async def request(
        self,
        route: Route,
        response_type: Type[T],
        *,
        query: Optional[ParamsBuilder] = None,
        body: Optional[JSONBuilder] = None,
    ) -> T:
        """Same as `execute`, but decodes the response body as
        `response_type`.

        Raises
        ------
        rapi.rest.errors.DecodeError
            The body does not match `response_type`.

        Returns
        -------
        T
        """

        data = await self.execute(route, query=query, body=body)
        return self.codec.decode(response_type, data)
