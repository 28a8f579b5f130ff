from __future__ import annotations

import asyncio
import logging
from typing import Final

import aiohttp
import attr
import yarl

from .. import TRACE
from ..models.instance import ServerConfiguration
from .codec import DEFAULT_CODEC, Codec
from .errors import InvalidResponse

__all__ = ("Config",)

_LOGGER = logging.getLogger(__name__)

DEFAULT_HOST: Final[str] = "revolt.chat"


def _rest_base(config: Config) -> yarl.URL:
    return config.base_url / "api"


@attr.define(frozen=True, kw_only=True)
class Config:
    """Where the API lives. Treat it as immutable configuration built
    once at startup; `discover` returns a new instance instead of
    changing this one.
    """

    base_url: yarl.URL = attr.field(
        default=yarl.URL(f"https://{DEFAULT_HOST}/"), converter=yarl.URL
    )
    """ Root URL of the instance """

    rest_base: yarl.URL = attr.field(
        default=attr.Factory(_rest_base, takes_self=True), converter=yarl.URL
    )
    """ Base URL every REST path is joined onto """

    cdn_url: yarl.URL = attr.field(
        default=yarl.URL("https://autumn.revolt.chat"), converter=yarl.URL
    )
    """ The file server (autumn) """

    gateway_url: yarl.URL = attr.field(
        default=yarl.URL("wss://ws.revolt.chat/"), converter=yarl.URL
    )
    """ The websocket gateway, not used by the REST client itself """

    version: int = attr.field(default=1)
    """ API version """

    @classmethod
    def for_host(cls, host: str) -> Config:
        """Config for a self-hosted instance reachable over https at
        `host`, the other URLs keep their defaults until `discover`
        is called.
        """

        return cls(base_url=yarl.URL(f"https://{host}/"))

    def rest_base_url(self) -> yarl.URL:
        """The URL REST paths are resolved against"""
        return self.rest_base

    async def discover(
        self, session: aiohttp.ClientSession, *, codec: Codec = DEFAULT_CODEC
    ) -> Config:
        """Asks the instance for its configuration and returns a copy of
        this config pointing at the CDN and gateway it advertises.

        Parameters
        ----------
        session : aiohttp.ClientSession
            The session to make the request with.
        codec : rapi.rest.codec.Codec
            Decoder for the configuration document.

        Raises
        ------
        rapi.rest.errors.InvalidResponse
            The instance could not be reached.
        rapi.rest.errors.DecodeError
            The instance did not answer with a configuration document.

        Returns
        -------
        rapi.rest.config.Config
        """

        _LOGGER.log(TRACE, "Fetching server configuration from %s", self.rest_base)

        try:
            async with session.get(self.rest_base) as response:
                data = await response.read()
        except (aiohttp.ClientError, OSError, asyncio.TimeoutError) as exc:
            raise InvalidResponse(f"could not fetch {self.rest_base}", exc) from exc

        configuration = codec.decode(ServerConfiguration, data)

        changes = {"gateway_url": yarl.URL(configuration.ws)}
        _LOGGER.log(TRACE, "Retrieved gateway server: %s", configuration.ws)

        autumn = configuration.features.autumn
        if autumn.enabled:
            _LOGGER.log(TRACE, "Retrieved CDN server: %s", autumn.url)
            changes["cdn_url"] = yarl.URL(autumn.url)
        else:
            _LOGGER.critical("CDN server is not enabled on %s", self.base_url)

        return attr.evolve(self, **changes)
