"""Tests for the endpoint configuration and instance discovery."""

import logging

import pytest
import yarl
from aiohttp import web
from aiohttp.test_utils import TestServer

from rapi.rest import Config, DecodeError, InvalidResponse


def configuration(*, autumn_enabled=True):
    return {
        "revolt": "0.6.5",
        "features": {
            "captcha": {"enabled": False, "key": ""},
            "email": False,
            "invite_only": False,
            "autumn": {"enabled": autumn_enabled, "url": "https://cdn.example.com"},
            "january": {"enabled": True, "url": "https://proxy.example.com"},
            "voso": {"enabled": False, "url": "", "ws": ""},
        },
        "ws": "wss://events.example.com",
        "app": "https://app.example.com",
        "vapid": "key",
        "build": {
            "commit_sha": "abc",
            "commit_timestamp": "0",
            "semver": "0.6.5",
            "origin_url": "https://example.com/repo",
            "timestamp": "0",
        },
    }


class TestDefaults:
    def test_public_instance(self):
        config = Config()

        assert config.base_url == yarl.URL("https://revolt.chat/")
        assert config.rest_base_url() == yarl.URL("https://revolt.chat/api")
        assert config.cdn_url == yarl.URL("https://autumn.revolt.chat")
        assert config.gateway_url == yarl.URL("wss://ws.revolt.chat/")
        assert config.version == 1

    def test_for_host(self):
        config = Config.for_host("chat.example.com")

        assert config.rest_base_url() == yarl.URL("https://chat.example.com/api")

    def test_strings_are_converted(self):
        config = Config(base_url="http://localhost:8000/", rest_base="http://localhost:14702")

        assert config.rest_base_url() == yarl.URL("http://localhost:14702")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Config().version = 2


class TestDiscover:
    async def test_updates_cdn_and_gateway(self, api, session):
        api.respond("GET", "/", json=configuration())
        config = Config(base_url=api.base_url)

        discovered = await config.discover(session)

        assert discovered.cdn_url == yarl.URL("https://cdn.example.com")
        assert discovered.gateway_url == yarl.URL("wss://events.example.com")
        assert discovered.rest_base == config.rest_base
        assert config.cdn_url == yarl.URL("https://autumn.revolt.chat")

    async def test_disabled_cdn_is_kept(self, api, session, caplog):
        api.respond("GET", "/", json=configuration(autumn_enabled=False))
        config = Config(base_url=api.base_url)

        discovered = await config.discover(session)

        assert discovered.cdn_url == config.cdn_url
        assert discovered.gateway_url == yarl.URL("wss://events.example.com")
        assert any(r.levelno == logging.CRITICAL for r in caplog.records)

    async def test_not_a_configuration(self, api, session):
        api.respond("GET", "/", json={"hello": "world"})

        with pytest.raises(DecodeError):
            await Config(base_url=api.base_url).discover(session)

    async def test_unreachable(self, session):
        server = TestServer(web.Application())
        await server.start_server()
        base_url = server.make_url("/")
        await server.close()

        with pytest.raises(InvalidResponse):
            await Config(base_url=base_url).discover(session)
