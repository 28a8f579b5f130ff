"""
Shared fixtures: an in-process fake of the REST API served by aiohttp's
TestServer, an aiohttp session and a client pointed at the fake.
"""

from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

import aiohttp
import attr
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from rapi.rest import Config, Credential, CredentialHolder, CredentialKind, RESTClient

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@attr.define
class RecordedRequest:
    method: str
    path: str
    query: List[Tuple[str, str]]
    headers: Mapping[str, str]
    body: bytes


class FakeAPI:
    """Answers requests under `/api` from a table of canned responses
    and records everything it receives.
    """

    def __init__(self) -> None:
        self.app = web.Application()
        self.app.router.add_route("*", "/api", self._dispatch)
        self.app.router.add_route("*", "/api/{tail:.*}", self._dispatch)
        self.routes: Dict[Tuple[str, str], Handler] = {}
        self.requests: List[RecordedRequest] = []
        self.server: Optional[TestServer] = None

    @property
    def base_url(self):
        return self.server.make_url("/")

    def respond(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
    ) -> None:
        async def handler(request: web.Request) -> web.StreamResponse:
            if json is not None:
                return web.json_response(json, status=status)
            if text is not None:
                return web.Response(text=text, status=status, content_type="text/plain")
            return web.Response(status=status)

        self.routes[(method, path)] = handler

    def handle(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    async def _dispatch(self, request: web.Request) -> web.StreamResponse:
        path = "/" + request.match_info.get("tail", "")
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=list(request.query.items()),
                headers=request.headers,
                body=await request.read(),
            )
        )

        handler = self.routes.get((request.method, path))
        if handler is None:
            return web.json_response({"type": "NotFound"}, status=404)
        return await handler(request)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@pytest_asyncio.fixture
async def api():
    fake = FakeAPI()
    server = TestServer(fake.app)
    await server.start_server()
    fake.server = server

    yield fake

    await server.close()


@pytest_asyncio.fixture
async def session():
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
def bot_token():
    return "bot-token-12345"


@pytest.fixture
def client(api, session, bot_token):
    return RESTClient(
        session=session,
        config=Config(base_url=api.base_url),
        credentials=CredentialHolder(Credential(bot_token, CredentialKind.BOT)),
    )


@pytest.fixture
def user_data():
    return {
        "_id": "01USER",
        "username": "alice",
        "discriminator": "0001",
        "display_name": "Alice",
        "online": True,
    }


@pytest.fixture
def message_data():
    return {
        "_id": "01MSG",
        "channel": "01CHAN",
        "author": "01USER",
        "content": "hello",
    }


@pytest.fixture
def bot_data():
    return {
        "_id": "01BOT",
        "owner": "01USER",
        "token": "secret",
        "public": False,
        "interactions_url": "https://example.com/hook",
    }
