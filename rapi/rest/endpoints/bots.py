from typing import List, Optional, Tuple

from ...models.base import Model
from ...models.bot import Bot, BotRemoveField, PublicBot
from ...models.user import User
from ..builders import JSONBuilder
from ..route import Method, Route

__all__ = ("BotEndpoints",)


class OwnedBot(Model):
    bot: Bot
    user: User


class OwnedBots(Model):
    bots: List[Bot]
    users: List[User]


class EditBotPayload(Model):
    name: Optional[str] = None
    public: Optional[bool] = None
    analytics: Optional[bool] = None
    interactions_url: Optional[str] = None
    remove: Optional[List[BotRemoveField]] = None


class InviteBotPayload(Model):
    server: Optional[str] = None
    group: Optional[str] = None


class BotEndpoints:
    """Bot management endpoints, mixed into `RESTClient`"""

    async def create_bot(self, name: str) -> Bot:
        """Creates a new bot owned by the current user."""
        return await self.request(
            Route(Method.POST, "/bots/create"),
            Bot,
            body=JSONBuilder(name=name),
        )

    async def fetch_public_bot(self, bot: str) -> PublicBot:
        """Fetches what is publicly known about a bot."""
        return await self.request(Route(Method.GET, "/bots/{bot}/invite", bot=bot), PublicBot)

    async def invite_bot(
        self, bot: str, *, server: Optional[str] = None, group: Optional[str] = None
    ) -> None:
        """Adds a bot to a server or a group, exactly one of the two
        must be given.
        """

        if (server is None) == (group is None):
            raise TypeError("pass exactly one of server or group")

        await self.execute(
            Route(Method.POST, "/bots/{bot}/invite", bot=bot),
            body=JSONBuilder(InviteBotPayload(server=server, group=group)),
        )

    async def fetch_bot(self, bot: str) -> Tuple[Bot, User]:
        """Fetches one of your bots along with its user."""
        response = await self.request(Route(Method.GET, "/bots/{bot}", bot=bot), OwnedBot)
        return response.bot, response.user

    async def fetch_owned_bots(self) -> Tuple[List[Bot], List[User]]:
        """Fetches every bot you own along with their users."""
        response = await self.request(Route(Method.GET, "/bots/@me"), OwnedBots)
        return response.bots, response.users

    async def delete_bot(self, bot: str) -> None:
        await self.execute(Route(Method.DELETE, "/bots/{bot}", bot=bot))

    async def edit_bot(
        self,
        bot: str,
        *,
        name: Optional[str] = None,
        public: Optional[bool] = None,
        analytics: Optional[bool] = None,
        interactions_url: Optional[str] = None,
        remove: Optional[List[BotRemoveField]] = None,
    ) -> Bot:
        """Edits one of your bots, only the given fields are changed.
        Fields listed in `remove` are cleared.
        """

        payload = EditBotPayload(
            name=name,
            public=public,
            analytics=analytics,
            interactions_url=interactions_url,
            remove=remove,
        )
        return await self.request(
            Route(Method.PATCH, "/bots/{bot}", bot=bot),
            Bot,
            body=JSONBuilder(payload),
        )
