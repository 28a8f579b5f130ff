from typing import List, Optional

from ...models.base import Model
from ...models.channel import Channel
from ...models.user import Mutuals, Profile, Status, User, UserRemoveField
from ..builders import JSONBuilder
from ..route import Method, Route

__all__ = ("UserEndpoints",)


class UserFlags(Model):
    flags: int


class EditUserPayload(Model):
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    """ ID of an uploaded file """
    status: Optional[Status] = None
    profile: Optional[Profile] = None
    badges: Optional[int] = None
    flags: Optional[int] = None
    remove: Optional[List[UserRemoveField]] = None


class UserEndpoints:
    """User, relationship and direct message endpoints, mixed into
    `RESTClient`
    """

    async def fetch_self(self) -> User:
        return await self.request(Route(Method.GET, "/users/@me"), User)

    async def fetch_user(self, user: str) -> User:
        return await self.request(Route(Method.GET, "/users/{user}", user=user), User)

    async def edit_user(
        self,
        user: str = "@me",
        *,
        display_name: Optional[str] = None,
        avatar: Optional[str] = None,
        status: Optional[Status] = None,
        profile: Optional[Profile] = None,
        badges: Optional[int] = None,
        flags: Optional[int] = None,
        remove: Optional[List[UserRemoveField]] = None,
    ) -> User:
        """Edits a user, yourself by default. Only the given fields are
        changed, the ones listed in `remove` are cleared.
        """

        payload = EditUserPayload(
            display_name=display_name,
            avatar=avatar,
            status=status,
            profile=profile,
            badges=badges,
            flags=flags,
            remove=remove,
        )
        return await self.request(
            Route(Method.PATCH, "/users/{user}", user=user),
            User,
            body=JSONBuilder(payload),
        )

    async def fetch_user_flags(self, user: str) -> int:
        response = await self.request(
            Route(Method.GET, "/users/{user}/flags", user=user), UserFlags
        )
        return response.flags

    async def change_username(self, username: str, password: str) -> User:
        return await self.request(
            Route(Method.PATCH, "/users/@me/username"),
            User,
            body=JSONBuilder(username=username, password=password),
        )

    async def fetch_profile(self, user: str) -> Profile:
        return await self.request(Route(Method.GET, "/users/{user}/profile", user=user), Profile)

    async def fetch_direct_messages(self) -> List[Channel]:
        """Fetches your direct message and group channels."""
        return await self.request(Route(Method.GET, "/users/dms"), List[Channel])

    async def open_direct_message(self, user: str) -> Channel:
        """Opens (or fetches the existing) direct message channel with
        a user.
        """
        return await self.request(Route(Method.GET, "/users/{user}/dm", user=user), Channel)

    async def fetch_mutual(self, user: str) -> Mutuals:
        """Fetches the friends and servers you share with a user."""
        return await self.request(Route(Method.GET, "/users/{user}/mutual", user=user), Mutuals)

    async def accept_friend_request(self, user: str) -> User:
        return await self.request(Route(Method.PUT, "/users/{user}/friend", user=user), User)

    async def remove_friend(self, user: str) -> None:
        """Denies a friend request or removes an existing friend."""
        await self.execute(Route(Method.DELETE, "/users/{user}/friend", user=user))

    async def block_user(self, user: str) -> User:
        return await self.request(Route(Method.PUT, "/users/{user}/block", user=user), User)

    async def unblock_user(self, user: str) -> None:
        await self.execute(Route(Method.DELETE, "/users/{user}/block", user=user))

    async def send_friend_request(self, username: str) -> User:
        return await self.request(
            Route(Method.POST, "/users/friend"),
            User,
            body=JSONBuilder(username=username),
        )
