from typing import List, Optional, Union, final

import attr

from ...models.base import Model
from ...models.channel import Channel, ChannelRemoveField
from ...models.embed import SendableEmbed
from ...models.invite import Invite
from ...models.message import (
    Interactions,
    Masquerade,
    Message,
    MessageSort,
    MessagesWithUsers,
    Reply,
)
from ...models.user import User
from ..builders import JSONBuilder, ParamsBuilder
from ..route import Method, Route

__all__ = ("ChannelEndpoints", "Messages", "FetchMessagesResult")


@final
@attr.define(frozen=True)
class Messages:
    """Result of `fetch_messages` without `include_users`"""

    messages: List[Message] = attr.field()


FetchMessagesResult = Union[Messages, MessagesWithUsers]
""" What `fetch_messages` returns, which one depends on `include_users` """


class EditChannelPayload(Model):
    name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None
    icon: Optional[str] = None
    nsfw: Optional[bool] = None
    archived: Optional[bool] = None
    remove: Optional[List[ChannelRemoveField]] = None


class SendMessagePayload(Model):
    nonce: Optional[str] = None
    content: Optional[str] = None
    attachments: Optional[List[str]] = None
    replies: Optional[List[Reply]] = None
    embeds: Optional[List[SendableEmbed]] = None
    masquerade: Optional[Masquerade] = None
    interactions: Optional[Interactions] = None


class EditMessagePayload(Model):
    content: Optional[str] = None
    embeds: Optional[List[SendableEmbed]] = None


class CreateGroupPayload(Model):
    name: str
    description: Optional[str] = None
    users: List[str]
    nsfw: Optional[bool] = None


class ChannelEndpoints:
    """Channel, message, reaction and group endpoints, mixed into
    `RESTClient`
    """

    # channel information

    async def fetch_channel(self, channel: str) -> Channel:
        return await self.request(
            Route(Method.GET, "/channels/{channel}", channel=channel), Channel
        )

    async def close_channel(self, channel: str, *, leave_silently: bool = False) -> None:
        """Deletes a server channel, leaves a group or closes a DM."""

        query = ParamsBuilder()
        if leave_silently:
            query.add("leave_silently", True)

        await self.execute(
            Route(Method.DELETE, "/channels/{channel}", channel=channel), query=query
        )

    async def edit_channel(
        self,
        channel: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        owner: Optional[str] = None,
        icon: Optional[str] = None,
        nsfw: Optional[bool] = None,
        archived: Optional[bool] = None,
        remove: Optional[List[ChannelRemoveField]] = None,
    ) -> Channel:
        payload = EditChannelPayload(
            name=name,
            description=description,
            owner=owner,
            icon=icon,
            nsfw=nsfw,
            archived=archived,
            remove=remove,
        )
        return await self.request(
            Route(Method.PATCH, "/channels/{channel}", channel=channel),
            Channel,
            body=JSONBuilder(payload),
        )

    async def create_invite(self, channel: str) -> Invite:
        return await self.request(
            Route(Method.POST, "/channels/{channel}/invites", channel=channel), Invite
        )

    # messaging

    async def acknowledge_message(self, channel: str, message: str) -> None:
        """Marks a message (and everything before it) as read."""
        await self.execute(
            Route(
                Method.PUT,
                "/channels/{channel}/ack/{message}",
                channel=channel,
                message=message,
            )
        )

    async def fetch_messages(
        self,
        channel: str,
        *,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        sort: Optional[MessageSort] = None,
        nearby: Optional[str] = None,
        include_users: bool = False,
    ) -> FetchMessagesResult:
        """Fetches messages from a channel.

        Parameters
        ----------
        channel : builtins.str
            The channel ID.
        limit : typing.Optional[builtins.int]
            Maximum number of messages to fetch.
        before : typing.Optional[builtins.str]
            Fetch messages before this message ID.
        after : typing.Optional[builtins.str]
            Fetch messages after this message ID.
        sort : typing.Optional[rapi.models.message.MessageSort]
            Sort order.
        nearby : typing.Optional[builtins.str]
            Fetch messages around this message ID, `before`, `after`
            and `sort` are ignored by the server when set.
        include_users : builtins.bool
            Also fetch the authors (and server members).

        Returns
        -------
        rapi.rest.endpoints.channels.FetchMessagesResult
            `MessagesWithUsers` when `include_users` is set, `Messages`
            otherwise.
        """

        route = Route(Method.GET, "/channels/{channel}/messages", channel=channel)
        query = ParamsBuilder(
            limit=limit, before=before, after=after, sort=sort, nearby=nearby
        )

        if include_users:
            query.add("include_users", True)
            return await self.request(route, MessagesWithUsers, query=query)

        messages = await self.request(route, List[Message], query=query)
        return Messages(messages)

    async def send_message(
        self,
        channel: str,
        *,
        content: Optional[str] = None,
        nonce: Optional[str] = None,
        attachments: Optional[List[str]] = None,
        replies: Optional[List[Reply]] = None,
        embeds: Optional[List[SendableEmbed]] = None,
        masquerade: Optional[Masquerade] = None,
        interactions: Optional[Interactions] = None,
    ) -> Message:
        """Sends a message, `attachments` are IDs of files already
        uploaded to the CDN.
        """

        payload = SendMessagePayload(
            nonce=nonce,
            content=content,
            attachments=attachments,
            replies=replies,
            embeds=embeds,
            masquerade=masquerade,
            interactions=interactions,
        )
        return await self.request(
            Route(Method.POST, "/channels/{channel}/messages", channel=channel),
            Message,
            body=JSONBuilder(payload),
        )

    async def fetch_message(self, channel: str, message: str) -> Message:
        return await self.request(
            Route(
                Method.GET,
                "/channels/{channel}/messages/{message}",
                channel=channel,
                message=message,
            ),
            Message,
        )

    async def delete_message(self, channel: str, message: str) -> None:
        await self.execute(
            Route(
                Method.DELETE,
                "/channels/{channel}/messages/{message}",
                channel=channel,
                message=message,
            )
        )

    async def edit_message(
        self,
        channel: str,
        message: str,
        *,
        content: Optional[str] = None,
        embeds: Optional[List[SendableEmbed]] = None,
    ) -> Message:
        return await self.request(
            Route(
                Method.PATCH,
                "/channels/{channel}/messages/{message}",
                channel=channel,
                message=message,
            ),
            Message,
            body=JSONBuilder(EditMessagePayload(content=content, embeds=embeds)),
        )

    async def bulk_delete_messages(self, channel: str, messages: List[str]) -> None:
        """Deletes many messages at once, they must be less than a week
        old.
        """

        await self.execute(
            Route(Method.DELETE, "/channels/{channel}/messages/bulk", channel=channel),
            body=JSONBuilder(ids=list(messages)),
        )

    # reactions

    async def add_reaction(self, channel: str, message: str, emoji: str) -> None:
        await self.execute(
            Route(
                Method.PUT,
                "/channels/{channel}/messages/{message}/reactions/{emoji}",
                channel=channel,
                message=message,
                emoji=emoji,
            )
        )

    async def remove_reaction(
        self,
        channel: str,
        message: str,
        emoji: str,
        *,
        user: Optional[str] = None,
        remove_all: bool = False,
    ) -> None:
        """Removes your own reaction, someone else's (`user`) or every
        reaction with this emoji (`remove_all`).
        """

        query = ParamsBuilder()
        if user:
            query.add("user_id", user)
        if remove_all:
            query.add("remove_all", True)

        await self.execute(
            Route(
                Method.DELETE,
                "/channels/{channel}/messages/{message}/reactions/{emoji}",
                channel=channel,
                message=message,
                emoji=emoji,
            ),
            query=query,
        )

    async def remove_all_reactions(self, channel: str, message: str) -> None:
        await self.execute(
            Route(
                Method.DELETE,
                "/channels/{channel}/messages/{message}/reactions",
                channel=channel,
                message=message,
            )
        )

    # groups

    async def fetch_group_members(self, channel: str) -> List[User]:
        return await self.request(
            Route(Method.GET, "/channels/{channel}/members", channel=channel), List[User]
        )

    async def create_group(
        self,
        name: str,
        users: List[str],
        *,
        description: Optional[str] = None,
        nsfw: Optional[bool] = None,
    ) -> Channel:
        payload = CreateGroupPayload(
            name=name, description=description, users=list(users), nsfw=nsfw
        )
        return await self.request(
            Route(Method.POST, "/channels/create"),
            Channel,
            body=JSONBuilder(payload),
        )

    async def add_group_member(self, channel: str, user: str) -> None:
        await self.execute(
            Route(
                Method.PUT,
                "/channels/{channel}/recipients/{user}",
                channel=channel,
                user=user,
            )
        )

    async def remove_group_member(self, channel: str, user: str) -> None:
        await self.execute(
            Route(
                Method.DELETE,
                "/channels/{channel}/recipients/{user}",
                channel=channel,
                user=user,
            )
        )
