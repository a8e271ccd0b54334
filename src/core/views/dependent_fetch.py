"""Dependent fetching: users list, search filter and the selected user's posts.

Two channels are tracked independently:

- primary: ``GET /users``, issued once on mount.
- secondary: ``GET /posts?userId=<id>``, issued every time a non-empty owner
  is selected.

A posts request remembers the owner id and a ticket taken when it was issued.
When it resolves, its result is committed only if both still match the live
selection; otherwise it is dropped without touching state. Rapid re-selection
therefore never shows a previous owner's posts.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.models import User
from core.domain.state import DependentFetchState, DependentFetchStats
from core.errors import FetchError
from core.interfaces.resource_client import ResourceClient
from core.services.filtering import filter_users, find_user

logger = logging.getLogger(__name__)


class DependentFetchView:
    """Searchable users list plus the selected user's posts."""

    def __init__(self, client: ResourceClient) -> None:
        self._client = client
        self.state = DependentFetchState()
        self._mounted = False
        self._alive = True
        self._ticket = 0
        self._pending: set[asyncio.Task[None]] = set()

    async def mount(self) -> None:
        """Fetch the users list. Only the first call does anything."""

        if self._mounted:
            logger.debug("users already requested; mount ignored")
            return
        self._mounted = True

        channel = self.state.primary
        channel.start()
        logger.info("Fetching users...")
        try:
            users = await self._client.list_users()
        except FetchError as exc:
            logger.error("Error fetching users: %s", exc)
            if self._alive:
                channel.fail(str(exc))
            return

        if not self._alive:
            return
        logger.info("Fetched %d users", len(users))
        self.state.users = users
        channel.succeed()

    def select_owner(self, owner_id: str | int) -> asyncio.Task[None] | None:
        """Select a user and schedule the posts fetch for it.

        Must be called from within a running event loop when ``owner_id`` is
        non-empty. Returns the scheduled task, or ``None`` for an empty id.
        """

        owner_id = str(owner_id).strip()
        self.state.selected_owner_id = owner_id
        self.state.posts = []
        self.state.secondary.clear_error()
        self._ticket += 1

        if not owner_id:
            self.state.secondary.reset()
            return None

        self.state.secondary.start()

        task = asyncio.get_running_loop().create_task(self.load_posts(owner_id, ticket=self._ticket))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def load_posts(self, owner_id: str, *, ticket: int | None = None) -> None:
        """Fetch ``owner_id``'s posts and commit them if the selection still matches."""

        if ticket is None:
            self._ticket += 1
            ticket = self._ticket
        if self._is_stale(owner_id, ticket):
            logger.debug("posts for user %s no longer wanted; skipping request", owner_id)
            return

        channel = self.state.secondary
        channel.start()
        logger.info("Fetching posts for user %s...", owner_id)
        try:
            posts = await self._client.list_posts(owner_id)
        except FetchError as exc:
            if self._is_stale(owner_id, ticket):
                logger.debug("discarding stale failure for user %s: %s", owner_id, exc)
                return
            logger.error("Error fetching posts for user %s: %s", owner_id, exc)
            channel.fail(str(exc))
            return

        if self._is_stale(owner_id, ticket):
            logger.debug("discarding %d stale posts for user %s", len(posts), owner_id)
            return
        logger.info("Fetched %d posts for user %s", len(posts), owner_id)
        self.state.posts = posts
        channel.succeed()

    def set_filter_term(self, text: str) -> None:
        self.state.filter_term = text

    def filtered_users(self) -> list[User]:
        return filter_users(self.state.users, self.state.filter_term)

    def reset(self) -> None:
        """Clear selection, posts and filter; the users list is kept."""

        self._ticket += 1
        self.state.selected_owner_id = ""
        self.state.posts = []
        self.state.filter_term = ""
        # Any in-flight posts request is now stale and will not settle this channel.
        self.state.secondary.reset()

    def selected_owner(self) -> User | None:
        return find_user(self.state.users, self.state.selected_owner_id)

    def posts_heading_name(self) -> str:
        owner = self.selected_owner()
        return owner.name if owner else self.state.selected_owner_id

    def stats(self) -> DependentFetchStats:
        return DependentFetchStats(
            total_users=len(self.state.users),
            filtered_users=len(self.filtered_users()),
            post_count=len(self.state.posts),
            has_selection=bool(self.state.selected_owner_id),
        )

    async def wait_idle(self) -> None:
        """Wait until every scheduled posts request has settled."""

        while self._pending:
            await asyncio.gather(*list(self._pending))

    def unmount(self) -> None:
        """Cancel pending requests and drop all data held by the view."""

        self._alive = False
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()
        self.state = DependentFetchState()

    def _is_stale(self, owner_id: str, ticket: int) -> bool:
        return (
            not self._alive
            or ticket != self._ticket
            or owner_id != self.state.selected_owner_id
        )
