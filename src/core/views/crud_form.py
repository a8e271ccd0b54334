"""CRUD form: list a collection and create/update/delete entries in it.

Writes are "fire, then reconcile": the local list changes only after the
server acknowledged the write. A failed write leaves the list as it was and
surfaces the message on the write channel.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from core.domain.models import Post, PostDraft
from core.domain.state import ChannelState, CollectionState
from core.errors import DraftValidationError, FetchError
from core.interfaces.resource_client import ResourceClient

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class CrudFormView:
    """List plus a single draft form bound to create/update."""

    def __init__(self, client: ResourceClient, resource: str = "posts") -> None:
        self._client = client
        self.resource = resource
        self.state = CollectionState()
        self.write = ChannelState()
        self.draft = PostDraft()
        self.editing_id: int | None = None
        self._mounted = False

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True

        channel = self.state.channel
        channel.start()
        logger.info("Fetching %s for the CRUD form...", self.resource)
        try:
            items = await self._client.list_resource(self.resource)
        except FetchError as exc:
            logger.error("Error fetching %s: %s", self.resource, exc)
            channel.fail(str(exc))
            return

        self.state.items = items
        channel.succeed()

    # Draft

    def set_draft(
        self,
        *,
        title: str | None = None,
        body: str | None = None,
        owner_id: int | None = None,
    ) -> None:
        if title is not None:
            self.draft.title = title
        if body is not None:
            self.draft.body = body
        if owner_id is not None:
            self.draft.owner_id = owner_id

    def clear_draft(self) -> None:
        self.draft = PostDraft()
        self.editing_id = None

    def start_edit(self, item_id: int) -> Post | None:
        """Load an existing entry into the draft and make it the update target."""

        item = self._find(item_id)
        if item is None:
            self.write.fail(f"No {self.resource} entry with id {item_id}")
            return None
        self.draft = PostDraft(title=item.title, body=item.body, owner_id=item.owner_id)
        self.editing_id = item.id
        self.write.clear_error()
        return item

    # Writes

    async def create(self) -> Post | None:
        async def op() -> Post:
            self._validate_draft()
            return await self._client.create_resource(self.resource, self.draft)

        created = await self._submit("create", op)
        if created is None:
            return None
        created = self._with_local_id(created)
        self.state.items = [*self.state.items, created]
        self.clear_draft()
        return created

    async def update(self, item_id: int | None = None) -> Post | None:
        target = item_id if item_id is not None else self.editing_id

        async def op() -> Post:
            if target is None:
                raise DraftValidationError("Nothing selected to update")
            self._validate_draft()
            return await self._client.update_resource(self.resource, target, self.draft)

        updated = await self._submit("update", op)
        if updated is None or target is None:
            return None
        updated = updated.model_copy(update={"id": target})
        self.state.items = [updated if p.id == target else p for p in self.state.items]
        self.clear_draft()
        return updated

    async def delete(self, item_id: int) -> bool:
        async def op() -> bool:
            await self._client.delete_resource(self.resource, item_id)
            return True

        if not await self._submit("delete", op):
            return False
        self.state.items = [p for p in self.state.items if p.id != item_id]
        if self.editing_id == item_id:
            self.clear_draft()
        return True

    async def _submit(self, action: str, op: Callable[[], Awaitable[_T]]) -> _T | None:
        self.write.start()
        logger.info("%s %s...", action.capitalize(), self.resource)
        try:
            result = await op()
        except FetchError as exc:
            logger.error("Error during %s on %s: %s", action, self.resource, exc)
            self.write.fail(str(exc))
            return None
        self.write.succeed()
        return result

    def _validate_draft(self) -> None:
        missing = self.draft.missing_fields()
        if missing:
            raise DraftValidationError(f"Required field(s) missing: {', '.join(missing)}")
        if self.draft.owner_id < 1:
            raise DraftValidationError(f"Invalid owner id {self.draft.owner_id}")

    def _with_local_id(self, created: Post) -> Post:
        # JSONPlaceholder answers every create with the same id; keep ids unique locally.
        ids = {p.id for p in self.state.items}
        if created.id > 0 and created.id not in ids:
            return created
        return created.model_copy(update={"id": max(ids, default=0) + 1})

    def _find(self, item_id: int) -> Post | None:
        return next((p for p in self.state.items if p.id == item_id), None)
