"""Contract for the REST client the views talk to.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Views can be exercised against any implementation (a stub, or the real
  ``RestClient`` over a mocked transport) without importing httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Post, PostDraft, User


@runtime_checkable
class ResourceClient(Protocol):
    """Minimal surface the views need.

    Design rules:
    - Every method is asynchronous because it does I/O (HTTP).
    - Every failure is raised as ``core.errors.FetchError``.
    """

    async def list_users(self) -> list[User]:
        """``GET /users``."""

        ...

    async def list_posts(self, owner_id: str) -> list[Post]:
        """``GET /posts?userId={owner_id}``."""

        ...

    async def list_resource(self, resource: str) -> list[Post]:
        """``GET /{resource}``."""

        ...

    async def create_resource(self, resource: str, draft: PostDraft) -> Post:
        """``POST /{resource}``; returns the entity echoed by the server."""

        ...

    async def update_resource(self, resource: str, item_id: int, draft: PostDraft) -> Post:
        """``PUT /{resource}/{item_id}``."""

        ...

    async def delete_resource(self, resource: str, item_id: int) -> None:
        """``DELETE /{resource}/{item_id}``."""

        ...
