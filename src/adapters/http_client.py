"""httpx wrapper.

Why a wrapper:
- Standardizes base URL, timeouts, headers and logging for every view.
- Makes testing easy: the transport can be swapped for ``httpx.MockTransport``.
- Converts every failure into ``FetchError`` so views deal with one error kind.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.config import AppSettings
from core.domain.models import Post, PostDraft, User
from core.errors import FetchError

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the application defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - ``transport`` lets tests plug in ``httpx.MockTransport``.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def describe_transport_error(exc: Exception) -> str:
    """Human-readable message for a transport-level failure."""

    message = str(exc).strip()
    return message or exc.__class__.__name__


class RestClient:
    """Async REST client implementing ``core.interfaces.resource_client.ResourceClient``.

    Usable as an async context manager; the underlying ``httpx.AsyncClient``
    is closed on exit only when this instance created it.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body (or ``None`` if empty)."""

        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise FetchError(describe_transport_error(exc)) from exc

        if not resp.is_success:
            logger.warning("%s %s answered HTTP %s", method, path, resp.status_code)
            raise FetchError(
                f"Request failed with status code {resp.status_code}",
                status_code=resp.status_code,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(f"Invalid JSON in response from {path}") from exc

    async def list_users(self) -> list[User]:
        data = await self.request_json("GET", "/users")
        return _parse_list(User, data, "/users")

    async def list_posts(self, owner_id: str) -> list[Post]:
        data = await self.request_json("GET", "/posts", params={"userId": owner_id})
        return _parse_list(Post, data, "/posts")

    async def list_resource(self, resource: str) -> list[Post]:
        path = _collection_path(resource)
        data = await self.request_json("GET", path)
        return _parse_list(Post, data, path)

    async def create_resource(self, resource: str, draft: PostDraft) -> Post:
        path = _collection_path(resource)
        data = await self.request_json("POST", path, json=draft.to_payload())
        return _parse_written(data, draft, path, fallback_id=0)

    async def update_resource(self, resource: str, item_id: int, draft: PostDraft) -> Post:
        path = f"{_collection_path(resource)}/{item_id}"
        payload = {"id": item_id, **draft.to_payload()}
        data = await self.request_json("PUT", path, json=payload)
        return _parse_written(data, draft, path, fallback_id=item_id)

    async def delete_resource(self, resource: str, item_id: int) -> None:
        await self.request_json("DELETE", f"{_collection_path(resource)}/{item_id}")


def _collection_path(resource: str) -> str:
    return "/" + resource.strip("/")


def _parse_list(model: type[_ModelT], data: Any, path: str) -> list[_ModelT]:
    try:
        return TypeAdapter(list[model]).validate_python(data)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise FetchError(f"Unexpected response shape from {path}: {exc.error_count()} error(s)") from exc


def _parse_written(data: Any, draft: PostDraft, path: str, *, fallback_id: int) -> Post:
    """Build the entity echoed by a write; missing fields fall back to the draft."""

    body: dict[str, Any] = {"id": fallback_id, **draft.to_payload()}
    if isinstance(data, dict):
        body.update({k: v for k, v in data.items() if v is not None})
    try:
        return Post.model_validate(body)
    except ValidationError as exc:
        raise FetchError(f"Unexpected response shape from {path}: {exc.error_count()} error(s)") from exc
