import asyncio
import json
from typing import Any

import httpx
import pytest

from adapters.http_client import RestClient
from core.config import AppSettings

BASE_URL = "https://api.test"

USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {"city": "Gwenborough"},
        "company": {"name": "Romaguera-Crona", "bs": "harness real-time e-markets"},
        "website": "hildegard.org",
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "company": {"name": "Deckow-Crist"},
        "website": "anastasia.net",
    },
    {
        "id": 3,
        "name": "Clementine Bauch",
        "username": "Samantha",
        "email": "Nathan@yesenia.net",
        "company": {"name": "Romaguera-Jacobson"},
        "website": "ramiro.info",
    },
]

POSTS = [
    {"id": 1, "userId": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
    {"id": 2, "userId": 1, "title": "qui est esse", "body": "est rerum tempore"},
    {"id": 11, "userId": 2, "title": "et ea vero quia", "body": "delectus reiciendis"},
]


class FakeApi:
    """In-memory stand-in for the REST API, served through ``httpx.MockTransport``.

    - ``fail`` maps a path (``/users``, ``/posts``, ``/posts/1``) to a status code.
    - ``gates`` maps a ``userId`` to an ``asyncio.Event`` the posts request waits on.
    """

    def __init__(self) -> None:
        self.users: list[dict[str, Any]] = [dict(u) for u in USERS]
        self.posts: list[dict[str, Any]] = [dict(p) for p in POSTS]
        self.fail: dict[str, int] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path, dict(request.url.params)))

        owner = request.url.params.get("userId")
        if owner is not None and owner in self.gates:
            await self.gates[owner].wait()

        if path in self.fail:
            return httpx.Response(self.fail[path], json={})

        if request.method == "GET" and path == "/users":
            return httpx.Response(200, json=self.users)
        if request.method == "GET" and path == "/posts":
            if owner is None:
                return httpx.Response(200, json=self.posts)
            return httpx.Response(200, json=[p for p in self.posts if str(p["userId"]) == owner])
        if request.method == "POST" and path == "/posts":
            payload = json.loads(request.content)
            # JSONPlaceholder answers every create with id 101.
            return httpx.Response(201, json={**payload, "id": 101})
        if path.startswith("/posts/"):
            item_id = int(path.rsplit("/", 1)[1])
            if request.method == "PUT":
                return httpx.Response(200, json=json.loads(request.content))
            if request.method == "DELETE":
                return httpx.Response(200, json={})
            return httpx.Response(200, json=next((p for p in self.posts if p["id"] == item_id), {}))
        return httpx.Response(404, json={})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def count(self, method: str, path: str) -> int:
        return sum(1 for m, p, _ in self.calls if m == method and p == path)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url=BASE_URL, http_timeout_seconds=5)


@pytest.fixture
def client(api: FakeApi, settings: AppSettings) -> RestClient:
    return RestClient(settings, transport=api.transport())
