"""Pytest configuration and shared fixtures."""

import json
import threading
from typing import Any

import httpx
import pytest

from pocketbase_seed.client import PocketBaseClient
from pocketbase_seed.config import Config

TOKEN = "test-token"
EMAIL = "admin@example.com"
PASSWORD = "secret"


class FakePocketBase:
    """
    In-memory stand-in for the PocketBase endpoints used by the client.

    Collections map to lists of records. Every request is kept in
    ``requests`` for assertions.
    """

    def __init__(self) -> None:
        self.collections: dict[str, list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []
        self.reject: dict[str, tuple[int, dict[str, Any]]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def created(self, collection: str) -> list[dict[str, Any]]:
        """Bodies posted to a collection's create endpoint."""
        path = f"/api/collections/{collection}/records"
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and r.url.path == path
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
            return self._dispatch(request)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if path == "/api/collections/_superusers/auth-with-password":
            body = json.loads(request.content)
            if body == {"identity": EMAIL, "password": PASSWORD}:
                return httpx.Response(
                    200, json={"token": TOKEN, "admin": {"id": "a1", "email": EMAIL}}
                )
            return httpx.Response(400, json={"message": "Failed to authenticate."})

        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return httpx.Response(401, json={"message": "Unauthorized."})

        parts = path.strip("/").split("/")
        if len(parts) != 4 or parts[:2] != ["api", "collections"] or parts[3] != "records":
            return httpx.Response(404, json={"message": "Not found."})
        collection = parts[2]

        if collection in self.reject:
            status, body = self.reject[collection]
            return httpx.Response(status, json=body)

        if request.method == "GET":
            items = self.collections.get(collection, [])[:1]
            return httpx.Response(
                200,
                json={
                    "items": [{"id": item["id"]} for item in items],
                    "page": 1,
                    "perPage": 1,
                    "totalItems": -1,
                    "totalPages": -1,
                },
            )

        record = dict(json.loads(request.content))
        record["id"] = f"rec{self._next_id:012d}"
        record["created"] = "2024-01-01 00:00:00.000Z"
        record["updated"] = "2024-01-01 00:00:00.000Z"
        self._next_id += 1
        self.collections.setdefault(collection, []).append(record)
        return httpx.Response(200, json=record)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep POCKETBASE_* variables from the host out of config loading."""
    for name in ("POCKETBASE_URL", "POCKETBASE_EMAIL", "POCKETBASE_PASSWORD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(url="http://pocketbase.test", email=EMAIL, password=PASSWORD)


@pytest.fixture
def server() -> FakePocketBase:
    return FakePocketBase()


@pytest.fixture
def client(config: Config, server: FakePocketBase) -> PocketBaseClient:
    """Unauthenticated client wired to the fake server."""
    with PocketBaseClient(config, transport=httpx.MockTransport(server.handler)) as c:
        yield c


@pytest.fixture
def auth_client(client: PocketBaseClient) -> PocketBaseClient:
    client.authenticate(EMAIL, PASSWORD)
    return client
