"""HTTP client for the PocketBase REST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from pocketbase_seed.config import Config
from pocketbase_seed.core.models import Record
from pocketbase_seed.exceptions import (
    APIError,
    AuthenticationError,
    NoRecordsFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

AUTH_PATH = "/collections/_superusers/auth-with-password"


@dataclass
class AuthResponse:
    """Superuser authentication result."""

    token: str
    admin: dict[str, Any] = field(default_factory=dict)


class PocketBaseClient:
    """
    Synchronous client for the subset of the PocketBase API used for seeding.

    Every call is a single JSON request/response round trip. After
    ``authenticate()`` the token is sent as a bearer token on every request.

    Example:
        >>> with PocketBaseClient(config) as client:
        ...     client.authenticate(config.email, config.password)
        ...     client.create_record("posts", {"title": "Hello"})
    """

    def __init__(
        self,
        config: Config,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize client.

        Args:
            config: Connection settings; only ``url`` is used
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.token: str | None = None
        self._client = httpx.Client(
            base_url=f"{config.url}/api",
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    def __enter__(self) -> PocketBaseClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _send(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and decode the JSON response.

        Raises:
            TransportError: If the request fails or the body is not JSON
            APIError: If the status code is not 2xx
        """
        try:
            response = self._client.request(
                method, path, json=json, params=params, headers=self._headers()
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise APIError(method, path, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON: {e}") from e

    def authenticate(self, email: str, password: str) -> AuthResponse:
        """
        Authenticate as superuser and keep the token for later calls.

        Args:
            email: Superuser email
            password: Superuser password

        Returns:
            AuthResponse with the bearer token and the admin record

        Raises:
            AuthenticationError: On any failure (status, transport, missing token)
        """
        try:
            body = self._send(
                "POST", AUTH_PATH, json={"identity": email, "password": password}
            )
        except (APIError, TransportError) as e:
            raise AuthenticationError(str(e)) from e

        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise AuthenticationError("response did not contain a token")

        # Older servers return "admin", newer ones return the superuser "record"
        admin = body.get("admin") or body.get("record") or {}

        self.token = token
        logger.debug(f"Authenticated as {admin.get('email', email)}")
        return AuthResponse(token=token, admin=admin)

    def create_record(self, collection: str, record: Record) -> Record:
        """
        Create a record in a collection.

        Args:
            collection: Collection name
            record: Field values to post

        Returns:
            Created record as returned by the server (with id, created, updated)

        Raises:
            APIError: If the server rejects the record
            TransportError: If the request fails
        """
        return self._send("POST", f"/collections/{collection}/records", json=record)

    def fetch_random_record(self, collection: str) -> Record:
        """
        Fetch the id of one random record from a collection.

        Args:
            collection: Collection name

        Returns:
            Record containing only ``id``

        Raises:
            NoRecordsFoundError: If the collection is empty
            APIError: If the server rejects the request
            TransportError: If the request fails
        """
        body = self._send(
            "GET",
            f"/collections/{collection}/records",
            params={
                "perPage": 1,
                "skipTotal": "true",
                "sort": "@random",
                "fields": "id",
            },
        )

        items = body.get("items") if isinstance(body, dict) else None
        if not items:
            raise NoRecordsFoundError(collection)

        return items[0]
