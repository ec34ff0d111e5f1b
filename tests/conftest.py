"""Pytest configuration and fixtures for keycloak-federation tests."""

import asyncio
import json
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, unquote

import httpx
import pytest
import pytest_asyncio
from pydantic import SecretStr

from keycloak_federation import (
    FederationBridge,
    FederationConfig,
    FederationSettings,
    InMemoryUserStorage,
    RemoteClient,
)

REMOTE_URL = "https://remote.example.com"
REMOTE_REALM = "upstream"
LOCAL_REALM = "local"
CLIENT_ID = "federation-client"
CLIENT_SECRET = "s3cr3t-client-value"
FEDERATION_ID = "federation-x"


class FakeRemoteRealm:
    """In-process stand-in for the remote realm's token and admin endpoints."""

    def __init__(self, realm: str = REMOTE_REALM):
        self.realm = realm
        self.users: Dict[str, Dict[str, Any]] = {}
        self.passwords: Dict[str, str] = {}
        self.otp_codes: Dict[str, str] = {}
        self.credentials: Dict[str, List[Dict[str, Any]]] = {}
        self.requests: List[httpx.Request] = []
        self.token_lifetime = 300
        self.token_delay = 0.0
        self.issued_tokens = 0
        self.status_overrides: Dict[str, int] = {}
        self.body_overrides: Dict[str, bytes] = {}
        self.token_error: Optional[Dict[str, str]] = None

    def add_user(self, user_id: str, username: str, email: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
        user = {"id": user_id, "username": username, "email": email, **extra}
        self.users[user_id] = user
        return user

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/protocol/openid-connect/token")]

    @property
    def admin_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith("/admin/")]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        for prefix, status in self.status_overrides.items():
            if path.startswith(prefix):
                return httpx.Response(status, json={"error": "forced"})
        for prefix, content in self.body_overrides.items():
            if path.startswith(prefix):
                return httpx.Response(200, content=content)

        if path == f"/realms/{self.realm}/protocol/openid-connect/token":
            return await self._token(request)

        users_path = f"/admin/realms/{self.realm}/users"
        if not path.startswith(users_path):
            return httpx.Response(404)
        if request.headers.get("Authorization", "") != f"Bearer svc-token-{self.issued_tokens}":
            return httpx.Response(401, json={"error": "HTTP 401 Unauthorized"})

        # split before decoding so an encoded "/" stays inside its segment
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        rest = raw_path[len(users_path):].strip("/")
        if not rest:
            return self._search(request)
        parts = [unquote(part) for part in rest.split("/")]
        user = self.users.get(parts[0])
        if user is None:
            return httpx.Response(404, json={"error": "User not found"})
        if len(parts) == 1:
            return httpx.Response(200, json=user)
        if parts[1] == "credentials":
            return httpx.Response(200, json=self.credentials.get(parts[0], []))
        return httpx.Response(404)

    async def _token(self, request: httpx.Request) -> httpx.Response:
        form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        if form.get("client_id") != CLIENT_ID or form.get("client_secret") != CLIENT_SECRET:
            return httpx.Response(
                401,
                json={"error": "unauthorized_client", "error_description": "Invalid client or Invalid client credentials"},
            )

        if form.get("grant_type") == "client_credentials":
            if self.token_delay:
                await asyncio.sleep(self.token_delay)
            if self.token_error:
                return httpx.Response(400, json=self.token_error)
            self.issued_tokens += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"svc-token-{self.issued_tokens}",
                    "expires_in": self.token_lifetime,
                    "token_type": "Bearer",
                },
            )

        if form.get("grant_type") == "password":
            username = form.get("username")
            if "password" in form and self.passwords.get(username) == form["password"]:
                return httpx.Response(200, json={"access_token": "user-session-token", "expires_in": 300})
            if "totp" in form and self.otp_codes.get(username) == form["totp"]:
                return httpx.Response(200, json={"access_token": "user-session-token", "expires_in": 300})
            return httpx.Response(401, json={"error": "invalid_grant", "error_description": "Invalid user credentials"})

        return httpx.Response(400, json={"error": "unsupported_grant_type"})

    def _search(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        matches = list(self.users.values())
        for name in ("username", "email"):
            if name in params:
                matches = [u for u in matches if u.get(name) == params[name]]
        return httpx.Response(200, content=json.dumps(matches[: int(params.get("max", "100"))]))


@pytest.fixture
def fake_remote() -> FakeRemoteRealm:
    """Fake remote realm with no users."""
    return FakeRemoteRealm()


@pytest.fixture
def federation_config() -> FederationConfig:
    """Valid configuration pointing at the fake remote."""
    return FederationConfig(
        remote_base_url=REMOTE_URL,
        realm=REMOTE_REALM,
        client_id=CLIENT_ID,
        client_secret=SecretStr(CLIENT_SECRET),
    )


@pytest.fixture
def federation_properties() -> Dict[str, Any]:
    """Raw option map as the host hands it over."""
    return {
        "keycloak.url": [REMOTE_URL + "/"],
        "keycloak.realm": [REMOTE_REALM],
        "keycloak.client_id": [CLIENT_ID],
        "keycloak.client_secret": [CLIENT_SECRET],
        "keycloak.skip_certificate_validation": ["false"],
    }


@pytest.fixture
def settings() -> FederationSettings:
    """Settings independent of the environment."""
    return FederationSettings(
        http_timeout_seconds=5.0,
        token_expiry_margin_seconds=5,
        directory_max_results=10,
    )


@pytest.fixture
def storage() -> InMemoryUserStorage:
    return InMemoryUserStorage()


@pytest_asyncio.fixture
async def remote_client(federation_config, fake_remote):
    """Remote client wired to the fake remote."""
    client = RemoteClient.for_config(federation_config, http_transport=fake_remote.transport())
    yield client
    await client.close()


@pytest_asyncio.fixture
async def bridge(federation_config, fake_remote, storage, settings):
    """Federation bridge wired to the fake remote and in-memory storage."""
    instance = FederationBridge(
        federation_config,
        FEDERATION_ID,
        storage,
        settings=settings,
        http_transport=fake_remote.transport(),
    )
    yield instance
    await instance.close()
