"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
fake_completions   - stand-in for the openai `chat.completions` resource
generator          - ItineraryGenerator wired to fake_completions
amadeus_backend    - in-memory Amadeus served through httpx.MockTransport
amadeus            - AmadeusClient talking to amadeus_backend
supabase_backend   - in-memory Supabase Auth + PostgREST
supabase           - SupabaseAdmin talking to supabase_backend
client             - FastAPI TestClient with all of the above injected
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from travexa.api.deps import (
    get_amadeus_client, get_itinerary_generator, get_supabase_admin, get_token_cache,
)
from travexa.interfaces.amadeus_client import AmadeusClient
from travexa.interfaces.supabase_admin import SupabaseAdmin
from travexa.interfaces.token_cache import TokenCache
from travexa.llm.gateway import AIGateway
from travexa.llm.itinerary_generator import ItineraryGenerator
from travexa.main import app


# ── AI gateway ───────────────────────────────────────────────────────────────


class FakeCompletions:
    """Records create() calls and replays a queued reply or exception."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.reply: Optional[str] = '{"itineraries": []}'
        self.error: Optional[Exception] = None

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_completions() -> FakeCompletions:
    return FakeCompletions()


@pytest.fixture
def generator(fake_completions: FakeCompletions) -> ItineraryGenerator:
    fake_client = SimpleNamespace(chat=SimpleNamespace(completions=fake_completions))
    gateway = AIGateway(api_key="test-key", base_url="https://gateway.test/v1", client=fake_client)
    return ItineraryGenerator(gateway, itinerary_model="itinerary-model", trip_plan_model="plan-model")


# ── Amadeus ──────────────────────────────────────────────────────────────────


class AmadeusBackend:
    """Routes Amadeus paths to canned JSON; records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.token_calls = 0
        self.responses: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def on(self, path: str, status: int = 200, json: Any = None) -> None:
        self.responses[path] = lambda request: httpx.Response(status, json=json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/v1/security/oauth2/token":
            self.token_calls += 1
            form = parse_qs(request.content.decode())
            if form.get("client_secret") != ["secret"]:
                return httpx.Response(401, json={"error": "invalid_client"})
            return httpx.Response(200, json={"access_token": "tok-123", "expires_in": 1799})
        if request.headers.get("Authorization") != "Bearer tok-123":
            return httpx.Response(401, json={"errors": [{"title": "unauthorized"}]})
        route = self.responses.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"errors": [{"title": "not found"}]})
        return route(request)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def amadeus_backend() -> AmadeusBackend:
    return AmadeusBackend()


@pytest.fixture
def amadeus(amadeus_backend: AmadeusBackend) -> AmadeusClient:
    return AmadeusClient(
        api_key="key",
        api_secret="secret",
        host="amadeus.test",
        token_cache=TokenCache(connect=False),
        transport=httpx.MockTransport(amadeus_backend.handler),
    )


# ── Supabase ─────────────────────────────────────────────────────────────────


class SupabaseBackend:
    """Tiny in-memory Supabase: one user per JWT, PostgREST eq-filters."""

    def __init__(self) -> None:
        self.users: Dict[str, Dict[str, Any]] = {"jwt-alice": {"id": "user-alice", "email": "a@x.io"}}
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.deleted_users: List[str] = []
        self.failing_tables: set = set()
        self.fail_auth_delete = False

    def _filter(self, request: httpx.Request):
        params = {k: v for k, v in request.url.params.items() if k != "select"}
        (column, expr), = params.items()
        return column, expr.removeprefix("eq.")

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/auth/v1/user":
            jwt = request.headers.get("Authorization", "").removeprefix("Bearer ")
            user = self.users.get(jwt)
            if user is None:
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(200, json=user)

        if path.startswith("/auth/v1/admin/users/"):
            if self.fail_auth_delete:
                return httpx.Response(500, text="auth backend down")
            self.deleted_users.append(path.rsplit("/", 1)[1])
            return httpx.Response(200, json={})

        table = path.removeprefix("/rest/v1/")
        if table in self.failing_tables:
            return httpx.Response(404, json={"message": f"relation {table} does not exist"})
        rows = self.tables.setdefault(table, [])

        if request.method == "GET":
            column, value = self._filter(request)
            return httpx.Response(200, json=[r for r in rows if r.get(column) == value])
        if request.method == "POST":
            rows.append(json.loads(request.content))
            return httpx.Response(201)
        if request.method == "PATCH":
            column, value = self._filter(request)
            for row in rows:
                if row.get(column) == value:
                    row.update(json.loads(request.content))
            return httpx.Response(204)
        if request.method == "DELETE":
            column, value = self._filter(request)
            self.tables[table] = [r for r in rows if r.get(column) != value]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def supabase_backend() -> SupabaseBackend:
    return SupabaseBackend()


@pytest.fixture
def supabase(supabase_backend: SupabaseBackend) -> SupabaseAdmin:
    return SupabaseAdmin(
        url="https://project.supabase.test",
        service_key="service-key",
        transport=httpx.MockTransport(supabase_backend.handler),
    )


# ── App ──────────────────────────────────────────────────────────────────────


@pytest.fixture
def client(generator: ItineraryGenerator, amadeus: AmadeusClient, supabase: SupabaseAdmin):
    app.dependency_overrides[get_itinerary_generator] = lambda: generator
    app.dependency_overrides[get_amadeus_client] = lambda: amadeus
    app.dependency_overrides[get_supabase_admin] = lambda: supabase
    app.dependency_overrides[get_token_cache] = lambda: TokenCache(connect=False)
    yield TestClient(app)
    app.dependency_overrides.clear()
