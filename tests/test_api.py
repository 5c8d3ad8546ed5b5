"""
Tests for the pinned repos API.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import FakeGithub, make_repo
from pinned_repos.api.app import create_app
from pinned_repos.config import Settings
from pinned_repos.repositories import InMemoryResultStore


def make_client(fake: FakeGithub, **settings_overrides) -> TestClient:
    settings_overrides.setdefault("cache_backend", "memory")
    settings_overrides.setdefault("result_order", "listing")
    config = Settings(**settings_overrides)
    return TestClient(create_app(config=config, transport=fake.transport))


@pytest.fixture
def client(fake_github):
    """Create a test client backed by the fake GitHub."""
    with make_client(fake_github) as test_client:
        yield test_client


def test_get_pinned(client, fake_github):
    """Test the happy path."""
    response = client.get("/get", params={"u": "alice"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    data = response.json()
    assert [item["repoName"] for item in data] == ["alpha", "gamma"]
    assert data[0] == {
        "repoName": "alpha",
        "repoLink": "https://github.com/alice/alpha",
        "repoDescription": "alpha description",
        "isFork": False,
        "isTemplate": False,
        "createdAt": "2023-01-01T00:00:00Z",
        "lastUpdate": "2024-06-01T12:00:00Z",
        "mainLanguage": "Python",
        "starAmount": 3,
        "topics": ["cli"],
    }


def test_user_alias(client):
    response = client.get("/get", params={"user": "alice"})
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_empty_u_falls_back_to_user(client):
    response = client.get("/get", params={"u": "", "user": "alice"})
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_u_wins_over_user(client, fake_github):
    client.get("/get", params={"u": "alice", "user": "bob"})
    assert fake_github.requests[0].url.path == "/alice"


def test_nulls_are_preserved():
    fake = FakeGithub(pinned=["bare"], repos=[make_repo("bare", description=None, language=None)])
    with make_client(fake) as test_client:
        [item] = test_client.get("/get", params={"u": "alice"}).json()

    assert item["repoDescription"] is None
    assert item["mainLanguage"] is None


def test_no_pinned_items_is_empty_array():
    fake = FakeGithub(pinned=[], repos=[make_repo("alpha")])
    with make_client(fake) as test_client:
        response = test_client.get("/get", params={"u": "alice"})

    assert response.status_code == 200
    assert response.json() == []
    assert fake.profile_requests == 1
    assert fake.pages_requested == []


@pytest.mark.parametrize(
    "path, params",
    [
        ("/get", {}),
        ("/get", {"u": ""}),
        ("/get", {"u": "", "user": ""}),
        ("/get", {"username": "alice"}),
        ("/", {"u": "alice"}),
        ("/other", {"u": "alice"}),
        ("/get/alice", {}),
        ("/get/", {"u": "alice"}),
        ("/docs", {}),
        ("/openapi.json", {}),
    ],
)
def test_incorrect_request(client, fake_github, path, params):
    """Validation failures answer with the fixed message and never touch GitHub."""
    response = client.get(path, params=params)

    assert response.status_code == 400
    assert response.text == "Incorrect request"
    assert response.headers["content-type"].startswith("text/plain")
    assert fake_github.requests == []


def test_wrong_method_is_incorrect_request(client, fake_github):
    response = client.post("/get", params={"u": "alice"})

    assert response.status_code == 400
    assert response.text == "Incorrect request"
    assert fake_github.requests == []


def test_unknown_user_is_upstream_status_error(client):
    response = client.get("/get", params={"u": "nobody"})

    assert response.status_code == 502
    data = response.json()
    assert data["error"] == "upstream_status"
    assert data["status_code"] == 404
    assert data["url"] == "https://github.com/nobody"
    assert data["page"] is None
    assert response.headers["access-control-allow-origin"] == "*"


def test_page_failure_reports_page():
    repos = [make_repo(f"repo-{i:02d}") for i in range(65)]
    fake = FakeGithub(pinned=["repo-01"], repos=repos)
    fake.page_status[3] = 500

    with make_client(fake) as test_client:
        response = test_client.get("/get", params={"u": "alice"})

    assert response.status_code == 502
    data = response.json()
    assert data["error"] == "upstream_status"
    assert data["page"] == 3
    assert fake.pages_requested == [1, 2, 3]


def test_decode_failure_is_distinct(fake_github):
    fake_github.raw_pages[1] = "<html>oops</html>"

    with make_client(fake_github) as test_client:
        response = test_client.get("/get", params={"u": "alice"})

    assert response.status_code == 502
    assert response.json()["error"] == "upstream_decode"


def test_transport_failure_is_gateway_timeout(fake_github):
    fake_github.raise_on_profile = httpx.ConnectTimeout("timed out")

    with make_client(fake_github) as test_client:
        response = test_client.get("/get", params={"u": "alice"})

    assert response.status_code == 504
    assert response.json()["error"] == "upstream_transport"


def test_second_request_is_served_from_cache(client, fake_github):
    first = client.get("/get", params={"u": "alice"})
    calls = len(fake_github.requests)
    second = client.get("/get", params={"u": "alice"})

    assert second.json() == first.json()
    assert len(fake_github.requests) == calls


def test_cache_disabled_refetches(fake_github):
    with make_client(fake_github, cache_backend="none") as test_client:
        test_client.get("/get", params={"u": "alice"})
        test_client.get("/get", params={"u": "alice"})

    assert fake_github.profile_requests == 2


def test_pinned_order_setting(fake_github):
    with make_client(fake_github, result_order="pinned") as test_client:
        data = test_client.get("/get", params={"u": "alice"}).json()

    assert [item["repoName"] for item in data] == ["gamma", "alpha"]


def test_injected_result_store(fake_github):
    store = InMemoryResultStore(ttl=600)
    app = create_app(config=Settings(cache_backend="none"), transport=fake_github.transport, result_store=store)

    with TestClient(app) as test_client:
        test_client.get("/get", params={"u": "alice"})

    assert [project.repo_name for project in store.get("alice").data] == ["alpha", "gamma"]


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["cache_healthy"] is True
    assert data["cache_backend"] == "memory"


def test_cors_preflight(client):
    response = client.options(
        "/get",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_invalid_settings_rejected():
    with pytest.raises(ValueError, match="RESULT_ORDER"):
        Settings(result_order="random")
    with pytest.raises(ValueError, match="CACHE_BACKEND"):
        Settings(cache_backend="disk")
