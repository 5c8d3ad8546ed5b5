"""
Shared fixtures: a fake GitHub served through httpx.MockTransport.
"""

import asyncio
import json
from collections.abc import Iterable

import httpx
import pytest

from pinned_repos.repositories import GithubClient


def make_repo(name: str, **overrides) -> dict:
    """Build a repository object shaped like GitHub's listing API."""
    repo = {
        "id": sum(map(ord, name)),
        "name": name,
        "full_name": f"alice/{name}",
        "owner": {"login": "alice"},
        "html_url": f"https://github.com/alice/{name}",
        "description": f"{name} description",
        "fork": False,
        "is_template": False,
        "created_at": "2023-01-01T00:00:00Z",
        "updated_at": "2024-06-01T12:00:00Z",
        "language": "Python",
        "stargazers_count": 3,
        "topics": ["cli"],
    }
    repo.update(overrides)
    return repo


def profile_html(pinned: Iterable[str]) -> str:
    """Build profile markup with the given pinned names plus decoy elements."""
    items = "".join(
        f"""
        <li class="mb-3 d-flex">
          <div class="Box pinned-item-list-item public source">
            <div class="pinned-item-list-item-content">
              <div class="d-flex width-full position-relative">
                <div class="flex-1">
                  <span class="position-relative">
                    <a href="/alice/{name}" class="Link mr-1 text-bold wb-break-word">
                      <span class="repo" title="{name}">
                        {name}
                      </span>
                    </a>
                  </span>
                  <span class="Label Label--secondary">Public</span>
                </div>
              </div>
              <p class="pinned-item-desc color-fg-muted">Not a name</p>
            </div>
          </div>
        </li>"""
        for name in pinned
    )
    return f"""<!DOCTYPE html>
<html>
  <head><title>alice (Alice)</title></head>
  <body>
    <div class="js-pinned-items-reorder-container">
      <ol class="d-flex flex-wrap list-style-none">{items}
      </ol>
    </div>
    <div class="popular">
      <span><a href="/alice/not-pinned"><span class="repo">not-pinned</span></a></span>
    </div>
  </body>
</html>"""


class FakeGithub:
    """In-memory stand-in for github.com and api.github.com.

    Records every request so tests can assert on outbound traffic.
    """

    def __init__(
        self,
        username: str = "alice",
        pinned: Iterable[str] = (),
        repos: Iterable[dict] = (),
        public_repos: int | None = None,
        delay: float = 0.0,
    ) -> None:
        self.username = username
        self.html = profile_html(pinned)
        self.repos = list(repos)
        self.public_repos = len(self.repos) if public_repos is None else public_repos
        self.delay = delay
        self.profile_status = 200
        self.user_status = 200
        self.page_status: dict[int, int] = {}
        self.raw_pages: dict[int, str] = {}
        self.raise_on_profile: Exception | None = None
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, **overrides) -> GithubClient:
        return GithubClient(transport=self.transport, **overrides)

    @property
    def pages_requested(self) -> list[int]:
        return [int(r.url.params["page"]) for r in self.requests if r.url.path.endswith("/repos")]

    @property
    def profile_requests(self) -> int:
        return sum(1 for r in self.requests if r.url.host == "github.com")

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        path = request.url.path
        if request.url.host == "github.com":
            if self.raise_on_profile is not None:
                raise self.raise_on_profile
            if path == f"/{self.username}":
                return httpx.Response(self.profile_status, text=self.html)
            return httpx.Response(404, text="Not Found")

        if path == f"/users/{self.username}":
            body = {"login": self.username, "public_repos": self.public_repos}
            return httpx.Response(self.user_status, json=body)

        if path == f"/users/{self.username}/repos":
            page = int(request.url.params["page"])
            per_page = int(request.url.params.get("per_page", "30"))
            if page in self.page_status:
                return httpx.Response(self.page_status[page], json={"message": "Server Error"})
            if page in self.raw_pages:
                return httpx.Response(200, text=self.raw_pages[page])
            chunk = self.repos[(page - 1) * per_page : page * per_page]
            return httpx.Response(200, text=json.dumps(chunk))

        return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def fake_github():
    """A fake GitHub where alice pins two of her four repositories."""
    repos = [make_repo(name) for name in ("alpha", "beta", "gamma", "delta")]
    return FakeGithub(pinned=["gamma", "alpha"], repos=repos)
