#!/usr/bin/env python3
"""
Demo script for pinned repos.

Looks up the pinned repositories of one or more GitHub users, prints
them, then repeats the first lookup to show the result cache at work.

Usage:
    python scripts/demo.py octocat torvalds
"""

import asyncio
import json
import sys
import time

from pinned_repos.config import configure_logging
from pinned_repos.dto import ProjectDataItem
from pinned_repos.errors import UpstreamError
from pinned_repos.repositories import GithubClient, InMemoryResultStore, SoupPinnedNameExtractor
from pinned_repos.services import PinnedProjectsService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_lookup(service: PinnedProjectsService, username: str) -> None:
    """Look up and print one user's pinned projects."""
    print_section(f"Pinned projects of {username}")

    start = time.time()
    try:
        projects = await service.get_pinned_projects(username)
    except UpstreamError as e:
        print(f"\n❌ {e.kind}: {e.message}")
        return
    duration = (time.time() - start) * 1000

    print(f"\n📌 {len(projects)} project(s) in {duration:.0f}ms")
    items = [ProjectDataItem.from_entity(project).model_dump(by_alias=True) for project in projects]
    print(json.dumps(items, indent=2))


async def demo_cache(service: PinnedProjectsService, username: str) -> None:
    """Repeat a lookup to show a cache hit."""
    print_section("Result Cache")

    start = time.time()
    projects = await service.get_pinned_projects(username)
    duration = (time.time() - start) * 1000
    print(f"\n⚡ Second lookup for {username}: {len(projects)} project(s) in {duration:.2f}ms")


async def main(usernames: list[str]) -> None:
    """Run all demos."""
    configure_logging()
    print("\n🚀 Pinned Repos Demo")
    print("=" * 70)

    github = GithubClient.create()
    service = PinnedProjectsService.create(
        github=github,
        extractor=SoupPinnedNameExtractor.create(),
        result_store=InMemoryResultStore.create(),
    )

    try:
        for username in usernames:
            await demo_lookup(service, username)
        await demo_cache(service, usernames[0])
    finally:
        await github.close()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:] or ["octocat"]))
