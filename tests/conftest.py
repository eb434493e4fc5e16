"""Shared factories and fixtures for the test suite."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ghstats.models import PullRequest, Review, Window

# ---------------------------------------------------------------------------
# REST payload factories — return raw dicts that mirror API responses
# ---------------------------------------------------------------------------


def pr_payload(
    number: int = 1,
    state: str = "closed",
    author: str | None = "alice",
    title: str = "Fix bug",
    created_at: str | None = "2023-09-16T00:00:00Z",
    updated_at: str | None = "2023-09-17T00:00:00Z",
    closed_at: str | None = "2023-09-18T00:00:00Z",
    merged_at: str | None = "2023-09-18T00:00:00Z",
) -> dict:
    return {
        "id": 1000 + number,
        "number": number,
        "state": state,
        "title": title,
        "user": {"login": author} if author else None,
        "created_at": created_at,
        "updated_at": updated_at,
        "closed_at": closed_at,
        "merged_at": merged_at,
    }


def review_payload(
    id: int = 1,
    state: str = "COMMENTED",
    reviewer: str | None = "bob",
    submitted_at: str | None = "2023-09-17T00:00:00Z",
) -> dict:
    return {
        "id": id,
        "state": state,
        "user": {"login": reviewer} if reviewer else None,
        "body": "",
        "submitted_at": submitted_at,
    }


# ---------------------------------------------------------------------------
# Model object factories — construct typed model instances
# ---------------------------------------------------------------------------


def ts(value: str) -> datetime:
    """``"2023-09-16"`` or ``"2023-09-16T12:00:00"`` as an aware UTC datetime."""
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def make_review(
    state: str = "COMMENTED",
    reviewer: str = "bob",
    submitted_at: str | None = "2023-09-17",
) -> Review:
    return Review(
        state=state,
        reviewer=reviewer,
        submitted_at=ts(submitted_at) if submitted_at else None,
    )


def make_pull_request(
    number: int = 1,
    owner: str = "acme",
    repo: str = "widgets",
    author: str = "alice",
    state: str = "closed",
    created_at: str = "2023-09-16",
    title: str = "Fix bug",
    reviews: list[Review] | None = None,
) -> PullRequest:
    return PullRequest(
        owner=owner,
        repo=repo,
        number=number,
        state=state,
        created_at=ts(created_at),
        updated_at=None,
        closed_at=None,
        merged_at=None,
        author=author,
        title=title,
        reviews=tuple(reviews or ()),
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def window() -> Window:
    return Window(ts("2023-09-15"), ts("2023-09-23"))


@pytest.fixture(autouse=True)
def no_dotenv(mocker):
    """Prevent tests from loading a real .env file."""
    mocker.patch("ghstats.cli.load_dotenv")
