from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .errors import PayloadError
from .models import PullRequest, RepoRef, Review


def parse_timestamp(value: str | None) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PayloadError(f"Expected an ISO-8601 timestamp, got {value!r}.")
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise PayloadError(f"Invalid timestamp {value!r}.") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require(raw: dict[str, Any], key: str, what: str) -> Any:
    value = raw.get(key)
    if value is None:
        raise PayloadError(f"{what} payload is missing {key!r}.")
    return value


def _login(raw: dict[str, Any], what: str) -> str:
    user = raw.get("user")
    login = user.get("login") if isinstance(user, dict) else None
    if not login:
        raise PayloadError(f"{what} payload has no user login.")
    return login


def normalize_pull_request(raw: dict[str, Any], repo_ref: RepoRef) -> PullRequest:
    number = _require(raw, "number", "Pull request")
    what = f"Pull request {repo_ref.slug}#{number}"
    return PullRequest(
        owner=repo_ref.owner,
        repo=repo_ref.repo,
        number=number,
        state=_require(raw, "state", what),
        created_at=parse_timestamp(_require(raw, "created_at", what)),
        updated_at=parse_timestamp(raw.get("updated_at")),
        closed_at=parse_timestamp(raw.get("closed_at")),
        merged_at=parse_timestamp(raw.get("merged_at")),
        author=_login(raw, what),
        title=raw.get("title") or "",
    )


def normalize_review(raw: dict[str, Any]) -> Review:
    what = f"Review {raw.get('id', '?')}"
    return Review(
        state=_require(raw, "state", what),
        reviewer=_login(raw, what),
        submitted_at=parse_timestamp(raw.get("submitted_at")),
    )
