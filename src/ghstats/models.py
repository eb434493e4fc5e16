from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime

OPEN = "open"
COMMENTED = "COMMENTED"
APPROVED = "APPROVED"


@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def parse(cls, value: str) -> RepoRef:
        if value.count("/") != 1:
            raise ValueError(f"{value!r} is not a valid OWNER/REPO format.")
        owner, repo = value.split("/", 1)
        if not owner or not repo:
            raise ValueError(f"{value!r} is not a valid OWNER/REPO format.")
        return cls(owner=owner, repo=repo)


@dataclass(frozen=True)
class Window:
    """Open interval ``(date_from, date_to)`` that events are counted in."""

    date_from: datetime
    date_to: datetime

    def __post_init__(self) -> None:
        for name in ("date_from", "date_to"):
            if getattr(self, name).tzinfo is None:
                raise ValueError(f"Window {name} must be timezone-aware.")
        if self.date_from >= self.date_to:
            raise ValueError(
                f"Window start {self.date_from.isoformat()} must be before end {self.date_to.isoformat()}."
            )


@dataclass(frozen=True)
class Review:
    state: str
    reviewer: str
    submitted_at: datetime | None


@dataclass(frozen=True)
class PullRequest:
    owner: str
    repo: str
    number: int
    state: str
    created_at: datetime
    updated_at: datetime | None
    closed_at: datetime | None
    merged_at: datetime | None
    author: str
    title: str
    reviews: tuple[Review, ...] = ()

    def with_reviews(self, reviews: list[Review] | tuple[Review, ...]) -> PullRequest:
        return dataclasses.replace(self, reviews=tuple(reviews))


@dataclass(frozen=True)
class DetailedStatRow:
    owner: str
    repo: str
    author: str
    created: int
    commented: int
    approved: int


@dataclass(frozen=True)
class SummaryRow:
    author: str
    pull_requests: int
    repos: int
    commented: int
    approved: int
    repos_reviewed: int
