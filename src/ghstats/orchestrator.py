from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from .models import DetailedStatRow, PullRequest, RepoRef, SummaryRow, Window
from .normalize import normalize_pull_request, normalize_review
from .stats import compute_detailed_stats, compute_summary


class ProgressCallback(Protocol):
    def __call__(self, completed: int, total: int, label: str) -> None: ...


class PullRequestSource(Protocol):
    def fetch_pull_requests(self, owner: str, repo: str, window: Window) -> list[dict[str, Any]]: ...

    def fetch_reviews(self, owner: str, repo: str, number: int) -> list[dict[str, Any]]: ...


@dataclass(frozen=True)
class Report:
    detailed: tuple[DetailedStatRow, ...]
    summary: tuple[SummaryRow, ...]


def _no_progress(completed: int, total: int, label: str) -> None:
    pass


def collect_pull_requests(
    client: PullRequestSource,
    repos: Sequence[RepoRef],
    window: Window,
    on_progress: ProgressCallback | None = None,
) -> list[PullRequest]:
    """Fetch and normalize every PR of ``repos`` together with its reviews.

    Repositories are walked one at a time and reviews are fetched one PR at a
    time; there is never more than one request in flight. ``on_progress`` is
    called after each repository and after each PR's reviews.
    """
    report = on_progress or _no_progress

    prs: list[PullRequest] = []
    for i, ref in enumerate(repos, start=1):
        raw_prs = client.fetch_pull_requests(ref.owner, ref.repo, window)
        prs.extend(normalize_pull_request(raw, ref) for raw in raw_prs)
        report(i, len(repos), f"@{ref.slug}")

    complete: list[PullRequest] = []
    for i, pr in enumerate(prs, start=1):
        raw_reviews = client.fetch_reviews(pr.owner, pr.repo, pr.number)
        complete.append(pr.with_reviews([normalize_review(raw) for raw in raw_reviews]))
        report(i, len(prs), f"@{pr.owner}/{pr.repo}/pull/{pr.number}")

    return complete


def build_report(pull_requests: Sequence[PullRequest], window: Window) -> Report:
    detailed = compute_detailed_stats(pull_requests, window)
    return Report(detailed=detailed, summary=compute_summary(detailed))
