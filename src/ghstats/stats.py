"""Per-repository and per-author contribution statistics."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import APPROVED, COMMENTED, DetailedStatRow, PullRequest, SummaryRow, Window
from .window import is_in_window

StatKey = tuple[str, str, str]


@dataclass
class _Counters:
    created: int = 0
    commented: int = 0
    approved: int = 0


@dataclass
class _AuthorTotals:
    pull_requests: int = 0
    commented: int = 0
    approved: int = 0
    repos: set[tuple[str, str]] = field(default_factory=set)
    repos_reviewed: set[tuple[str, str]] = field(default_factory=set)


def compute_detailed_stats(
    pull_requests: Iterable[PullRequest], window: Window
) -> tuple[DetailedStatRow, ...]:
    """Count PRs created and PRs reviewed per (owner, repo, actor).

    A reviewer is counted at most once per pull request for each of the
    COMMENTED and APPROVED states, however many such reviews they submitted.
    Reviews by the PR author and reviews outside the window are ignored, as
    are review states other than COMMENTED and APPROVED.
    """
    counters: dict[StatKey, _Counters] = {}

    for pr in pull_requests:
        if is_in_window(pr.created_at, window):
            counters.setdefault((pr.owner, pr.repo, pr.author), _Counters()).created += 1

        commented: set[StatKey] = set()
        approved: set[StatKey] = set()
        for review in pr.reviews:
            if review.reviewer == pr.author or not is_in_window(review.submitted_at, window):
                continue
            key = (pr.owner, pr.repo, review.reviewer)
            if review.state == COMMENTED and key not in commented:
                counters.setdefault(key, _Counters()).commented += 1
                commented.add(key)
            elif review.state == APPROVED and key not in approved:
                counters.setdefault(key, _Counters()).approved += 1
                approved.add(key)

    return tuple(
        DetailedStatRow(
            owner=owner,
            repo=repo,
            author=author,
            created=c.created,
            commented=c.commented,
            approved=c.approved,
        )
        for (owner, repo, author), c in sorted(counters.items())
    )


def compute_summary(detailed: Iterable[DetailedStatRow]) -> tuple[SummaryRow, ...]:
    """Roll detailed rows up to one row per author."""
    totals: dict[str, _AuthorTotals] = {}

    for row in detailed:
        t = totals.setdefault(row.author, _AuthorTotals())
        t.pull_requests += row.created
        t.commented += row.commented
        t.approved += row.approved
        if row.created > 0:
            t.repos.add((row.owner, row.repo))
        if row.commented > 0 or row.approved > 0:
            t.repos_reviewed.add((row.owner, row.repo))

    return tuple(
        SummaryRow(
            author=author,
            pull_requests=t.pull_requests,
            repos=len(t.repos),
            commented=t.commented,
            approved=t.approved,
            repos_reviewed=len(t.repos_reviewed),
        )
        for author, t in sorted(totals.items())
    )
