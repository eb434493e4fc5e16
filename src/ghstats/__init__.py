"""Pull request and code review statistics for GitHub repositories."""
from .models import DetailedStatRow, PullRequest, RepoRef, Review, SummaryRow, Window
from .orchestrator import Report, build_report, collect_pull_requests
from .stats import compute_detailed_stats, compute_summary
from .window import is_in_window, should_include_pull_request

__all__ = [
    "DetailedStatRow",
    "PullRequest",
    "RepoRef",
    "Report",
    "Review",
    "SummaryRow",
    "Window",
    "build_report",
    "collect_pull_requests",
    "compute_detailed_stats",
    "compute_summary",
    "is_in_window",
    "should_include_pull_request",
]
