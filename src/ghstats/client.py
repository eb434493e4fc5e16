from __future__ import annotations

from typing import Any

import httpx
from rich.console import Console

from .errors import ApiError, AuthError, NetworkError, RateLimitError, RepoNotFoundError
from .models import Window
from .normalize import parse_timestamp
from .window import should_include_pull_request

_API_URL = "https://api.github.com"
_PER_PAGE = 100
_LOW_RATE_LIMIT = 100
_stderr = Console(stderr=True)


class GitHubClient:
    def __init__(self, token: str, base_url: str = _API_URL) -> None:
        # Requests are never retried and have no timeout.
        self._client = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=None,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.close()

    def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = self._client.get(url, params=params)
        except httpx.RequestError as exc:
            raise NetworkError(str(exc)) from exc

        remaining = response.headers.get("X-RateLimit-Remaining")
        reset_at = response.headers.get("X-RateLimit-Reset", "unknown")

        if response.status_code == 401:
            raise AuthError("GitHub token is invalid or missing required scopes.")
        if response.status_code in (403, 429) and remaining == "0":
            raise RateLimitError(f"GitHub rate limit exhausted. Resets at {reset_at}.")
        if response.status_code == 404:
            raise RepoNotFoundError(f"GitHub resource not found: {response.request.url.path}")
        if not response.is_success:
            raise ApiError(f"GitHub API returned HTTP {response.status_code}: {response.text}")

        if remaining is not None and remaining.isdigit() and int(remaining) < _LOW_RATE_LIMIT:
            _stderr.print(
                f"[yellow]Warning:[/yellow] GitHub rate limit low: {remaining} requests remaining "
                f"(resets at {reset_at})"
            )
        return response

    def get_paginated(self, url: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        next_url: str | None = url
        while next_url:
            response = self.get(next_url, params=params)
            items.extend(response.json())
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None
        return items

    def get_authenticated_login(self) -> str:
        return self.get("/user").json()["login"]

    def fetch_pull_requests(self, owner: str, repo: str, window: Window) -> list[dict[str, Any]]:
        """All PRs of ``owner/repo`` that are open or were created inside ``window``."""
        prs = self.get_paginated(
            f"/repos/{owner}/{repo}/pulls",
            {"state": "all", "per_page": _PER_PAGE},
        )
        return [
            pr
            for pr in prs
            if should_include_pull_request(pr.get("state"), parse_timestamp(pr.get("created_at")), window)
        ]

    def fetch_reviews(self, owner: str, repo: str, number: int) -> list[dict[str, Any]]:
        return self.get_paginated(
            f"/repos/{owner}/{repo}/pulls/{number}/reviews",
            {"per_page": _PER_PAGE},
        )
