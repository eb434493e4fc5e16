from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .errors import ConfigError
from .models import RepoRef, Window


@dataclass(frozen=True)
class ReportConfig:
    repos: tuple[RepoRef, ...]
    window: Window
    output_path: Path | None = None


def as_utc(value: datetime) -> datetime:
    """Dates without a zone are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def load_repos_file(path: Path) -> list[RepoRef]:
    """Read one ``owner/repo`` per line, skipping blank lines and ``#`` comments."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read repository list {path}: {exc}") from exc

    repos: list[RepoRef] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        entry = line.split("#", 1)[0].strip()
        if not entry:
            continue
        try:
            repos.append(RepoRef.parse(entry))
        except ValueError as exc:
            raise ConfigError(f"{path}:{lineno}: {exc}") from exc
    return repos


def build_config(
    repo_args: tuple[str, ...] | list[str],
    repos_file: Path | None,
    date_from: datetime,
    date_to: datetime,
    output_path: Path | None = None,
) -> ReportConfig:
    repos: list[RepoRef] = []
    for value in repo_args:
        try:
            repos.append(RepoRef.parse(value))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    if repos_file is not None:
        repos.extend(load_repos_file(repos_file))
    if not repos:
        raise ConfigError("No repositories given. Pass OWNER/REPO arguments or --repos-file.")

    # Keep the first occurrence of each repository.
    unique = tuple(dict.fromkeys(repos))

    try:
        window = Window(as_utc(date_from), as_utc(date_to))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    return ReportConfig(repos=unique, window=window, output_path=output_path)
