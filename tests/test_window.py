"""Tests for the window predicates and the Window/RepoRef models."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from ghstats.models import RepoRef, Window
from ghstats.window import is_in_window, should_include_pull_request

from .conftest import ts


class TestIsInWindow:
    def test_inside(self, window):
        assert is_in_window(ts("2023-09-16"), window)

    def test_equal_to_start_is_excluded(self, window):
        assert not is_in_window(ts("2023-09-15"), window)

    def test_equal_to_end_is_excluded(self, window):
        assert not is_in_window(ts("2023-09-23"), window)

    def test_just_after_start_is_included(self, window):
        assert is_in_window(ts("2023-09-15T00:00:01"), window)

    def test_before_and_after(self, window):
        assert not is_in_window(ts("2023-09-01"), window)
        assert not is_in_window(ts("2023-10-01"), window)

    def test_none_is_never_inside(self, window):
        assert not is_in_window(None, window)


class TestShouldIncludePullRequest:
    def test_open_pr_created_before_window_is_kept(self, window):
        assert should_include_pull_request("open", ts("2022-01-01"), window)

    def test_closed_pr_created_inside_window_is_kept(self, window):
        assert should_include_pull_request("closed", ts("2023-09-20"), window)

    def test_closed_pr_created_outside_window_is_dropped(self, window):
        assert not should_include_pull_request("closed", ts("2023-09-10"), window)

    def test_closed_pr_created_on_boundary_is_dropped(self, window):
        assert not should_include_pull_request("closed", ts("2023-09-23"), window)


class TestWindow:
    def test_start_must_precede_end(self):
        with pytest.raises(ValueError):
            Window(ts("2023-09-23"), ts("2023-09-15"))

    def test_empty_window_rejected(self):
        with pytest.raises(ValueError):
            Window(ts("2023-09-15"), ts("2023-09-15"))

    def test_naive_start_rejected(self):
        with pytest.raises(ValueError, match="date_from must be timezone-aware"):
            Window(datetime(2023, 9, 15), ts("2023-09-23"))

    def test_naive_end_rejected(self):
        with pytest.raises(ValueError, match="date_to must be timezone-aware"):
            Window(ts("2023-09-15"), datetime(2023, 9, 23))

    def test_aware_non_utc_window_compares_with_utc_timestamps(self):
        plus_two = timezone(timedelta(hours=2))
        window = Window(datetime(2023, 9, 15, 2, tzinfo=plus_two), datetime(2023, 9, 23, tzinfo=plus_two))
        assert not is_in_window(ts("2023-09-15"), window)
        assert is_in_window(ts("2023-09-15T00:00:01"), window)


class TestRepoRef:
    def test_parse(self):
        ref = RepoRef.parse("acme/widgets")
        assert ref == RepoRef("acme", "widgets")
        assert ref.slug == "acme/widgets"

    @pytest.mark.parametrize("value", ["acme", "/widgets", "acme/", "a/b/c", ""])
    def test_parse_rejects_bad_format(self, value):
        with pytest.raises(ValueError, match="OWNER/REPO"):
            RepoRef.parse(value)
