"""Tests for entry formatting."""

from datetime import datetime, timedelta, timezone

from shiplog_core.formatter import format_attribution, format_entry
from shiplog_core.models import PullRequestDetails


def _details(author="alice", reviewers=(), merged_at=None):
    return PullRequestDetails(
        title="Add dark mode",
        body="",
        author=author,
        reviewers=reviewers,
        commits=(),
        files_changed=(),
        labels=(),
        merged_at=merged_at or datetime(2024, 3, 1, tzinfo=timezone.utc),
    )


class TestAttribution:
    def test_author_only(self):
        assert format_attribution("alice", ()) == "Shipped by @alice"

    def test_author_and_reviewers(self):
        assert format_attribution("alice", ("bob", "carol")) == "Shipped by @alice • Reviewed by @bob, @carol"


class TestFormatEntry:
    def test_end_to_end_block(self):
        entry = format_entry("### 🌙 Dark mode\nToggle it in settings.", _details())
        assert entry.text.startswith("## 2024-03-01\n\n")
        assert "### 🌙 Dark mode\nToggle it in settings." in entry.text
        assert entry.text.endswith("Shipped by @alice\n\n---\n\n")

    def test_exact_layout(self):
        entry = format_entry("  body text \n\n", _details(reviewers=("bob",)))
        assert entry.text == "## 2024-03-01\n\nbody text\n\nShipped by @alice • Reviewed by @bob\n\n---\n\n"

    def test_date_uses_utc_calendar_day(self):
        late_evening = datetime(2024, 2, 29, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        entry = format_entry("x", _details(merged_at=late_evening))
        assert entry.date == "2024-03-01"

    def test_reviewer_order_preserved(self):
        entry = format_entry("x", _details(reviewers=("zed", "amy")))
        assert entry.attribution == "Shipped by @alice • Reviewed by @zed, @amy"
