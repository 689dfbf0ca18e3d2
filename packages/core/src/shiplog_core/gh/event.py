"""Parse the GitHub Actions event payload that triggered a run."""

from __future__ import annotations

import json
from pathlib import Path

from shiplog_core.errors import EventError
from shiplog_core.models import PullRequestSnapshot


def load_event(path: str) -> dict:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise EventError(f"Could not read event payload {path}: {e}") from e


def snapshot_from_event(payload: dict) -> PullRequestSnapshot:
    """Extract the pull request fields the pipeline needs from a pull_request event."""
    pr = payload.get("pull_request")
    if not pr:
        raise EventError("No pull request found in the event payload.")

    user = pr.get("user") or {}
    return PullRequestSnapshot(
        number=int(pr["number"]),
        title=pr.get("title") or "",
        body=pr.get("body") or None,
        author=user.get("login") or None,
        merged_at=pr.get("merged_at") or None,
        labels=tuple(label["name"] for label in pr.get("labels") or [] if label.get("name")),
        merged=bool(pr.get("merged")),
    )
