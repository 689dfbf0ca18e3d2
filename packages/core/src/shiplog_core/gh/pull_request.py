from __future__ import annotations

import logging
from datetime import datetime, timezone

from github import Github, GithubException

from shiplog_core.errors import DetailFetchError, EventError
from shiplog_core.models import PullRequestDetails, PullRequestSnapshot

logger = logging.getLogger(__name__)

# requests' transport errors derive from OSError, so this pair covers both
# API-level and connection-level failures raised while paginating.
FETCH_ERRORS = (GithubException, OSError)


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def list_commit_messages(pr) -> list[str]:
    return [c.commit.message for c in pr.get_commits()]


def list_approved_reviewers(pr) -> list[str]:
    """Return distinct logins of APPROVED reviews, in the order they were first seen."""
    reviewers: list[str] = []
    for review in pr.get_reviews():
        if review.state != "APPROVED" or review.user is None:
            continue
        login = (review.user.login or "").strip()
        if login and login not in reviewers:
            reviewers.append(login)
    return reviewers


def list_changed_files(pr) -> list[str]:
    return [f.filename for f in pr.get_files()]


def parse_timestamp(value: str | None) -> datetime:
    """Parse a GitHub ISO-8601 timestamp; fall back to now (UTC) when absent."""
    if not value:
        return datetime.now(timezone.utc)
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise EventError(f"Invalid merge timestamp {value!r}: {e}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def snapshot_from_pull(pr) -> PullRequestSnapshot:
    """Build a snapshot from a PyGithub PullRequest, for runs outside an Actions event."""
    return PullRequestSnapshot(
        number=pr.number,
        title=pr.title or "",
        body=pr.body,
        author=pr.user.login if pr.user else None,
        merged_at=pr.merged_at.isoformat() if pr.merged_at else None,
        labels=tuple(label.name for label in pr.labels),
        merged=bool(pr.merged),
    )


def fetch_details(snapshot: PullRequestSnapshot, repo) -> PullRequestDetails:
    """Gather commits, approving reviewers and changed files for a merged PR.

    One attempt per query. Any failure aborts the whole aggregation; a partial
    PullRequestDetails is never returned.
    """
    try:
        pr = get_pull(repo, snapshot.number)
        commits = list_commit_messages(pr)
        reviewers = list_approved_reviewers(pr)
        files = list_changed_files(pr)
    except FETCH_ERRORS as e:
        raise DetailFetchError(f"Could not fetch details for PR #{snapshot.number}: {e}") from e

    logger.debug(
        "PR #%d: %d commit(s), %d approving reviewer(s), %d file(s)",
        snapshot.number,
        len(commits),
        len(reviewers),
        len(files),
    )

    return PullRequestDetails(
        title=snapshot.title,
        body=snapshot.body or "",
        author=snapshot.author or "unknown",
        reviewers=tuple(reviewers),
        commits=tuple(commits),
        files_changed=tuple(files),
        labels=tuple(snapshot.labels),
        merged_at=parse_timestamp(snapshot.merged_at),
    )
