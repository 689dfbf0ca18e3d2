from __future__ import annotations

from datetime import timezone

from shiplog_core.models import ChangelogEntry, PullRequestDetails


def format_attribution(author: str, reviewers: tuple[str, ...] | list[str]) -> str:
    if reviewers:
        return f"Shipped by @{author} • Reviewed by " + ", ".join(f"@{r}" for r in reviewers)
    return f"Shipped by @{author}"


def format_entry(content: str, details: PullRequestDetails) -> ChangelogEntry:
    """Wrap generated markdown with the merge date heading and the attribution line."""
    date = details.merged_at.astimezone(timezone.utc).strftime("%Y-%m-%d")
    return ChangelogEntry(
        date=date,
        body=content.strip(),
        attribution=format_attribution(details.author, details.reviewers),
    )
