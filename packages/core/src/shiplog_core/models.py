"""Value objects passed between pipeline stages.

All of them are frozen: each stage builds a new value from its predecessor's
output and never mutates what it was given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Minimal facts about a merged pull request, captured from the event."""

    number: int
    title: str
    body: str | None = None
    author: str | None = None
    merged_at: str | None = None  # ISO-8601, as GitHub sends it
    labels: tuple[str, ...] = field(default_factory=tuple)
    merged: bool = True


@dataclass(frozen=True)
class PullRequestDetails:
    """Enriched record used for prompting and attribution.

    Built once by fetch_details(). commits and files_changed are kept in full;
    only the prompt truncates them.
    """

    title: str
    body: str
    author: str
    reviewers: tuple[str, ...]
    commits: tuple[str, ...]
    files_changed: tuple[str, ...]
    labels: tuple[str, ...]
    merged_at: datetime  # timezone-aware


@dataclass(frozen=True)
class ChangelogEntry:
    """One formatted markdown block, ready to be merged into the changelog."""

    date: str  # YYYY-MM-DD
    body: str
    attribution: str

    @property
    def text(self) -> str:
        return f"## {self.date}\n\n{self.body}\n\n{self.attribution}\n\n---\n\n"


@dataclass(frozen=True)
class ChangelogDocument:
    """A changelog split at the insertion point.

    header is the leading title + preamble block (empty when the document has
    none); rest is everything after it, left untouched by a merge.
    """

    header: str
    rest: str


@dataclass(frozen=True)
class AIConfig:
    api_key: str
    base_url: str
    model: str
