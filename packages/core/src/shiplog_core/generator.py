"""Core changelog-entry orchestration."""

from __future__ import annotations

import logging

from shiplog_core.changelog import merge_entry
from shiplog_core.formatter import format_entry
from shiplog_core.gh.pull_request import fetch_details
from shiplog_core.models import AIConfig, ChangelogEntry, PullRequestSnapshot
from shiplog_core.prompt import build_prompt
from shiplog_core.providers.base import BaseWriter
from shiplog_core.providers.openai import OpenAIWriter

logger = logging.getLogger(__name__)


def skip_reason(
    snapshot: PullRequestSnapshot,
    include_labels: list[str] | None = None,
    exclude_labels: list[str] | None = None,
) -> str | None:
    """Return why this PR should not get an entry, or None when it should.

    Exclusion wins over inclusion: a PR carrying both an excluded and a
    required label is skipped.
    """
    if not snapshot.merged:
        return "not merged"
    labels = set(snapshot.labels)
    if exclude_labels and labels.intersection(exclude_labels):
        return "excluded label"
    if include_labels and not labels.intersection(include_labels):
        return "missing required label"
    return None


def build_entry(snapshot: PullRequestSnapshot, repo, writer: BaseWriter) -> ChangelogEntry:
    """Run aggregation, prompting, generation and formatting; touch no files."""
    details = fetch_details(snapshot, repo)
    prompt = build_prompt(details)
    content = writer.generate(prompt)
    return format_entry(content, details)


def generate_entry(
    snapshot: PullRequestSnapshot,
    repo,
    ai_config: AIConfig,
    changelog_path: str = "CHANGELOG.md",
    writer: BaseWriter | None = None,
    write: bool = True,
) -> ChangelogEntry:
    """Generate a changelog entry for a merged PR and merge it into the changelog.

    Every stage runs to completion before the next one starts, and the first
    failure propagates as a ShiplogError. The document is rewritten exactly
    once, and only after the entry exists. With write=False the entry is
    returned without touching the document.
    """
    logger.info("Generating changelog entry for PR #%d: %s", snapshot.number, snapshot.title)

    entry = build_entry(snapshot, repo, writer if writer is not None else OpenAIWriter(ai_config))

    if write:
        merge_entry(entry, changelog_path)
    return entry
