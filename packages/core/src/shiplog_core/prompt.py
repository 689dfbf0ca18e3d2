"""Prompt text sent to the model for a single changelog entry."""

from __future__ import annotations

from shiplog_core.models import PullRequestDetails

# Truncation applies to the prompt only; PullRequestDetails keeps everything.
MAX_PROMPT_COMMITS = 5
MAX_PROMPT_FILES = 10

NO_DESCRIPTION = "No description provided."

SYSTEM_PROMPT = """You are a technical writer who creates clear, engaging changelog entries.

Your entries should:
- Be written for end users, not developers
- Transform technical details into user benefits
- Be concise but informative
- Use emoji sparingly but effectively (🚀 for features, 🐛 for fixes, ✨ for improvements)
- Highlight what changed and why it matters

Avoid patterns that make text sound machine-written:
- No filler phrases: Skip "In order to", "It's important to note", "We're excited to announce"
- No puffery: Cut "pivotal", "seamless", "robust", "cutting-edge", "game-changing"
- No hedging: Say it or don't. Skip "could potentially", "helps to", "allows you to"
- No fake enthusiasm: Skip "We're thrilled", "Excited to share"
- Keep it direct: "Added dark mode" not "We've implemented a new dark mode feature"
- Vary rhythm: Mix short punchy sentences with longer ones
- Be specific: "40% faster" beats "significantly improved performance"

Write like a human updating their friends, not a marketing team.

Output ONLY the changelog entry in markdown format, nothing else."""


def _first_line(message: str) -> str:
    return message.split("\n", 1)[0].rstrip("\r")


def build_prompt(details: PullRequestDetails) -> str:
    commit_summary = "\n".join(f"- {_first_line(c)}" for c in details.commits[:MAX_PROMPT_COMMITS])
    files_summary = ", ".join(details.files_changed[:MAX_PROMPT_FILES])
    labels = ", ".join(details.labels) or "none"

    return f"""Generate a changelog entry for this merged pull request:

**Title:** {details.title}

**Description:**
{details.body or NO_DESCRIPTION}

**Commits:**
{commit_summary}

**Files changed:** {files_summary}

**Labels:** {labels}

Write a user-friendly changelog entry with:
1. A short, descriptive title (with appropriate emoji)
2. 1-2 sentences explaining the change in plain language
3. Optional: 2-3 bullet points if there are multiple aspects

Focus on the user impact, not implementation details."""
