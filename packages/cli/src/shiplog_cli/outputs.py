"""GitHub Actions step outputs."""

from __future__ import annotations

import os
import uuid


def set_output(name: str, value: str) -> None:
    """Append a step output to $GITHUB_OUTPUT; a no-op outside Actions.

    Multi-line values use the heredoc form with a random delimiter so the
    value itself can never terminate the block early.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")
