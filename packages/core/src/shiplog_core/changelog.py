"""Merge a formatted entry into the changelog document on disk.

The merge is text-structural: prior entries are never parsed or reordered,
only the insertion point is located. The leading lines are classified as

    heading   "# <title>" on the very first line
    preamble  following lines that are blank or do not start with "#";
              a "---" rule closes the preamble and, together with the blank
              lines after it, still belongs to the header block
    rest      everything after the header block

and the new entry goes between the header block and the rest.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from shiplog_core.errors import FileIOError
from shiplog_core.models import ChangelogDocument, ChangelogEntry

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "# Changelog\n\nAll notable changes to this project.\n\n---\n\n"


def _is_terminated(line: str) -> bool:
    return line.endswith(("\n", "\r"))


def _is_title(line: str) -> bool:
    return line.startswith("# ") and bool(line[2:].strip()) and _is_terminated(line)


def _is_rule(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= 3 and set(stripped) == {"-"}


def parse_document(text: str) -> ChangelogDocument:
    """Split text into its header block and the rest.

    header is empty when the first line is not a level-1 heading.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not _is_title(lines[0]):
        return ChangelogDocument(header="", rest=text)

    end = 1
    while end < len(lines):
        line = lines[end]
        if line.startswith("#") or not _is_terminated(line):
            break
        end += 1
        if _is_rule(line):
            while end < len(lines) and not lines[end].strip() and _is_terminated(lines[end]):
                end += 1
            break

    header = "".join(lines[:end])
    return ChangelogDocument(header=header, rest=text[len(header) :])


def merge_text(entry_text: str, existing: str) -> str:
    document = parse_document(existing)
    if document.header:
        return document.header + entry_text + document.rest
    if not existing.strip():
        return DEFAULT_HEADER + entry_text
    return entry_text + existing


def read_document(path: str) -> str:
    """Return the changelog's current text, or "" when the file does not exist yet."""
    target = Path(path)
    if not target.exists():
        return ""
    try:
        # newline="" keeps \r\n intact so untouched content stays byte-identical.
        with open(target, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(f"Could not read {path}: {e}") from e


def write_document(path: str, content: str) -> None:
    """Replace the file at path with content in one step.

    The text goes to a temporary file next to the target first, so a failed
    write never leaves a half-written changelog behind.
    """
    target = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        if target.exists():
            shutil.copymode(target, tmp_name)
        else:
            # NamedTemporaryFile creates 0600; a new changelog gets the usual umask mode.
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise FileIOError(f"Could not write {path}: {e}") from e


def merge_entry(entry: ChangelogEntry, path: str) -> None:
    existing = read_document(path)
    write_document(path, merge_text(entry.text, existing))
    logger.info("Updated %s", path)
