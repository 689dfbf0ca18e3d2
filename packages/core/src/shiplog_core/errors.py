"""Error kinds raised by the entry pipeline.

Each stage converts the library exception it sees (GithubException,
openai.OpenAIError, OSError) into one of these at its own boundary, so the
caller only ever has to handle ShiplogError.
"""

from __future__ import annotations


class ShiplogError(Exception):
    """Base class for every failure the pipeline reports."""


class ConfigError(ShiplogError):
    """Raised when the AI provider cannot be resolved or credentials are missing."""


class EventError(ShiplogError):
    """Raised when the triggering event payload is missing or has no pull request."""


class DetailFetchError(ShiplogError):
    """Raised when any GitHub query needed for the entry fails."""


class GenerationError(ShiplogError):
    """Raised when the chat completion call fails."""


class EmptyAIResponse(GenerationError):
    """Raised when the model returns no usable text."""


class FileIOError(ShiplogError):
    """Raised when the changelog document cannot be read or written."""
