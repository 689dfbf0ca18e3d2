"""Base writer implementing the Template Method pattern.

All providers share the same generation algorithm:
    generate() → SYSTEM_PROMPT + user prompt
               → _call_api()   ← only this differs per provider
               → _validate()

Subclasses implement two things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and return the text response (or None)

There is deliberately no retry loop: a failed or empty completion aborts the
run and the changelog is left untouched.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from shiplog_core.errors import EmptyAIResponse
from shiplog_core.prompt import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_TEMPERATURE = 0.7
_MAX_TOKENS = 500


class BaseWriter(ABC):
    TEMPERATURE: float = _TEMPERATURE
    MAX_TOKENS: int = _MAX_TOKENS

    def generate(self, prompt: str) -> str:
        """Ask the model for a changelog entry and return its raw markdown.

        Raises EmptyAIResponse when the model answers with nothing usable.
        """
        raw = self._call_api(SYSTEM_PROMPT, prompt)
        return self._validate(raw)

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> str | None:
        """Make a single API call and return the raw text response.

        Implementations convert SDK errors into GenerationError.
        """

    def _validate(self, raw: str | None) -> str:
        if not raw or not raw.strip():
            raise EmptyAIResponse(f"{self.__class__.__name__}: no content in model response.")
        logger.debug("%s returned %d characters", self.__class__.__name__, len(raw))
        return raw
