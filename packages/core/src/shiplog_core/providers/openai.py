from __future__ import annotations

from openai import OpenAI, OpenAIError

from shiplog_core.errors import GenerationError
from shiplog_core.models import AIConfig
from shiplog_core.providers.base import BaseWriter


class OpenAIWriter(BaseWriter):
    """Chat-completions writer for OpenAI and any OpenAI-compatible endpoint.

    OpenRouter and self-hosted gateways speak the same protocol, so the only
    thing that changes between them is AIConfig.base_url.
    """

    def __init__(self, config: AIConfig):
        self.model = config.model
        self.client = OpenAI(api_key=config.api_key, base_url=config.base_url)

    def _call_api(self, system_prompt: str, user_prompt: str) -> str | None:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
            )
        except OpenAIError as e:
            raise GenerationError(f"Chat completion failed ({type(e).__name__}): {e}") from e
        if not response.choices:
            return None
        return response.choices[0].message.content
