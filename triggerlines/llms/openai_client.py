from typing import Any

from triggerlines.core.security import require_api_key
from triggerlines.llms.base import BaseLLM, ProviderRequest
from triggerlines.llms.prompts import SYSTEM_PERSONA

OPENAI_MODEL = "gpt-4o"


class OpenAIClient(BaseLLM):
    """Chat Completions client; key is sent as a bearer token."""

    name = "openai"
    display_name = "OpenAI"

    def build_request(self, prompt: str) -> ProviderRequest:
        key = require_api_key(self.config)
        return ProviderRequest(
            url=self.config.endpoint,
            headers={"Authorization": f"Bearer {key}"},
            json={
                "model": OPENAI_MODEL,
                "messages": [
                    {"role": "system", "content": SYSTEM_PERSONA},
                    {"role": "user", "content": prompt},
                ],
                "temperature": 0.9,
                "max_tokens": 2048,
            },
        )

    def parse_response(self, body: Any) -> str:
        choices = body.get("choices") if isinstance(body, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise self._shape_error()
        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise self._shape_error()
        return content
