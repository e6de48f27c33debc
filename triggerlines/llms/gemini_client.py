# =============================================================================
# triggerlines/llms/gemini_client.py - Google Gemini generateContent client
# =============================================================================
# Key travels as the `key` query parameter. Generated text is read from
# candidates[0].content.parts[0].text.
# =============================================================================

from typing import Any

from triggerlines.core.security import require_api_key
from triggerlines.llms.base import BaseLLM, ProviderRequest

GENERATION_CONFIG = {
    "temperature": 0.9,
    "topK": 1,
    "topP": 1,
    "maxOutputTokens": 2048,
}


def _first(value: Any, key: str) -> Any:
    items = value.get(key) if isinstance(value, dict) else None
    if not isinstance(items, list) or not items:
        return None
    return items[0]


class GeminiClient(BaseLLM):
    name = "gemini"
    display_name = "Gemini"

    def build_request(self, prompt: str) -> ProviderRequest:
        key = require_api_key(self.config)
        return ProviderRequest(
            url=self.config.endpoint,
            params={"key": key},
            json={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": dict(GENERATION_CONFIG),
            },
        )

    def parse_response(self, body: Any) -> str:
        candidate = _first(body, "candidates")
        content = candidate.get("content") if isinstance(candidate, dict) else None
        part = _first(content, "parts")
        text = part.get("text") if isinstance(part, dict) else None
        if not isinstance(text, str):
            raise self._shape_error()
        return text
