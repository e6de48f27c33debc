from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from triggerlines.core.errors import ValidationError
from triggerlines.services.llm_service import MISSING_TRIGGER_WORD


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trigger_word: str = Field(..., alias="triggerWord")
    # Unknown names are not rejected here; provider selection falls back instead.
    provider: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerateRequest":
        if not isinstance(payload, dict):
            raise ValidationError(MISSING_TRIGGER_WORD)
        trigger_word = payload.get("triggerWord")
        if not isinstance(trigger_word, str) or not trigger_word:
            raise ValidationError(MISSING_TRIGGER_WORD)
        provider = payload.get("provider")
        return cls(trigger_word=trigger_word, provider=provider if isinstance(provider, str) and provider else None)
