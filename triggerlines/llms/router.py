# =============================================================================
# triggerlines/llms/router.py - Provider selection with deterministic fallback
# =============================================================================
# Order: requested (or default) provider if known and configured, then gemini,
# then openai. Anything else is NoProviderAvailableError.
# =============================================================================

from typing import Literal

from triggerlines.core.config import ProviderConfig
from triggerlines.core.errors import NoProviderAvailableError
from triggerlines.llms.base import BaseLLM
from triggerlines.llms.gemini_client import GeminiClient
from triggerlines.llms.openai_client import OpenAIClient

Provider = Literal["gemini", "openai"]

FALLBACK_ORDER: tuple[Provider, ...] = ("gemini", "openai")

PROVIDER_CLASSES: dict[str, type[BaseLLM]] = {
    "gemini": GeminiClient,
    "openai": OpenAIClient,
}


def get_client(config: ProviderConfig) -> BaseLLM:
    cls = PROVIDER_CLASSES.get(config.name)
    if cls is None:
        raise ValueError(f"Unknown provider: {config.name}")
    return cls(config)


def select_provider(
    providers: dict[str, ProviderConfig],
    requested: str | None,
    default: str,
) -> tuple[ProviderConfig, str]:
    """Return the provider to call and why it was chosen."""
    candidate = requested or default
    config = providers.get(candidate)
    if config is not None and config.configured:
        return config, "requested" if requested else "default"
    for name in FALLBACK_ORDER:
        config = providers.get(name)
        if config is not None and config.configured:
            return config, "fallback"
    raise NoProviderAvailableError()
