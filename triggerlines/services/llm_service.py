import asyncio
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

import httpx

from triggerlines.core.config import ProviderConfig, Settings
from triggerlines.core.errors import TriggerLinesError, UpstreamConnectionError, ValidationError
from triggerlines.llms.prompts import build_prompt
from triggerlines.llms.router import get_client, select_provider
from triggerlines.utils.logger import logger

MISSING_TRIGGER_WORD = "Missing triggerWord in request body"


@dataclass(frozen=True)
class GenerationResult:
    message: str
    trigger_word: str
    provider: str


class ProviderGateway:
    """Turns a trigger word into generated text via exactly one upstream provider.

    Holds only immutable configuration, so one instance serves any number of
    concurrent requests. Pass ``http_client`` to share a connection pool;
    otherwise every call opens and closes its own client.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._providers: dict[str, ProviderConfig] = settings.providers()
        self._http_client = http_client

    @property
    def default_provider(self) -> str:
        return self._settings.default_provider

    def provider_status(self) -> dict[str, bool]:
        return {name: cfg.configured for name, cfg in self._providers.items()}

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self._settings.request_timeout) as client:
            yield client

    async def generate(self, trigger_word: str | None, provider: str | None = None) -> GenerationResult:
        if not isinstance(trigger_word, str) or not trigger_word:
            raise ValidationError(MISSING_TRIGGER_WORD)

        config, reason = select_provider(self._providers, provider, self.default_provider)
        logger.info(
            "generate_requested",
            extra={
                "trigger_word": trigger_word,
                "requested_provider": provider,
                "provider": config.name,
                "routing_reason": reason,
            },
        )
        llm = get_client(config)
        prompt = build_prompt(trigger_word)
        timeout = self._settings.request_timeout
        start = time.perf_counter()
        try:
            async with self._client() as client:
                # Bounds the whole call; the httpx timeout only bounds each read.
                try:
                    text = await asyncio.wait_for(llm.generate(prompt, client), timeout=timeout)
                except asyncio.TimeoutError as e:
                    raise UpstreamConnectionError(llm.display_name, f"timed out after {timeout:g}s") from e
        except TriggerLinesError as e:
            logger.warning("provider_failed", extra={"provider": config.name, "error": str(e)})
            raise
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info("llm_used", extra={"provider": config.name, "latency_ms": round(latency_ms, 2)})
        return GenerationResult(message=text, trigger_word=trigger_word, provider=config.name)
