# =============================================================================
# triggerlines/llms/base.py - Provider interface shared by every upstream LLM
# =============================================================================
# A provider only knows how to shape its request and read its response.
# Transport, status checks and error normalization live in BaseLLM.generate
# so the gateway never touches provider-specific fields.
# =============================================================================

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import httpx

from triggerlines.core.config import ProviderConfig
from triggerlines.core.errors import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamResponseShapeError,
)


@dataclass(frozen=True)
class ProviderRequest:
    url: str
    json: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


class BaseLLM(ABC):
    name: str
    display_name: str

    def __init__(self, config: ProviderConfig) -> None:
        self.config = config

    @abstractmethod
    def build_request(self, prompt: str) -> ProviderRequest:
        ...

    @abstractmethod
    def parse_response(self, body: Any) -> str:
        """Return the generated text or raise UpstreamResponseShapeError."""

    async def generate(self, prompt: str, client: httpx.AsyncClient) -> str:
        req = self.build_request(prompt)
        try:
            r = await client.post(
                req.url,
                json=req.json,
                headers={"Content-Type": "application/json", **req.headers},
                params=req.params or None,
            )
        except httpx.TimeoutException as e:
            raise UpstreamConnectionError(self.display_name, f"timed out ({e.__class__.__name__})") from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(self.display_name, str(e) or e.__class__.__name__) from e
        if not r.is_success:
            raise UpstreamHTTPError(self.display_name, r.status_code, r.text)
        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamResponseShapeError(self.display_name) from e
        return self.parse_response(data)

    def _shape_error(self) -> UpstreamResponseShapeError:
        return UpstreamResponseShapeError(self.display_name)
