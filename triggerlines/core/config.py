import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from triggerlines.core.errors import ConfigurationError

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

GEMINI_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
)
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"

KNOWN_PROVIDERS = ("gemini", "openai")


class ProviderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    api_key: str | None = None
    endpoint: str

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    gemini_api_key: str = ""
    openai_api_key: str = ""
    default_provider: str = "gemini"
    host: str = "0.0.0.0"
    port: int = 3000
    request_timeout: float = 30.0
    log_level: str = "INFO"
    static_dir: Path = PACKAGE_ROOT / "static"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            default_provider=(os.getenv("DEFAULT_PROVIDER") or "gemini").strip().lower(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT") or "3000"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT") or "30"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def providers(self) -> dict[str, ProviderConfig]:
        return {
            "gemini": ProviderConfig(
                name="gemini", api_key=self.gemini_api_key or None, endpoint=GEMINI_ENDPOINT
            ),
            "openai": ProviderConfig(
                name="openai", api_key=self.openai_api_key or None, endpoint=OPENAI_ENDPOINT
            ),
        }


def validate_settings(settings: Settings) -> None:
    """Refuse to start unless at least one provider has an API key."""
    if not any(p.configured for p in settings.providers().values()):
        raise ConfigurationError(
            "No API keys configured! Please set GEMINI_API_KEY or OPENAI_API_KEY in your .env file"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
