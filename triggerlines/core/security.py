from triggerlines.core.config import ProviderConfig
from triggerlines.core.errors import ConfigurationError


def require_api_key(config: ProviderConfig) -> str:
    key = config.api_key
    if not key or not key.strip():
        raise ConfigurationError(f"{config.name.upper()}_API_KEY is not set")
    return key.strip()


def mask_key(key: str | None) -> str:
    if not key:
        return "missing"
    return f"{key[:4]}...{key[-2:]}" if len(key) > 8 else "***"
