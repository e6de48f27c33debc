import os

import requests

DEFAULT_BACKEND_URL = "http://127.0.0.1:3000"


class GatewayClientError(Exception):
    pass


class GatewayClient:
    """Synchronous client for the TriggerLines HTTP API."""

    def __init__(self, base_url: str | None = None, timeout: float = 90.0, session: requests.Session | None = None) -> None:
        # No trailing slash so paths like /api/generate join cleanly
        self.base_url = (base_url or os.environ.get("BACKEND_URL") or DEFAULT_BACKEND_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _json(self, r: requests.Response, error: str) -> dict:
        try:
            data = r.json()
        except ValueError as e:
            raise GatewayClientError(error) from e
        if not isinstance(data, dict):
            raise GatewayClientError(error)
        return data

    def health(self) -> dict:
        try:
            r = self.session.get(f"{self.base_url}/api/health", timeout=10)
        except requests.exceptions.RequestException as e:
            raise GatewayClientError(f"Backend connection failed: {e}") from e
        if not r.ok:
            raise GatewayClientError("Backend health check failed")
        return self._json(r, "Backend health check failed")

    def generate(self, trigger_word: str, provider: str | None = None) -> str:
        body: dict = {"triggerWord": trigger_word}
        if provider:
            body["provider"] = provider
        try:
            r = self.session.post(f"{self.base_url}/api/generate", json=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GatewayClientError(f"Request failed: {e}") from e
        server_error = f"Server error: {r.status_code}"
        if not r.ok:
            try:
                error = self._json(r, server_error).get("error")
            except GatewayClientError:
                error = None
            raise GatewayClientError(error or server_error)
        message = self._json(r, server_error).get("message")
        if not isinstance(message, str):
            raise GatewayClientError(server_error)
        return message
