# =============================================================================
# triggerlines/core/errors.py - Error taxonomy shared by gateway and API layer
# =============================================================================
# Every error carries the HTTP status the API layer answers with. Messages are
# returned to the caller verbatim as {"error": <message>}.
# =============================================================================


class TriggerLinesError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TriggerLinesError):
    status_code = 400


class ConfigurationError(TriggerLinesError):
    pass


class NoProviderAvailableError(TriggerLinesError):
    def __init__(self, message: str = "No API providers available") -> None:
        super().__init__(message)


class UpstreamHTTPError(TriggerLinesError):
    def __init__(self, provider: str, status_code: int | None, body: str, message: str | None = None) -> None:
        self.provider = provider
        self.upstream_status = status_code
        self.body = body
        super().__init__(message or f"{provider} API error: {status_code} - {body}")


class UpstreamConnectionError(UpstreamHTTPError):
    def __init__(self, provider: str, detail: str) -> None:
        super().__init__(provider, None, "", message=f"{provider} API unreachable: {detail}")


class UpstreamResponseShapeError(TriggerLinesError):
    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Invalid response from {provider} API")
