from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from triggerlines.core.config import Settings, get_settings, validate_settings
from triggerlines.core.errors import TriggerLinesError, ValidationError
from triggerlines.schemas.request import GenerateRequest
from triggerlines.schemas.response import ErrorResponse, GenerateResponse, HealthStatus, ProviderAvailability
from triggerlines.services.llm_service import MISSING_TRIGGER_WORD, ProviderGateway
from triggerlines.utils.logger import configure_logging, logger


def get_gateway(request: Request) -> ProviderGateway:
    return request.app.state.gateway


async def handle_app_error(request: Request, exc: TriggerLinesError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", extra={"path": request.url.path, "error": exc.message})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("server_error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None, validate_on_startup: bool = True) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if validate_on_startup:
            validate_settings(settings)
        logger.info(
            "server_started",
            extra={
                **app.state.gateway.provider_status(),
                "default_provider": settings.default_provider,
            },
        )
        yield

    app = FastAPI(title="TriggerLines", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = ProviderGateway(settings)

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.add_exception_handler(TriggerLinesError, handle_app_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.mount("/static", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")

    @app.get("/", include_in_schema=False)
    async def root() -> FileResponse:
        return FileResponse(settings.static_dir / "index.html")

    @app.get("/api/health", response_model=HealthStatus)
    async def get_health(gateway: ProviderGateway = Depends(get_gateway)) -> HealthStatus:
        return HealthStatus(
            providers=ProviderAvailability(**gateway.provider_status()),
            default_provider=gateway.default_provider,
        )

    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def post_generate(
        request: Request, gateway: ProviderGateway = Depends(get_gateway)
    ) -> GenerateResponse:
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError(MISSING_TRIGGER_WORD)
        body = GenerateRequest.from_payload(payload)
        result = await gateway.generate(body.trigger_word, body.provider)
        return GenerateResponse(
            message=result.message,
            trigger_word=result.trigger_word,
            provider=result.provider,
        )

    return app


app = create_app()
