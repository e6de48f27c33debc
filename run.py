# =============================================================================
# run.py - Starts the TriggerLines backend (FastAPI), optionally the Streamlit UI
# =============================================================================
# Usage: python run.py            backend only, browser page at http://HOST:PORT
#        python run.py --with-ui  backend plus Streamlit client on port 8501
# Refuses to start when neither GEMINI_API_KEY nor OPENAI_API_KEY is set.
# =============================================================================

import argparse
import os
import subprocess
import sys

import uvicorn

from triggerlines.core.config import get_settings, validate_settings
from triggerlines.core.errors import ConfigurationError
from triggerlines.core.security import mask_key
from triggerlines.utils.logger import configure_logging

STREAMLIT_PORT = 8501

# Project root (where run.py lives)
ROOT = os.path.dirname(os.path.abspath(__file__))


def start_streamlit(backend_url: str) -> subprocess.Popen:
    cmd = [
        sys.executable,
        "-m", "streamlit",
        "run", "streamlit_app.py",
        "--server.port", str(STREAMLIT_PORT),
        "--server.address", "127.0.0.1",
        "--browser.gatherUsageStats", "false",
    ]
    env = os.environ.copy()
    env["BACKEND_URL"] = backend_url
    return subprocess.Popen(cmd, cwd=ROOT, env=env)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="TriggerLines backend server")
    parser.add_argument("--with-ui", action="store_true", help="also start the Streamlit client")
    args = parser.parse_args(argv)

    settings = get_settings()
    log = configure_logging(settings.log_level)
    try:
        validate_settings(settings)
    except ConfigurationError as e:
        log.error("startup_failed", extra={"error": e.message})
        return 1

    log.info(
        "api_configuration",
        extra={
            "gemini": mask_key(settings.gemini_api_key),
            "openai": mask_key(settings.openai_api_key),
            "default_provider": settings.default_provider,
        },
    )
    local_url = f"http://127.0.0.1:{settings.port}"
    log.info("endpoints", extra={"server": local_url, "generate": "POST /api/generate", "health": "GET /api/health"})

    ui_proc = start_streamlit(local_url) if args.with_ui else None
    try:
        uvicorn.run("triggerlines.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    finally:
        if ui_proc:
            ui_proc.terminate()
            ui_proc.wait(timeout=5)
    return 0


if __name__ == "__main__":
    sys.exit(main())
