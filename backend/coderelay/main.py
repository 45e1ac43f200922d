# coderelay/main.py
from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from coderelay.core.config import Settings
from coderelay.core.log import configure_logging
from coderelay.routes.chat import router as chat_router
from coderelay.routes.errors import validation_error_handler
from coderelay.routes.run_code import router as run_code_router

# keys live in the server environment (or a local .env), never in the browser bundle
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="coderelay")
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(run_code_router)
    app.include_router(chat_router)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    if not settings.judge0_api_key:
        logger.warning("JUDGE0_API_KEY is not set; /run-code will report a configuration error")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; /api/chat will report a configuration error")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings: Settings = app.state.settings
    logger.info("Relay listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
