# hal_greeting/main.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from hal_greeting.common.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    http_error_handler,
)
from hal_greeting.core.config import Settings
from hal_greeting.core.counter import AtomicCounter
from hal_greeting.routers import greeting

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application. Every call gets its own counter, seeded from
    settings, so ids are unique per app instance for its whole lifetime.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="HAL Greeting", version="0.1.0")

    app.state.settings = settings
    app.state.counter = AtomicCounter(seed=settings.COUNTER_SEED)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(greeting.router)

    logger.info(
        "greeting app ready: template=%r default_name=%r next_id=%d",
        settings.GREETING_TEMPLATE,
        settings.DEFAULT_NAME,
        app.state.counter.peek,
    )
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
