import logging
import os
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Load env from mentorme/.env before settings are read
package_dir = os.path.dirname(os.path.abspath(__file__))
if "PYTEST_CURRENT_TEST" not in os.environ:
    load_dotenv(dotenv_path=os.path.join(package_dir, ".env"))

from mentorme.core.config import settings, validate_config  # noqa: E402
from mentorme.core.logging import LOGGER_NAME, configure_logging  # noqa: E402
from mentorme.core.middleware.request_id import RequestIdMiddleware  # noqa: E402
from mentorme.core.middleware.tracing import TracingMiddleware  # noqa: E402
from mentorme.core.validation import validate_env  # noqa: E402
from mentorme.core.errors import (  # noqa: E402
    AppError,
    app_error_handler,
    http_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from mentorme.core.tracing import setup_tracing  # noqa: E402
from mentorme.api import health, mentor  # noqa: E402

configure_logging(settings.ENV, settings.LOG_LEVEL)
validate_env()
validate_config(strict=getattr(settings, "CONFIG_STRICT", False))
setup_tracing(enabled=settings.OTEL_ENABLED)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Starting MentorMe intelligence service...")
    app.state.startup_time = time.time()
    try:
        yield
    finally:
        logging.getLogger(LOGGER_NAME).info("Stopping MentorMe intelligence service...")


app = FastAPI(title="MentorMe - Mentor Intelligence", lifespan=lifespan)

# Middlewares (last added runs first)
app.add_middleware(TracingMiddleware)
app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(HTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS origins come from settings.CORS_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mentor.router, tags=["mentor"])
app.include_router(health.root_router, tags=["health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("mentorme.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
