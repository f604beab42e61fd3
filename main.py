"""Buddy Assistant API application entry point."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from buddy_assistant import __version__
from buddy_assistant.api.routes import (
    children_router, diapers_router, feedings_router, health_router,
    sleep_router, timers_router, tummy_times_router,
)
from buddy_assistant.errors import (
    AssistantError,
    ConfirmationRequired,
    NotFoundError,
    StoreError,
    StoreUnavailableError,
    ValidationFailure,
)
from buddy_assistant.services.store import BABYBUDDY_URL, create_client

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one shared HTTP client to Baby Buddy for the app's lifetime."""
    app.state.http_client = create_client()
    logger.info("Baby Buddy client ready (%s)", BABYBUDDY_URL)

    yield

    await app.state.http_client.aclose()
    logger.info("Buddy Assistant API stopped")


app = FastAPI(
    title="Buddy Assistant API",
    description=(
        "Voice and text assistant tools for Baby Buddy: timers, feedings, "
        "sleep, diaper changes and tummy time."
    ),
    version=__version__,
    lifespan=lifespan,
)

_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationFailure, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ConfirmationRequired, status.HTTP_409_CONFLICT),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (StoreError, status.HTTP_502_BAD_GATEWAY),
)


@app.exception_handler(AssistantError)
async def assistant_error_handler(request: Request, exc: AssistantError) -> JSONResponse:
    status_code = next(
        (code for cls, code in _STATUS if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    body = {"detail": exc.message, "kind": exc.kind}
    if isinstance(exc, ValidationFailure):
        body["errors"] = exc.errors
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=body)


app.include_router(health_router)
app.include_router(children_router)
app.include_router(timers_router)
app.include_router(feedings_router)
app.include_router(sleep_router)
app.include_router(diapers_router)
app.include_router(tummy_times_router)
