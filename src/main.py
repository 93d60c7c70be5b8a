import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.config.logging import setup_logging
from src.config.settings import settings
from src.errors import (
    FieldError,
    InvitationAppError,
    NotFoundError,
    PayloadTooLargeError,
    SlugTakenError,
    StoreError,
    StoredConfigError,
    UnauthorizedError,
    UnknownTemplateError,
    ValidationError,
    field_errors_from_pydantic,
)
from src.guestbook.routers import router as guestbook_router
from src.invitations.routers import router as invitations_router
from src.routers.healthz.router import router as healthz_router
from src.rsvps.routers import router as rsvps_router

setup_logging()
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[InvitationAppError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UnknownTemplateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    SlugTakenError: status.HTTP_409_CONFLICT,
    UnauthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PayloadTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    StoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
    StoredConfigError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        await run_migrations()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Wedding Invitations API",
    description="API for building, publishing and answering wedding invitations",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_body(message: str, errors: list[FieldError] | None = None) -> dict:
    body: dict = {"detail": message}
    if errors is not None:
        body["errors"] = [{"field": error.field, "message": error.message} for error in errors]
    return body


@app.exception_handler(InvitationAppError)
async def invitation_app_error_handler(request: Request, exc: InvitationAppError) -> JSONResponse:
    status_code = next(
        (code for error_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    errors = exc.errors if isinstance(exc, ValidationError) else None
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content=_error_body(exc.message, errors))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = field_errors_from_pydantic(
        exc, root="request", skip_locations=("body", "query", "path", "header")
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body("Validation failed", errors),
    )


# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(invitations_router, tags=["Invitations"])
app.include_router(rsvps_router, tags=["RSVPs"])
app.include_router(guestbook_router, tags=["Guestbook"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Wedding Invitations API"}
