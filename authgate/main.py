import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .auth import SESSION_COOKIE_TTL, TokenIssuer, init_auth_storage
from .auth.errors import AuthFlowError
from .config import settings
from .routes_auth import router as auth_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    issuer = TokenIssuer.from_settings(settings)
    if issuer.expires_in != SESSION_COOKIE_TTL:
        logger.warning(
            "Access token lifetime (%s) differs from session cookie lifetime (%s)",
            issuer.expires_in,
            SESSION_COOKIE_TTL,
        )

    init_auth_storage()
    app.state.token_issuer = issuer

    try:
        yield
    finally:
        app.state.token_issuer = None


app = FastAPI(title="authgate", version="1.0", lifespan=lifespan)


@app.exception_handler(AuthFlowError)
async def auth_flow_error_handler(_request: Request, exc: AuthFlowError) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(
        "Rejected malformed request body on %s (%d errors)",
        request.url.path,
        len(exc.errors()),
    )
    return JSONResponse(
        {"message": "Invalid request body"},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
    return JSONResponse(
        {"message": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


app.include_router(auth_router)
