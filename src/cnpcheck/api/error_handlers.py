"""Exception handlers mapping cnpcheck errors to JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cnpcheck.core.exceptions import CnpCheckError, InvalidCnpError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all cnpcheck error handlers on the FastAPI app."""

    @app.exception_handler(InvalidCnpError)
    async def invalid_cnp_handler(request: Request, exc: InvalidCnpError) -> JSONResponse:
        logger.info(
            "Rejected CNP on %s: %s",
            request.url.path,
            exc.reason,
            extra={"reason": exc.reason, "path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_cnp", "reason": str(exc.reason)},
        )

    @app.exception_handler(CnpCheckError)
    async def cnpcheck_error_handler(request: Request, exc: CnpCheckError) -> JSONResponse:
        logger.error(
            "cnpcheck error on %s: %s",
            request.url.path,
            exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "cnpcheck_error", "message": str(exc)},
        )
