"""CNP validation endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from cnpcheck.models.cnp import CnpDetails, FailureReason
from cnpcheck.services.validator_service import CnpValidatorService

router = APIRouter(tags=["cnp"])


class CnpRequest(BaseModel):
    cnp: str
    allow_future_dates: Optional[bool] = None  # None: use the configured default


class CnpValidationResponse(BaseModel):
    cnp: str
    valid: bool
    reason: Optional[FailureReason] = None


def _service(request: Request) -> CnpValidatorService:
    return request.app.state.service


@router.post("/validate")
async def validate_cnp(body: CnpRequest, request: Request) -> CnpValidationResponse:
    """Validate a code. Invalid codes are a normal 200 answer."""
    outcome = _service(request).check(body.cnp, body.allow_future_dates)
    return CnpValidationResponse(cnp=body.cnp, valid=outcome.valid, reason=outcome.reason)


@router.post("/details")
async def cnp_details(body: CnpRequest, request: Request) -> CnpDetails:
    """Decode a valid code; invalid codes are answered with 422."""
    return _service(request).details(body.cnp, body.allow_future_dates)
