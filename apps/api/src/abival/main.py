"""
ABIVAL API - Main FastAPI application.

Exposes the value validators over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from abival import __version__
from abival.config import get_settings
from abival.core.models import TypeTag
from abival.core.validator import ValidationResult, Validator
from abival.middleware import APITokenMiddleware
from abival.samples import run_samples

logger = logging.getLogger(__name__)

# Global instances
validator: Validator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - setup and teardown."""
    global validator

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    validator = Validator.from_settings(settings)
    logger.info(
        f"Validator ready (signed large integers: {validator.allow_signed_large_integers}, "
        f"hex large integers: {validator.allow_hex_large_integers})"
    )

    yield

    validator = None


app = FastAPI(
    title="ABIVAL API",
    description="Validators for primitive on-chain value literals",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(APITokenMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class ValidateRequest(BaseModel):
    """Request body for /v1/validate."""
    type: TypeTag
    value: str


class BatchValidateRequest(BaseModel):
    """Request body for /v1/validate/batch."""
    items: list[ValidateRequest] = Field(min_length=1)


class ValidationErrorResponse(BaseModel):
    code: str
    message: str


class ValidationResponse(BaseModel):
    """Response model for a single validation."""
    type: str
    value: str
    valid: bool
    error: ValidationErrorResponse | None = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        """Convert a ValidationResult to response format."""
        return cls(
            type=result.type_tag.value,
            value=result.value,
            valid=result.valid,
            error=(
                ValidationErrorResponse(
                    code=result.error.code.value,
                    message=result.error.message,
                )
                if result.error
                else None
            ),
        )


class BatchValidationResponse(BaseModel):
    """Response for batch validation."""
    results: list[ValidationResponse]
    all_valid: bool


def _get_validator() -> Validator:
    if not validator:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return validator


# =============================================================================
# Health & Status Endpoints
# =============================================================================


@app.get("/health")
async def health() -> dict[str, str]:
    """Basic health check."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/types")
async def list_types() -> dict[str, list[str]]:
    """List supported type tags."""
    return {"types": [t.value for t in TypeTag]}


@app.get("/api/samples")
async def samples() -> dict[str, Any]:
    """Replay the built-in sample literals through the validators."""
    outcomes = run_samples(_get_validator())
    return {
        "samples": [
            {
                "type": o.type_tag.value,
                "value": o.value,
                "expected_valid": o.expected_valid,
                "valid": o.result.valid,
                "matches_expectation": o.matches_expectation,
            }
            for o in outcomes
        ],
        "all_match": all(o.matches_expectation for o in outcomes),
    }


# =============================================================================
# Validate Endpoints (v1)
# =============================================================================


@app.post("/v1/validate", response_model=ValidationResponse)
async def validate_v1(request: ValidateRequest) -> ValidationResponse:
    """
    Validate one value against a type tag.

    Rejected values are a normal 200 response with valid=false and an
    INVALID_FORMAT error; unknown type tags fail request validation (422).
    """
    result = _get_validator().validate(request.type, request.value)
    return ValidationResponse.from_result(result)


@app.post("/v1/validate/batch", response_model=BatchValidationResponse)
async def validate_batch_v1(request: BatchValidateRequest) -> BatchValidationResponse:
    """Validate several (type, value) pairs, preserving order."""
    results = _get_validator().validate_many(
        (item.type, item.value) for item in request.items
    )
    return BatchValidationResponse(
        results=[ValidationResponse.from_result(r) for r in results],
        all_valid=all(r.valid for r in results),
    )
