"""
Theme conversion endpoints.
Thin HTTP/MCP layer over the `converter` core: every handler is a direct,
synchronous call into pure functions, so no request state is kept.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from converter import Direction, conversion_stats, convert, sample_for, validate
from schemas.requests import ThemeConvertRequest, ThemeValidateRequest
from schemas.responses import (
    ConversionStats,
    SampleResponse,
    ThemeConversionResponse,
    ValidationResponse,
)

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAMES = {
    Direction.V3_TO_V4: "tailwind-v4-variables.css",
    Direction.V4_TO_V3: "tailwind-v3-variables.css",
}

router = APIRouter()

@router.post("/convert_theme", response_model=ThemeConversionResponse, operation_id="convert_theme", description="Convert Tailwind theme variables between v3 (HSL) and v4 (OKLCH)")
async def convert_theme(request: ThemeConvertRequest):
    """Validate and convert a theme stylesheet."""
    if not request.css.strip():
        return ThemeConversionResponse(success=True, css="")

    validation_errors = validate(request.css)
    outcome = convert(request.css, request.direction)
    if not outcome.succeeded:
        logger.info("%s conversion left %d values unconverted", request.direction.value, len(outcome.diagnostics))

    return ThemeConversionResponse(
        success=outcome.succeeded,
        css=outcome.converted_text,
        errors=list(outcome.diagnostics),
        validation_errors=validation_errors,
        stats=ConversionStats(**conversion_stats(outcome.converted_text)),
    )

@router.post("/validate_theme", response_model=ValidationResponse, operation_id="validate_theme", description="Check theme CSS for unbalanced braces and malformed custom properties")
async def validate_theme(request: ThemeValidateRequest):
    """Run the advisory validator only."""
    errors = validate(request.css)
    return ValidationResponse(valid=not errors, errors=errors)

@router.get("/sample_theme/{direction}", response_model=SampleResponse, operation_id="sample_theme", description="Get an example input theme for a conversion direction")
async def sample_theme(direction: Direction):
    """Return the canned example document for `direction`."""
    return SampleResponse(direction=direction, css=sample_for(direction))

@router.post("/download_theme", operation_id="download_theme", description="Convert a theme and return it as a downloadable CSS file")
async def download_theme(request: ThemeConvertRequest):
    """Convert and return the result as a `text/css` attachment."""
    outcome = convert(request.css, request.direction)
    if not outcome.converted_text.strip():
        raise HTTPException(status_code=400, detail="Nothing to download: converted theme is empty")

    filename = DOWNLOAD_FILENAMES[request.direction]
    return Response(
        content=outcome.converted_text,
        media_type="text/css",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
