"""HTML form and result page.

This is the presentation boundary: it reads the five fields, validates them
through GrowthInput, and renders the report. Jinja2 autoescapes every text span.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from growthcheck.core.config import get_settings
from growthcheck.core.enums import Sex
from growthcheck.schemas.growth import FIELD_MESSAGES, GrowthInput, first_error_message
from growthcheck.services.growth_narrative import build_report, format_cm

logger = logging.getLogger(__name__)
router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["cm"] = format_cm


def _page(**context) -> dict:
    return {"app_name": get_settings().app_name, "sexes": list(Sex), **context}


@router.get("/", response_class=HTMLResponse)
async def form_page(request: Request):
    """Empty calculator form."""
    return templates.TemplateResponse(request, "index.html", _page(values={}))


@router.get("/result", response_class=HTMLResponse)
async def result_page(request: Request):
    """Validate the submitted form; on failure show the first message and keep the values."""
    values = {k: request.query_params.get(k, "").strip() for k in FIELD_MESSAGES}
    try:
        data = GrowthInput.model_validate({k: v for k, v in values.items() if v})
    except ValidationError as e:
        message = first_error_message(e.errors())
        logger.info("Rejected submission: %s", message)
        return templates.TemplateResponse(
            request,
            "index.html",
            _page(values=values, error=message),
            status_code=422,
        )
    report = build_report(data)
    return templates.TemplateResponse(request, "index.html", _page(values=values, report=report))
