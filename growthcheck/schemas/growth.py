"""Growth calculator Pydantic schemas — form input and report output."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from growthcheck.core.constants import (
    AGE_MAX,
    AGE_MIN,
    CURRENT_HEIGHT_MAX_CM,
    CURRENT_HEIGHT_MIN_CM,
    FATHER_HEIGHT_MAX_CM,
    FATHER_HEIGHT_MIN_CM,
    MOTHER_HEIGHT_MAX_CM,
    MOTHER_HEIGHT_MIN_CM,
)
from growthcheck.core.enums import GrowthStage, HeightPosition, Sex


# ── Input ────────────────────────────────────────────────────────────────

class GrowthInput(BaseModel):
    """One form submission. Bounds here are the calculator's whole input domain."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., ge=AGE_MIN, le=AGE_MAX, description="Age in years")
    sex: Sex = Field(..., description="Biological sex")
    current_height: float = Field(
        ..., ge=CURRENT_HEIGHT_MIN_CM, le=CURRENT_HEIGHT_MAX_CM, description="Current height in cm"
    )
    father_height: float = Field(
        ..., ge=FATHER_HEIGHT_MIN_CM, le=FATHER_HEIGHT_MAX_CM, description="Father's height in cm"
    )
    mother_height: float = Field(
        ..., ge=MOTHER_HEIGHT_MIN_CM, le=MOTHER_HEIGHT_MAX_CM, description="Mother's height in cm"
    )


# Checked in this order; the first failing field is the one shown to the user.
FIELD_MESSAGES: dict[str, str] = {
    "age": f"Enter an age between {AGE_MIN} and {AGE_MAX} years.",
    "sex": "Select your biological sex.",
    "current_height": (
        f"Enter a valid height (between {CURRENT_HEIGHT_MIN_CM:g} and {CURRENT_HEIGHT_MAX_CM:g} cm)."
    ),
    "father_height": (
        f"Enter your father's height (between {FATHER_HEIGHT_MIN_CM:g} and {FATHER_HEIGHT_MAX_CM:g} cm)."
    ),
    "mother_height": (
        f"Enter your mother's height (between {MOTHER_HEIGHT_MIN_CM:g} and {MOTHER_HEIGHT_MAX_CM:g} cm)."
    ),
}
MISSING_FIELDS_MESSAGE = "Please fill in all the fields."


def _error_field(error: dict[str, Any]) -> str | None:
    """Field name from a pydantic error loc, e.g. ('body', 'age') or ('query', 'sex')."""
    for part in reversed(error.get("loc", ())):
        if part in FIELD_MESSAGES:
            return part
    return None


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Map pydantic errors to [{field, message}] in form order, one entry per field."""
    failed = {_error_field(e) for e in errors}
    out = [{"field": f, "message": m} for f, m in FIELD_MESSAGES.items() if f in failed]
    if None in failed and not out:
        out.append({"field": "", "message": MISSING_FIELDS_MESSAGE})
    return out


def first_error_message(errors: Iterable[dict[str, Any]]) -> str:
    """User-facing message for the first invalid field."""
    items = field_errors(errors)
    return items[0]["message"] if items else MISSING_FIELDS_MESSAGE


# ── Output ───────────────────────────────────────────────────────────────

class HeightRangeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    min: int
    max: int
    midpoint: int


class SpanRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text: str
    emphasis: bool = False


class ParagraphRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text: str
    spans: list[SpanRead]


class GrowthReportRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    age: int
    sex: Sex
    current_height: float
    father_height: float
    mother_height: float
    range: HeightRangeRead
    progress: int = Field(..., ge=0, le=100, description="Progress toward predicted adult height (%)")
    position: HeightPosition
    stage: GrowthStage
    explanation: list[ParagraphRead]
    genetic_note: str
    age_note: str
