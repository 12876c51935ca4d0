"""Growth progress and narrative text.

Everything here is pure: plain values in, plain values / immutable text out.
Text is returned as spans with an emphasis flag, never as markup; escaping is the
template's job.

Progress policy is range-relative (current height against the centre of the
predicted band). The older age/sex lookup table (e.g. boys 78% at 10, 88% at 13)
is not used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from growthcheck.core.constants import (
    PARENT_AVG_AVERAGE_CM,
    PARENT_AVG_TALL_CM,
    PROGRESS_CEILING_PCT,
    PROGRESS_FLOOR_BELOW_MIN_CM,
    PROGRESS_FLOOR_PCT,
    SPURT_WINDOW_FEMALE,
    SPURT_WINDOW_MALE,
)
from growthcheck.core.enums import GrowthStage, HeightPosition, Sex
from growthcheck.services.height_prediction import HeightRange, predict_range, round_half_away

if TYPE_CHECKING:
    from growthcheck.schemas.growth import GrowthInput

logger = logging.getLogger(__name__)


# ── Text containers ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Span:
    text: str
    emphasis: bool = False


@dataclass(frozen=True)
class Paragraph:
    spans: tuple[Span, ...]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.spans)


def _para(*parts: str | Span) -> Paragraph:
    return Paragraph(tuple(p if isinstance(p, Span) else Span(p) for p in parts))


def format_cm(value: float) -> str:
    """150.0 -> '150', 150.5 -> '150.5'."""
    return f"{value:g}"


# ── Progress ─────────────────────────────────────────────────────────────

def compute_progress(
    current_height: float,
    height_range: HeightRange,
    age: int | None = None,
    sex: Sex | str | None = None,
) -> int:
    """
    Percent of the way toward the predicted adult height, in [10, 100].

    age and sex are accepted so callers can pass the full record; the
    range-relative policy does not use them.
    """
    if current_height >= height_range.max:
        return PROGRESS_CEILING_PCT
    if current_height <= height_range.min - PROGRESS_FLOOR_BELOW_MIN_CM:
        return PROGRESS_FLOOR_PCT
    pct = current_height / height_range.center * 100
    return round_half_away(max(PROGRESS_FLOOR_PCT, min(PROGRESS_CEILING_PCT, pct)))


# ── Explanation ──────────────────────────────────────────────────────────

def height_position(current_height: float, height_range: HeightRange) -> HeightPosition:
    if current_height < height_range.min:
        return HeightPosition.BELOW
    if current_height <= height_range.max:
        return HeightPosition.WITHIN
    return HeightPosition.ABOVE


def explain(current_height: float, height_range: HeightRange) -> tuple[Paragraph, ...]:
    """Headline with the predicted band, then one paragraph on the current height."""
    lo, hi = height_range.min, height_range.max
    headline = _para(
        "Based on your parents' heights, your adult height will probably be between ",
        Span(f"{lo} cm", emphasis=True),
        " and ",
        Span(f"{hi} cm", emphasis=True),
        ".",
    )
    current = format_cm(current_height)
    position = height_position(current_height, height_range)
    if position == HeightPosition.BELOW:
        detail = _para(
            f"You are {current} cm tall now. If you follow the expected pattern, you could grow "
            f"between {format_cm(lo - current_height)} and {format_cm(hi - current_height)} cm more."
        )
    elif position == HeightPosition.WITHIN:
        detail = _para(
            f"Your current height of {current} cm is already within the estimated range. "
            "This is a good sign that your growth is on track."
        )
    else:
        detail = _para(
            f"You are already {current} cm tall, which is above the estimated range. "
            "Everyone is different, and this is completely normal."
        )
    return (headline, detail)


# ── Indicators ───────────────────────────────────────────────────────────

GENETIC_TALL = "Your parents' average height is above average, which has a favorable influence on your growth potential."
GENETIC_AVERAGE = "Your parents' heights are in an average range."
GENETIC_OTHER = "Your parents' height is one factor, but not the only one that influences your growth."


def genetic_note(father_height: float, mother_height: float) -> str:
    """Message keyed on the parents' average height (>= 175, >= 165, below)."""
    avg = (father_height + mother_height) / 2
    if avg >= PARENT_AVG_TALL_CM:
        return GENETIC_TALL
    if avg >= PARENT_AVG_AVERAGE_CM:
        return GENETIC_AVERAGE
    return GENETIC_OTHER


def spurt_window(sex: Sex | str) -> tuple[int, int]:
    return SPURT_WINDOW_MALE if Sex(sex) == Sex.MALE else SPURT_WINDOW_FEMALE


def growth_stage(age: int, sex: Sex | str) -> GrowthStage:
    start, end = spurt_window(sex)
    if age < start:
        return GrowthStage.PRE_SPURT
    if age <= end:
        return GrowthStage.PEAK
    return GrowthStage.ENDING


def age_note(age: int, sex: Sex | str) -> str:
    """Message for the life-stage bucket (boys 12-16, girls 10-14 spurt window)."""
    stage = growth_stage(age, sex)
    if stage == GrowthStage.PRE_SPURT:
        start, end = spurt_window(sex)
        return (
            "At your age, the main growth spurt has not started yet. "
            f"It usually happens between {start} and {end} years old."
        )
    if stage == GrowthStage.PEAK:
        return "You are at the stage where people grow the most. The growth spurt usually lasts 2-3 years."
    return f"At {age} years old, growth is generally ending or has already ended."


# ── Pipeline ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GrowthReport:
    """Everything the rendering layer needs for one submission."""

    age: int
    sex: Sex
    current_height: float
    father_height: float
    mother_height: float
    range: HeightRange
    progress: int
    position: HeightPosition
    stage: GrowthStage
    explanation: tuple[Paragraph, ...]
    genetic_note: str
    age_note: str


def build_report(data: GrowthInput) -> GrowthReport:
    """Validated input -> range -> progress and text."""
    height_range = predict_range(data.father_height, data.mother_height, data.sex)
    report = GrowthReport(
        age=data.age,
        sex=Sex(data.sex),
        current_height=data.current_height,
        father_height=data.father_height,
        mother_height=data.mother_height,
        range=height_range,
        progress=compute_progress(data.current_height, height_range, data.age, data.sex),
        position=height_position(data.current_height, height_range),
        stage=growth_stage(data.age, data.sex),
        explanation=explain(data.current_height, height_range),
        genetic_note=genetic_note(data.father_height, data.mother_height),
        age_note=age_note(data.age, data.sex),
    )
    logger.debug(
        "Report: sex=%s age=%s range=%s-%s progress=%s",
        report.sex.value, report.age, height_range.min, height_range.max, report.progress,
    )
    return report
