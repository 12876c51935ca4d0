"""Mid-parental height (Tanner) prediction.

Predicted adult height = (father + mother ± 13) / 2, with +13 cm for boys and
-13 cm for girls, and a fixed ±8.5 cm margin around that midpoint.

Inputs are trusted: the form / API schema already bounds them (father 140-220 cm,
mother 140-200 cm). Nothing here re-validates, so out-of-range numbers still give
an arithmetically valid range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from growthcheck.core.constants import MARGIN_OF_ERROR_CM, SEX_ADJUSTMENT_CM
from growthcheck.core.enums import Sex


@dataclass(frozen=True)
class HeightRange:
    """Predicted adult height band in whole centimetres."""

    min: int
    max: int
    midpoint: int

    @property
    def center(self) -> float:
        """Arithmetic centre of the band (may be x.5)."""
        return (self.min + self.max) / 2


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (165.5 -> 166, -0.5 -> -1).

    Built-in round() rounds ties to even (152.5 -> 152).
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def mid_parental_height(father_height: float, mother_height: float, sex: Sex | str) -> float:
    """Unrounded Tanner midpoint in cm."""
    if Sex(sex) == Sex.MALE:
        return (father_height + mother_height + SEX_ADJUSTMENT_CM) / 2
    return (father_height + mother_height - SEX_ADJUSTMENT_CM) / 2


def predict_range(father_height: float, mother_height: float, sex: Sex | str) -> HeightRange:
    """
    Predicted adult height range from both parents' heights.

    min / max / midpoint are each rounded from the unrounded midpoint, never
    derived from the rounded one, so max - min is always 2 × 8.5 = 17.
    """
    mph = mid_parental_height(father_height, mother_height, sex)
    return HeightRange(
        min=round_half_away(mph - MARGIN_OF_ERROR_CM),
        max=round_half_away(mph + MARGIN_OF_ERROR_CM),
        midpoint=round_half_away(mph),
    )
