"""Shared enums for the calculator and API."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the Tanner formula."""

    MALE = "male"
    FEMALE = "female"


class HeightPosition(str, Enum):
    """Where the current height sits relative to the predicted range."""

    BELOW = "below"
    WITHIN = "within"
    ABOVE = "above"


class GrowthStage(str, Enum):
    """Life-stage bucket relative to the growth spurt window."""

    PRE_SPURT = "pre_spurt"
    PEAK = "peak"  # Inside the spurt window
    ENDING = "ending"  # Growth ending or ended
