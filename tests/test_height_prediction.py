"""Tests for the mid-parental height predictor."""

import pytest

from growthcheck.core.enums import Sex
from growthcheck.services.height_prediction import (
    HeightRange,
    mid_parental_height,
    predict_range,
    round_half_away,
)


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (165.5, 166), (152.5, 153), (2.4, 2), (-0.5, -1), (-2.5, -3)],
    )
    def test_ties_go_away_from_zero(self, value, expected):
        assert round_half_away(value) == expected


class TestPredictRange:
    def test_male_example(self):
        assert predict_range(175, 160, Sex.MALE) == HeightRange(min=166, max=183, midpoint=174)

    def test_female_example(self):
        assert predict_range(175, 160, Sex.FEMALE) == HeightRange(min=153, max=170, midpoint=161)

    def test_male_half_cm_bounds_round_up(self):
        # midpoint 179 -> 170.5 / 187.5
        assert predict_range(180, 165, Sex.MALE) == HeightRange(min=171, max=188, midpoint=179)

    def test_female_half_cm_bounds_round_up(self):
        # midpoint 166 -> 157.5 / 174.5
        assert predict_range(180, 165, Sex.FEMALE) == HeightRange(min=158, max=175, midpoint=166)

    def test_span_kept_where_bankers_rounding_would_shrink_it(self):
        # midpoint 172 -> 163.5 / 180.5; round() would give 164 / 180
        r = predict_range(170, 161, Sex.MALE)
        assert (r.min, r.max) == (164, 181)

    def test_odd_parent_sum(self):
        # midpoint 174.5: bounds land on whole numbers, midpoint rounds up
        assert predict_range(175, 161, Sex.MALE) == HeightRange(min=166, max=183, midpoint=175)

    def test_accepts_string_sex(self):
        assert predict_range(175, 160, "female") == predict_range(175, 160, Sex.FEMALE)

    def test_sex_offset_is_13_cm(self):
        assert mid_parental_height(175, 160, Sex.MALE) - mid_parental_height(175, 160, Sex.FEMALE) == 13

    @pytest.mark.parametrize("sex", list(Sex))
    def test_span_and_ordering_over_input_domain(self, sex):
        for father in range(140, 221, 5):
            for mother in range(140, 201, 5):
                r = predict_range(father, mother, sex)
                assert r.max - r.min == 17
                assert r.min < r.midpoint < r.max

    @pytest.mark.parametrize("father, mother", [(172.3, 158.9), (181.7, 163.2), (150.2, 199.7)])
    def test_span_with_fractional_heights(self, father, mother):
        for sex in Sex:
            r = predict_range(father, mother, sex)
            assert r.max - r.min == 17
            assert r.min < r.midpoint < r.max

    def test_no_bounds_checking(self):
        # Out-of-domain input still yields an arithmetically valid range
        r = predict_range(300, 50, Sex.MALE)
        assert r == HeightRange(min=173, max=190, midpoint=182)

    def test_idempotent(self):
        assert predict_range(168.4, 171.2, Sex.FEMALE) == predict_range(168.4, 171.2, Sex.FEMALE)

    def test_center(self):
        assert HeightRange(min=166, max=183, midpoint=174).center == 174.5
