"""
Tests for the BMI formula and category bands, including the gaps between
bands that map to "Invalid BMI".
"""
import math
import pytest
from app.services.bmi_calculator import (
    compute_bmi,
    categorize_bmi,
    UNDERWEIGHT,
    NORMAL_WEIGHT,
    OVERWEIGHT,
    OBESITY_CLASS_I,
    OBESITY_CLASS_II,
    OBESITY_CLASS_III,
    INVALID_BMI,
)


class TestComputeBMI:

    def test_standard_bmi_calculation(self):
        """70kg, 175cm -> 22.857..."""
        assert compute_bmi(70, 175) == pytest.approx(22.857, abs=1e-3)

    def test_second_reference_value(self):
        assert compute_bmi(50, 160) == pytest.approx(19.53, abs=1e-2)

    @pytest.mark.parametrize("weight,height", [(70, 175), (50, 160), (92.4, 181.3), (3.2, 49.5)])
    def test_matches_formula_exactly(self, weight, height):
        assert compute_bmi(weight, height) == weight / (height / 100) ** 2

    def test_taller_means_lower_bmi(self):
        assert compute_bmi(70, 190) < compute_bmi(70, 160)

    def test_negative_weight_passes_through(self):
        assert compute_bmi(-70, 175) == pytest.approx(-22.857, abs=1e-3)


class TestCategorizeBMI:

    @pytest.mark.parametrize("value,expected", [
        (-5.0, UNDERWEIGHT),
        (0.0, UNDERWEIGHT),
        (18.49, UNDERWEIGHT),
        (18.5, NORMAL_WEIGHT),
        (22.857, NORMAL_WEIGHT),
        (24.89, NORMAL_WEIGHT),
        (25.0, OVERWEIGHT),
        (29.89, OVERWEIGHT),
        (30.0, OBESITY_CLASS_I),
        (34.89, OBESITY_CLASS_I),
        (35.0, OBESITY_CLASS_II),
        (39.89, OBESITY_CLASS_II),
        (40.0, OBESITY_CLASS_III),
        (85.0, OBESITY_CLASS_III),
    ])
    def test_bands(self, value, expected):
        assert categorize_bmi(value) == expected

    @pytest.mark.parametrize("value", [24.9, 24.95, 29.9, 29.99, 34.9, 34.95, 39.9, 39.99])
    def test_gaps_between_bands_are_invalid(self, value):
        assert categorize_bmi(value) == INVALID_BMI

    def test_nan_is_invalid(self):
        assert categorize_bmi(math.nan) == INVALID_BMI

    def test_infinities(self):
        assert categorize_bmi(math.inf) == OBESITY_CLASS_III
        assert categorize_bmi(-math.inf) == UNDERWEIGHT
