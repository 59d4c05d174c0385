"""
BMI formula and category bands.

Height is taken in centimetres and weight in kilograms.
"""

UNDERWEIGHT = "Underweight"
NORMAL_WEIGHT = "Normal weight"
OVERWEIGHT = "Overweight"
OBESITY_CLASS_I = "Obesity class I"
OBESITY_CLASS_II = "Obesity class II"
OBESITY_CLASS_III = "Obesity class III"
INVALID_BMI = "Invalid BMI"


def compute_bmi(weight: float, height: float) -> float:
    """weight / (height in metres)^2. Caller guarantees height != 0."""
    height_meters = height / 100
    return weight / height_meters ** 2


def categorize_bmi(value: float) -> str:
    # Upper bounds stop at .9 and the next band starts on the whole number,
    # so e.g. 24.95 falls through to INVALID_BMI. NaN also lands there.
    if value < 18.5:
        return UNDERWEIGHT
    if 18.5 <= value < 24.9:
        return NORMAL_WEIGHT
    if 25 <= value < 29.9:
        return OVERWEIGHT
    if 30 <= value < 34.9:
        return OBESITY_CLASS_I
    if 35 <= value < 39.9:
        return OBESITY_CLASS_II
    if value >= 40:
        return OBESITY_CLASS_III
    return INVALID_BMI
