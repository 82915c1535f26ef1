"""
Reference range table for camp vital signs.

Pure data: the cut points each evaluator classifies against. Ranges are coarse
screening heuristics, not validated clinical thresholds.

Key concepts:
- BMI: weight (kg) / height (m)^2
- SpO2: peripheral oxygen saturation (%)
- BP: systolic/diastolic (mmHg)
- PPBS: blood sugar two hours after a meal (mg/dL)
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Range(BaseModel):
    """Closed usual range [low, high]."""

    model_config = ConfigDict(frozen=True)

    low: float
    high: float

    @model_validator(mode="after")
    def low_not_above_high(self) -> "Range":
        if self.low > self.high:
            raise ValueError(f"range low {self.low} is above high {self.high}")
        return self


class BloodPressureLimits(BaseModel):
    """Cut points for the first-match blood pressure chain."""

    model_config = ConfigDict(frozen=True)

    low_systolic: int = Field(description="Systolic below this is low")
    low_diastolic: int = Field(description="Diastolic below this is low")
    normal_systolic: int = Field(description="Highest normal systolic")
    normal_diastolic: int = Field(description="Highest normal diastolic")
    elevated_systolic: int = Field(description="Highest pre-hypertensive systolic")
    elevated_diastolic: int = Field(description="Highest pre-hypertensive diastolic")


# BMI (kg/m^2): below UNDERWEIGHT is low, below OVERWEIGHT is normal,
# below OBESE is borderline, the rest is high.
BMI_UNDERWEIGHT_BELOW = 18.5
BMI_OVERWEIGHT_FROM = 25.0
BMI_OBESE_FROM = 30.0

# SpO2 (%)
SPO2_NORMAL_FROM = 95.0
SPO2_BORDERLINE_FROM = 92.0

BLOOD_PRESSURE = BloodPressureLimits(
    low_systolic=90,
    low_diastolic=60,
    normal_systolic=120,
    normal_diastolic=80,
    elevated_systolic=139,
    elevated_diastolic=89,
)

# Random blood sugar (mg/dL): upper bounds are inclusive.
SUGAR_LOW_BELOW = 70.0
SUGAR_NORMAL_MAX = 140.0
SUGAR_BORDERLINE_MAX = 199.0

# PPBS (mg/dL): upper bounds are inclusive.
PPBS_LOW_BELOW = 110.0
PPBS_NORMAL_MAX = 150.0
PPBS_BORDERLINE_MAX = 199.0

# Hemoglobin (g/dL), keyed by lower-cased gender.
HEMOGLOBIN_RANGES = MappingProxyType(
    {
        "male": Range(low=13, high=17),
        "female": Range(low=12, high=15),
    }
)
HEMOGLOBIN_DEFAULT_RANGE = Range(low=12, high=16)


def hemoglobin_range(gender: str | None) -> Range:
    """Look up the usual hemoglobin range for a gender, falling back to the default."""
    key = (gender or "").lower()
    return HEMOGLOBIN_RANGES.get(key, HEMOGLOBIN_DEFAULT_RANGE)
