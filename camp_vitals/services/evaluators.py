"""
Per-metric classification against the reference range table.

Every evaluator is a pure function of its raw input. It returns a Verdict, or
None when the input does not parse to a usable value. Evaluators never raise
on bad input; a missing reading simply has no verdict.

Verdict prose is bound to (metric, status): "borderline" reads differently for
BMI, SpO2, blood pressure and blood sugar.
"""

import math

from camp_vitals.domain import reference_ranges as ranges
from camp_vitals.domain.models import Status, Verdict
from camp_vitals.services.parsing import parse_integer, parse_number

BMI_VERDICTS = {
    Status.LOW: Verdict(
        status=Status.LOW,
        status_text="Underweight",
        note="Below the usual healthy range (18.5–24.9).",
    ),
    Status.NORMAL: Verdict(
        status=Status.NORMAL,
        status_text="Normal",
        note="Within the usual healthy BMI range (18.5–24.9).",
    ),
    Status.BORDERLINE: Verdict(
        status=Status.BORDERLINE,
        status_text="Overweight",
        note="Above the usual healthy range. Consider lifestyle changes.",
    ),
    Status.HIGH: Verdict(
        status=Status.HIGH,
        status_text="Obese",
        note="Significantly above the usual healthy range. Medical advice is recommended.",
    ),
}

SPO2_VERDICTS = {
    Status.NORMAL: Verdict(
        status=Status.NORMAL,
        status_text="Normal",
        note="Usual oxygen saturation is 95–100%.",
    ),
    Status.BORDERLINE: Verdict(
        status=Status.BORDERLINE,
        status_text="Borderline",
        note="Slightly low. Monitor and consult a doctor if symptoms are present.",
    ),
    Status.LOW: Verdict(
        status=Status.LOW,
        status_text="Low",
        note="Below usual range. Please consult a doctor promptly.",
    ),
}

BLOOD_PRESSURE_VERDICTS = {
    Status.LOW: Verdict(
        status=Status.LOW,
        status_text="Low",
        note="Below usual range. May need medical review, especially if symptomatic.",
    ),
    Status.NORMAL: Verdict(
        status=Status.NORMAL,
        status_text="Normal",
        note="Close to usual reference value 120/80 mmHg.",
    ),
    Status.BORDERLINE: Verdict(
        status=Status.BORDERLINE,
        status_text="Pre-hypertensive",
        note="Above ideal. Regular monitoring and lifestyle care advised.",
    ),
    Status.HIGH: Verdict(
        status=Status.HIGH,
        status_text="High",
        note="Raised blood pressure. Please discuss with your doctor.",
    ),
}

SUGAR_VERDICTS = {
    Status.LOW: Verdict(
        status=Status.LOW,
        status_text="Low",
        note=(
            "Below 70 mg/dL. This is lower than usual and may need urgent attention "
            "if symptomatic."
        ),
    ),
    Status.NORMAL: Verdict(
        status=Status.NORMAL,
        status_text="Normal",
        note="Within typical range (about 70–140 mg/dL depending on fasting/meal timing).",
    ),
    Status.BORDERLINE: Verdict(
        status=Status.BORDERLINE,
        status_text="Borderline High",
        note="Above usual target. Further testing and medical advice are recommended.",
    ),
    Status.HIGH: Verdict(
        status=Status.HIGH,
        status_text="High",
        note="Significantly above usual targets. Please consult your doctor.",
    ),
}

PPBS_VERDICTS = {
    Status.LOW: Verdict(
        status=Status.LOW,
        status_text="Low",
        note="Below typical PPBS reference (110–150 mg/dL). Interpret with clinical context.",
    ),
    Status.NORMAL: Verdict(
        status=Status.NORMAL,
        status_text="Normal",
        note="Within the usual PPBS range (110–150 mg/dL).",
    ),
    Status.BORDERLINE: Verdict(
        status=Status.BORDERLINE,
        status_text="Borderline High",
        note="Above usual range. Follow-up with your doctor is advisable.",
    ),
    Status.HIGH: Verdict(
        status=Status.HIGH,
        status_text="High",
        note="Significantly above usual PPBS targets. Please consult your doctor.",
    ),
}


def compute_bmi(weight: object, height_cm: object) -> float | None:
    """BMI from weight (kg) and height (cm); None if either is missing or zero."""
    weight_kg = parse_number(weight)
    height = parse_number(height_cm)
    if not weight_kg or not height:
        return None
    height_m = height / 100
    bmi = weight_kg / (height_m * height_m)
    return bmi if math.isfinite(bmi) else None


def evaluate_bmi(bmi: object) -> Verdict | None:
    value = parse_number(bmi)
    if value is None:
        return None
    if value < ranges.BMI_UNDERWEIGHT_BELOW:
        return BMI_VERDICTS[Status.LOW]
    elif value < ranges.BMI_OVERWEIGHT_FROM:
        return BMI_VERDICTS[Status.NORMAL]
    elif value < ranges.BMI_OBESE_FROM:
        return BMI_VERDICTS[Status.BORDERLINE]
    else:
        return BMI_VERDICTS[Status.HIGH]


def evaluate_spo2(spo2: object) -> Verdict | None:
    """SpO2 has no high state: anything at or above 95% is normal."""
    value = parse_number(spo2)
    if value is None:
        return None
    if value >= ranges.SPO2_NORMAL_FROM:
        return SPO2_VERDICTS[Status.NORMAL]
    elif value >= ranges.SPO2_BORDERLINE_FROM:
        return SPO2_VERDICTS[Status.BORDERLINE]
    else:
        return SPO2_VERDICTS[Status.LOW]


def parse_blood_pressure(bp: object) -> tuple[int, int] | None:
    """Split "<systolic>/<diastolic>" into two integers, or None."""
    if not bp or not isinstance(bp, str):
        return None
    parts = bp.split("/")
    if len(parts) != 2:
        return None
    systolic = parse_integer(parts[0].strip())
    diastolic = parse_integer(parts[1].strip())
    if systolic is None or diastolic is None:
        return None
    return systolic, diastolic


def evaluate_blood_pressure(bp: object) -> Verdict | None:
    """
    Classify a "<systolic>/<diastolic>" reading.

    The bands overlap; the first matching rule wins, in this order:
    low, normal, pre-hypertensive, high.
    """
    parsed = parse_blood_pressure(bp)
    if parsed is None:
        return None
    systolic, diastolic = parsed
    limits = ranges.BLOOD_PRESSURE

    if systolic < limits.low_systolic or diastolic < limits.low_diastolic:
        return BLOOD_PRESSURE_VERDICTS[Status.LOW]
    elif systolic <= limits.normal_systolic and diastolic <= limits.normal_diastolic:
        return BLOOD_PRESSURE_VERDICTS[Status.NORMAL]
    elif systolic <= limits.elevated_systolic or diastolic <= limits.elevated_diastolic:
        return BLOOD_PRESSURE_VERDICTS[Status.BORDERLINE]
    else:
        return BLOOD_PRESSURE_VERDICTS[Status.HIGH]


def evaluate_blood_sugar(sugar: object) -> Verdict | None:
    """Random blood sugar (mg/dL), fasting state unknown."""
    value = parse_number(sugar)
    if value is None:
        return None
    if value < ranges.SUGAR_LOW_BELOW:
        return SUGAR_VERDICTS[Status.LOW]
    elif value <= ranges.SUGAR_NORMAL_MAX:
        return SUGAR_VERDICTS[Status.NORMAL]
    elif value <= ranges.SUGAR_BORDERLINE_MAX:
        return SUGAR_VERDICTS[Status.BORDERLINE]
    else:
        return SUGAR_VERDICTS[Status.HIGH]


def evaluate_ppbs(ppbs: object) -> Verdict | None:
    value = parse_number(ppbs)
    if value is None:
        return None
    if value < ranges.PPBS_LOW_BELOW:
        return PPBS_VERDICTS[Status.LOW]
    elif value <= ranges.PPBS_NORMAL_MAX:
        return PPBS_VERDICTS[Status.NORMAL]
    elif value <= ranges.PPBS_BORDERLINE_MAX:
        return PPBS_VERDICTS[Status.BORDERLINE]
    else:
        return PPBS_VERDICTS[Status.HIGH]


def evaluate_hemoglobin(hb: object, gender: str | None = None) -> Verdict | None:
    """Classify hemoglobin (g/dL) against the range for the given gender."""
    value = parse_number(hb)
    if value is None:
        return None
    usual = ranges.hemoglobin_range(gender)
    bounds = f"{usual.low:g}–{usual.high:g} g/dL"

    if value < usual.low:
        return Verdict(
            status=Status.LOW,
            status_text="Low",
            note=f"Below usual range ({bounds}). May suggest anaemia; please consult a doctor.",
        )
    elif value > usual.high:
        return Verdict(
            status=Status.HIGH,
            status_text="High",
            note=f"Above usual range ({bounds}). Needs clinical correlation.",
        )
    else:
        return Verdict(
            status=Status.NORMAL,
            status_text="Normal",
            note=f"Within usual range ({bounds}).",
        )
