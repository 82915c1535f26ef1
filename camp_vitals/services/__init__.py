"""
Evaluation services.

This package contains the per-metric evaluators and the aggregator that turns
one camp submission into a summary.
"""

from .aggregator import ISSUE_RULES, needs_attention, resolve_bmi, summarize, summarize_form
from .evaluators import (
    compute_bmi,
    evaluate_blood_pressure,
    evaluate_blood_sugar,
    evaluate_bmi,
    evaluate_hemoglobin,
    evaluate_ppbs,
    evaluate_spo2,
)

__all__ = [
    "ISSUE_RULES",
    "compute_bmi",
    "evaluate_blood_pressure",
    "evaluate_blood_sugar",
    "evaluate_bmi",
    "evaluate_hemoglobin",
    "evaluate_ppbs",
    "evaluate_spo2",
    "needs_attention",
    "resolve_bmi",
    "summarize",
    "summarize_form",
]
