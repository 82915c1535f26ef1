"""
Aggregation of per-metric verdicts into one camp summary.

Key rules:
- Fixed evaluation order: BMI, SpO2, BP, sugar, PPBS, hemoglobin
- A metric whose input does not parse is left out, never included half-empty
- has_issues is an OR over explicit per-metric issue predicates
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

import structlog

from camp_vitals.config import EvaluationConfig
from camp_vitals.domain.models import (
    Metric,
    MetricKind,
    Reading,
    Status,
    Summary,
    Verdict,
    VitalsSubmission,
)
from camp_vitals.services.evaluators import (
    compute_bmi,
    evaluate_blood_pressure,
    evaluate_blood_sugar,
    evaluate_bmi,
    evaluate_hemoglobin,
    evaluate_ppbs,
    evaluate_spo2,
)
from camp_vitals.services.parsing import (
    format_fixed,
    format_plain,
    parse_number,
    round_half_away,
)

logger = structlog.get_logger(__name__)

IssueRule = Callable[[Verdict], bool]


def bmi_needs_attention(verdict: Verdict) -> bool:
    return verdict.status != Status.NORMAL


def spo2_needs_attention(verdict: Verdict) -> bool:
    # Only the low side exists for SpO2.
    return verdict.status in (Status.LOW, Status.BORDERLINE)


def blood_pressure_needs_attention(verdict: Verdict) -> bool:
    return verdict.status != Status.NORMAL


def blood_sugar_needs_attention(verdict: Verdict) -> bool:
    return verdict.status != Status.NORMAL


def ppbs_needs_attention(verdict: Verdict) -> bool:
    return verdict.status != Status.NORMAL


def hemoglobin_needs_attention(verdict: Verdict) -> bool:
    return verdict.status != Status.NORMAL


ISSUE_RULES: Mapping[MetricKind, IssueRule] = MappingProxyType(
    {
        MetricKind.BMI: bmi_needs_attention,
        MetricKind.SPO2: spo2_needs_attention,
        MetricKind.BLOOD_PRESSURE: blood_pressure_needs_attention,
        MetricKind.BLOOD_SUGAR: blood_sugar_needs_attention,
        MetricKind.PPBS: ppbs_needs_attention,
        MetricKind.HEMOGLOBIN: hemoglobin_needs_attention,
    }
)

# Display label and unit per metric.
METRIC_LABELS: Mapping[MetricKind, tuple[str, str]] = MappingProxyType(
    {
        MetricKind.BMI: ("BMI", ""),
        MetricKind.SPO2: ("SpO₂", "%"),
        MetricKind.BLOOD_PRESSURE: ("Blood Pressure", "mmHg"),
        MetricKind.BLOOD_SUGAR: ("Blood Sugar", "mg/dL"),
        MetricKind.PPBS: ("PPBS (2 hrs)", "mg/dL"),
        MetricKind.HEMOGLOBIN: ("Hemoglobin", "g/dL"),
    }
)


def resolve_bmi(submission: VitalsSubmission) -> float | None:
    """
    BMI value to classify for a submission.

    The submitted BMI is classified as given whenever it parses. Only when it
    is blank or unreadable is the BMI calculated from weight and height, held
    at one decimal place as the form's auto-filled field would show it.
    """
    submitted = parse_number(submission.bmi)
    if submitted is not None:
        return submitted
    bmi = compute_bmi(submission.weight, submission.height)
    return None if bmi is None else round_half_away(bmi, 1)


def needs_attention(kind: MetricKind, verdict: Verdict) -> bool:
    return ISSUE_RULES[kind](verdict)


def _reading(kind: MetricKind, raw_value: float | str | None) -> Reading:
    label, unit = METRIC_LABELS[kind]
    return Reading(label=label, raw_value=raw_value, unit=unit)


def _evaluate_all(
    submission: VitalsSubmission,
) -> list[tuple[MetricKind, Reading, Verdict | None, str]]:
    bmi = resolve_bmi(submission)
    spo2 = parse_number(submission.spo2)
    sugar = parse_number(submission.blood_sugar)
    ppbs = parse_number(submission.ppbs)
    hb = parse_number(submission.hb)

    return [
        (
            MetricKind.BMI,
            _reading(MetricKind.BMI, bmi),
            evaluate_bmi(bmi),
            format_fixed(bmi, 1),
        ),
        (
            MetricKind.SPO2,
            _reading(MetricKind.SPO2, submission.spo2),
            evaluate_spo2(spo2),
            format_plain(spo2),
        ),
        (
            MetricKind.BLOOD_PRESSURE,
            _reading(MetricKind.BLOOD_PRESSURE, submission.bp),
            evaluate_blood_pressure(submission.bp),
            submission.bp or "",
        ),
        (
            MetricKind.BLOOD_SUGAR,
            _reading(MetricKind.BLOOD_SUGAR, submission.blood_sugar),
            evaluate_blood_sugar(sugar),
            format_plain(sugar),
        ),
        (
            MetricKind.PPBS,
            _reading(MetricKind.PPBS, submission.ppbs),
            evaluate_ppbs(ppbs),
            format_plain(ppbs),
        ),
        (
            MetricKind.HEMOGLOBIN,
            _reading(MetricKind.HEMOGLOBIN, submission.hb),
            evaluate_hemoglobin(hb, submission.gender),
            format_plain(hb),
        ),
    ]


def summarize(
    submission: VitalsSubmission, config: EvaluationConfig | None = None
) -> Summary:
    """Evaluate every metric in a submission and roll the verdicts into a Summary."""
    config = config or EvaluationConfig()
    log = logger.bind(component="aggregator", camp=config.camp_name)

    metrics: list[Metric] = []
    has_issues = False

    for kind, reading, verdict, value in _evaluate_all(submission):
        if verdict is None:
            if config.redact_readings:
                log.debug("metric_skipped", metric=kind.value)
            else:
                log.debug("metric_skipped", metric=kind.value, raw_value=reading.raw_value)
            continue

        metrics.append(Metric.from_verdict(kind, reading, verdict, value))
        if needs_attention(kind, verdict):
            has_issues = True

    log.info(
        "summary_built",
        metric_count=len(metrics),
        statuses={m.kind.value: m.status.value for m in metrics},
        has_issues=has_issues,
    )
    return Summary(metrics=metrics, has_issues=has_issues)


def summarize_form(
    form: Mapping[str, object], config: EvaluationConfig | None = None
) -> Summary:
    """Evaluate a raw form mapping (field name -> submitted value)."""
    return summarize(VitalsSubmission.from_form(form), config)
