"""Tests for domain models and the reference range table."""

import pytest
from pydantic import ValidationError

from camp_vitals.domain import reference_ranges
from camp_vitals.domain.models import (
    Metric,
    MetricKind,
    Reading,
    Status,
    Summary,
    Verdict,
    VitalsSubmission,
)
from camp_vitals.domain.reference_ranges import Range, hemoglobin_range


class TestVerdict:
    def test_status_is_closed(self) -> None:
        with pytest.raises(ValidationError):
            Verdict(status="critical", status_text="Critical", note="not a status")  # type: ignore[arg-type]

    def test_status_accepts_enum_values(self) -> None:
        verdict = Verdict(status="borderline", status_text="Borderline", note="")  # type: ignore[arg-type]
        assert verdict.status is Status.BORDERLINE

    def test_verdict_immutability(self) -> None:
        verdict = Verdict(status=Status.LOW, status_text="Low", note="")
        with pytest.raises(ValueError, match="frozen"):
            verdict.status = Status.HIGH  # type: ignore


class TestMetric:
    def test_from_verdict_joins_reading_and_verdict(self) -> None:
        reading = Reading(label="SpO₂", raw_value="97", unit="%")
        verdict = Verdict(status=Status.NORMAL, status_text="Normal", note="ok")

        metric = Metric.from_verdict(MetricKind.SPO2, reading, verdict, "97")

        assert metric.label == "SpO₂"
        assert metric.unit == "%"
        assert metric.value == "97"
        assert metric.verdict == verdict

    def test_summary_lookup(self) -> None:
        reading = Reading(label="BMI", raw_value=22.0)
        verdict = Verdict(status=Status.NORMAL, status_text="Normal", note="ok")
        metric = Metric.from_verdict(MetricKind.BMI, reading, verdict, "22.0")
        summary = Summary(metrics=[metric], has_issues=False)

        assert summary.get(MetricKind.BMI) == metric
        assert summary.get(MetricKind.HEMOGLOBIN) is None
        assert summary.kinds() == [MetricKind.BMI]


class TestVitalsSubmission:
    def test_from_form_uses_form_field_names(self) -> None:
        submission = VitalsSubmission.from_form({"bloodSugar": "120", "bp": "120/80"})
        assert submission.blood_sugar == "120"
        assert submission.bp == "120/80"

    def test_from_form_stringifies_numbers(self) -> None:
        submission = VitalsSubmission.from_form({"spo2": 97, "hb": None})
        assert submission.spo2 == "97"
        assert submission.hb is None

    def test_python_field_names_are_accepted(self) -> None:
        submission = VitalsSubmission(blood_sugar="90")
        assert submission.blood_sugar == "90"

    def test_metric_kinds_in_evaluation_order(self) -> None:
        assert [k.value for k in MetricKind] == [
            "bmi",
            "spo2",
            "blood_pressure",
            "blood_sugar",
            "ppbs",
            "hemoglobin",
        ]


class TestReferenceRanges:
    @pytest.mark.parametrize(
        ("gender", "low", "high"),
        [
            ("male", 13, 17),
            ("female", 12, 15),
            ("FEMALE", 12, 15),
            ("", 12, 16),
            (None, 12, 16),
            ("unspecified", 12, 16),
            (" male ", 12, 16),
            ("female\n", 12, 16),
        ],
    )
    def test_hemoglobin_range_lookup(self, gender: str | None, low: float, high: float) -> None:
        assert hemoglobin_range(gender) == Range(low=low, high=high)

    def test_range_rejects_inverted_bounds(self) -> None:
        with pytest.raises(ValidationError, match="above high"):
            Range(low=17, high=13)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            reference_ranges.HEMOGLOBIN_RANGES["other"] = Range(low=1, high=2)  # type: ignore[index]
