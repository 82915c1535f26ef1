"""
Domain models for health camp vital-sign evaluation.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation and are frozen, so nothing is mutated after
an evaluation builds it.
"""

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    """Closed set of verdict statuses."""

    LOW = "low"
    NORMAL = "normal"
    BORDERLINE = "borderline"
    HIGH = "high"


class MetricKind(str, Enum):
    """Metrics evaluated at a camp, declared in evaluation order."""

    BMI = "bmi"
    SPO2 = "spo2"
    BLOOD_PRESSURE = "blood_pressure"
    BLOOD_SUGAR = "blood_sugar"
    PPBS = "ppbs"  # 2-hour post-prandial
    HEMOGLOBIN = "hemoglobin"


class Verdict(BaseModel):
    """Classification result for one metric."""

    model_config = ConfigDict(frozen=True)

    status: Status
    status_text: str = Field(description="Short label shown on the status badge")
    note: str = Field(description="Advisory prose bound to the status")


class Reading(BaseModel):
    """A named input as captured on the form."""

    model_config = ConfigDict(frozen=True)

    label: str
    raw_value: float | str | None
    unit: str = ""


class Metric(Reading):
    """Reading joined with its verdict, ready for a presentation layer."""

    kind: MetricKind
    value: str = Field(description="Display form of the reading, or 'N/A'")
    status: Status
    status_text: str
    note: str

    @classmethod
    def from_verdict(
        cls,
        kind: MetricKind,
        reading: Reading,
        verdict: Verdict,
        value: str,
    ) -> "Metric":
        return cls(
            kind=kind,
            label=reading.label,
            raw_value=reading.raw_value,
            unit=reading.unit,
            value=value,
            status=verdict.status,
            status_text=verdict.status_text,
            note=verdict.note,
        )

    @property
    def verdict(self) -> Verdict:
        return Verdict(status=self.status, status_text=self.status_text, note=self.note)


class Summary(BaseModel):
    """Complete evaluation output for one submitted set of readings."""

    model_config = ConfigDict(frozen=True)

    metrics: list[Metric] = Field(default_factory=list)
    has_issues: bool = False

    def kinds(self) -> list[MetricKind]:
        return [m.kind for m in self.metrics]

    def get(self, kind: MetricKind) -> Metric | None:
        return next((m for m in self.metrics if m.kind == kind), None)


class VitalsSubmission(BaseModel):
    """
    Raw field values from one camp form submission.

    Every field is optional and kept as the submitted string; parsing happens
    in the evaluators so that a bad field only drops its own metric.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    weight: str | None = None
    height: str | None = None
    bmi: str | None = None
    spo2: str | None = None
    bp: str | None = None
    blood_sugar: str | None = Field(default=None, alias="bloodSugar")
    ppbs: str | None = None
    hb: str | None = None
    gender: str | None = None

    @classmethod
    def from_form(cls, form: Mapping[str, object]) -> "VitalsSubmission":
        """Build a submission from a form mapping, stringifying non-string values."""
        fields = {key: None if value is None else str(value) for key, value in form.items()}
        return cls.model_validate(fields)
