"""RunSummary — the aggregate result of a completed recognition run."""

from pydantic import BaseModel, Field

from digit_recognizer.evaluation.domain.result import MetricResult


class RunSummary(BaseModel, frozen=True):
    """Immutable summary returned when a recognition run completes.

    Captures the run identity, the integrity hashes of both datasets, the
    configuration name, and one MetricResult per evaluated distance metric in
    configuration order.
    """

    run_id: str = Field(min_length=1)
    config_name: str = Field(min_length=1)
    training_sha256: str = Field(min_length=1)
    validation_sha256: str = Field(min_length=1)
    training_size: int = Field(ge=0)
    validation_size: int = Field(ge=0)
    results: list[MetricResult] = Field(min_length=1)

    def best(self) -> MetricResult:
        """Return the most accurate result; the earliest metric wins a tie."""
        return max(self.results, key=lambda r: r.accuracy)
