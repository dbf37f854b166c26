"""MetricResult — accuracy of a 1-NN classifier under one distance metric."""

from pydantic import BaseModel, Field


class MetricResult(BaseModel, frozen=True):
    """Immutable record of one classifier evaluated against the validation set."""

    metric: str = Field(min_length=1)
    accuracy: float = Field(ge=0.0, le=1.0)
    correct: int = Field(ge=0)
    total: int = Field(ge=1)
    elapsed_seconds: float = Field(ge=0.0)
