"""Top-level RecognizerConfig aggregate — the root configuration object."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from digit_recognizer.config.domain.dataset import DatasetConfig
from digit_recognizer.config.domain.execution import ExecutionConfig

MetricName: TypeAlias = str


class RecognizerConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a digit-recognizer run."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    dataset: DatasetConfig
    metrics: list[MetricName] = Field(min_length=1)
    execution: ExecutionConfig = ExecutionConfig()
