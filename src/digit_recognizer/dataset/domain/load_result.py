"""DatasetLoadResult — the result of loading a dataset, including observations and integrity hash."""

from pydantic import BaseModel, Field

from digit_recognizer.observation.domain.observation import Observation


class DatasetLoadResult(BaseModel, frozen=True):
    """Immutable value object returned by a DatasetLoader.

    Carries both the parsed observations and the SHA-256 hex digest of the raw
    file bytes, allowing callers to record which exact dataset version was used.
    """

    observations: list[Observation]
    sha256: str = Field(min_length=1)
