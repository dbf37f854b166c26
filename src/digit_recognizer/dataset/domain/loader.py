"""DatasetLoader Protocol — structural interface for loading labeled observations."""

from pathlib import Path
from typing import Protocol

from digit_recognizer.dataset.domain.load_result import DatasetLoadResult


class DatasetLoader(Protocol):
    """Loads every observation stored at path.

    Implementations either return fully well-formed observations of uniform
    pixel length or raise; they never hand back a partial dataset.
    """

    def load(self, path: Path) -> DatasetLoadResult: ...
