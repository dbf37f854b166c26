"""FakeDatasetLoader — in-memory DatasetLoader implementation for use in tests."""

from pathlib import Path

from digit_recognizer.dataset.domain.load_result import DatasetLoadResult
from digit_recognizer.observation.domain.observation import Observation


class FakeDatasetLoader:
    """Satisfies the DatasetLoader protocol. Returns canned observations per path."""

    def __init__(
        self,
        datasets: dict[Path, list[Observation]],
        sha256: str = "fake-sha256",
    ) -> None:
        self._datasets = datasets
        self._sha256 = sha256
        self.loaded_paths: list[Path] = []

    def load(self, path: Path) -> DatasetLoadResult:
        self.loaded_paths.append(path)
        return DatasetLoadResult(
            observations=self._datasets[path],
            sha256=f"{self._sha256}:{path.name}",
        )
