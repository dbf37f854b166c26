"""Observer port for the dataset domain — defines events in domain language."""

from typing import Protocol


class DatasetObserver(Protocol):
    def dataset_loading_started(self, path: str) -> None: ...

    def dataset_loading_completed(
        self, path: str, total_observations: int, pixels_per_observation: int
    ) -> None: ...

    def dataset_loading_failed(self, path: str, reason: str) -> None: ...
