"""Observer ports for the evaluation domain — define events in domain language."""

from typing import Protocol


class ScoringObserver(Protocol):
    """Receives one event per scored validation observation.

    Events may arrive from several worker threads at once when scoring runs in
    parallel, so implementations must tolerate concurrent calls.
    """

    def observation_scored(self, label: str, prediction: str, matched: bool) -> None: ...


class EvaluationObserver(ScoringObserver, Protocol):
    """Observer port emitting structured events during a recognition run.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def run_started(
        self,
        run_id: str,
        training_size: int,
        validation_size: int,
        metric_names: list[str],
        n_jobs: int,
    ) -> None: ...

    def run_completed(
        self, run_id: str, total_metrics: int, elapsed_seconds: float
    ) -> None: ...

    def metric_started(
        self, run_id: str, metric: str, total_observations: int
    ) -> None: ...

    def metric_completed(
        self,
        run_id: str,
        metric: str,
        accuracy: float,
        elapsed_seconds: float,
    ) -> None: ...

    def metric_failed(self, run_id: str, metric: str, reason: str) -> None: ...
