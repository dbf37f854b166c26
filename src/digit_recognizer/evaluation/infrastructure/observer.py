"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(
        self,
        run_id: str,
        training_size: int,
        validation_size: int,
        metric_names: list[str],
        n_jobs: int,
    ) -> None:
        self._log.info(
            "evaluation.run_started",
            run_id=run_id,
            training_size=training_size,
            validation_size=validation_size,
            metric_names=metric_names,
            n_jobs=n_jobs,
        )

    def run_completed(
        self, run_id: str, total_metrics: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "evaluation.run_completed",
            run_id=run_id,
            total_metrics=total_metrics,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def metric_started(
        self, run_id: str, metric: str, total_observations: int
    ) -> None:
        self._log.info(
            "evaluation.metric_started",
            run_id=run_id,
            metric=metric,
            total_observations=total_observations,
        )

    def metric_completed(
        self,
        run_id: str,
        metric: str,
        accuracy: float,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.metric_completed",
            run_id=run_id,
            metric=metric,
            accuracy=accuracy,
            percent_correct=round(100.0 * accuracy, 2),
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def metric_failed(self, run_id: str, metric: str, reason: str) -> None:
        self._log.error(
            "evaluation.metric_failed",
            run_id=run_id,
            metric=metric,
            reason=reason,
        )

    def observation_scored(self, label: str, prediction: str, matched: bool) -> None:
        self._log.debug(
            "evaluation.observation_scored",
            label=label,
            prediction=prediction,
            outcome="match" if matched else "mismatch",
        )
