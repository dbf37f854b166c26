"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from digit_recognizer.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def run_started(
        self,
        run_id: str,
        training_size: int,
        validation_size: int,
        metric_names: list[str],
        n_jobs: int,
    ) -> None:
        for obs in self._observers:
            obs.run_started(
                run_id=run_id,
                training_size=training_size,
                validation_size=validation_size,
                metric_names=metric_names,
                n_jobs=n_jobs,
            )

    def run_completed(
        self, run_id: str, total_metrics: int, elapsed_seconds: float
    ) -> None:
        for obs in self._observers:
            obs.run_completed(
                run_id=run_id,
                total_metrics=total_metrics,
                elapsed_seconds=elapsed_seconds,
            )

    def metric_started(
        self, run_id: str, metric: str, total_observations: int
    ) -> None:
        for obs in self._observers:
            obs.metric_started(
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
        for obs in self._observers:
            obs.metric_completed(
                run_id=run_id,
                metric=metric,
                accuracy=accuracy,
                elapsed_seconds=elapsed_seconds,
            )

    def metric_failed(self, run_id: str, metric: str, reason: str) -> None:
        for obs in self._observers:
            obs.metric_failed(run_id=run_id, metric=metric, reason=reason)

    def observation_scored(self, label: str, prediction: str, matched: bool) -> None:
        for obs in self._observers:
            obs.observation_scored(label=label, prediction=prediction, matched=matched)
