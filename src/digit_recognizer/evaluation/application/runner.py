"""RecognitionRunner — orchestrates loading, training and evaluation per metric."""

import math
import time
import uuid

from digit_recognizer.classifier.domain.observer import ClassifierObserver
from digit_recognizer.classifier.infrastructure.basic import BasicClassifier
from digit_recognizer.config.domain.config import RecognizerConfig
from digit_recognizer.core.errors import DigitRecognizerError
from digit_recognizer.dataset.domain.loader import DatasetLoader
from digit_recognizer.distance.infrastructure.registry import create_distance
from digit_recognizer.evaluation.application.evaluator import Evaluator, mean_score
from digit_recognizer.evaluation.domain.observer import EvaluationObserver
from digit_recognizer.evaluation.domain.result import MetricResult
from digit_recognizer.evaluation.domain.summary import RunSummary
from digit_recognizer.observation.domain.observation import Observation


class RecognitionRunner:
    """Runs a full recognition: loads both datasets, then evaluates each metric.

    The runner receives its loader and observers from the caller so that
    implementations can be swapped for testing without touching the
    orchestration logic.
    """

    def __init__(
        self,
        config: RecognizerConfig,
        dataset_loader: DatasetLoader,
        observer: EvaluationObserver,
        classifier_observer: ClassifierObserver,
    ) -> None:
        self._config = config
        self._dataset_loader = dataset_loader
        self._observer = observer
        self._classifier_observer = classifier_observer

    def run(self) -> RunSummary:
        """Execute the full recognition run and return a RunSummary.

        Metrics are evaluated one after another in configuration order; within a
        metric the validation set may be scored in parallel. Any
        DigitRecognizerError aborts the whole run and is never retried.
        """
        run_id = str(uuid.uuid4())
        training = self._dataset_loader.load(path=self._config.dataset.training_path)
        validation = self._dataset_loader.load(
            path=self._config.dataset.validation_path
        )

        self._observer.run_started(
            run_id=run_id,
            training_size=len(training.observations),
            validation_size=len(validation.observations),
            metric_names=list(self._config.metrics),
            n_jobs=self._config.execution.n_jobs,
        )
        started_at = time.monotonic()

        results = [
            self._run_one_metric(
                run_id=run_id,
                metric=metric,
                training_set=training.observations,
                validation_set=validation.observations,
            )
            for metric in self._config.metrics
        ]

        self._observer.run_completed(
            run_id=run_id,
            total_metrics=len(results),
            elapsed_seconds=time.monotonic() - started_at,
        )

        return RunSummary(
            run_id=run_id,
            config_name=self._config.name,
            training_sha256=training.sha256,
            validation_sha256=validation.sha256,
            training_size=len(training.observations),
            validation_size=len(validation.observations),
            results=results,
        )

    def _run_one_metric(
        self,
        run_id: str,
        metric: str,
        training_set: list[Observation],
        validation_set: list[Observation],
    ) -> MetricResult:
        """Train a fresh 1-NN classifier under metric and score the validation set."""
        self._observer.metric_started(
            run_id=run_id,
            metric=metric,
            total_observations=len(validation_set),
        )
        started_at = time.monotonic()

        try:
            classifier = BasicClassifier(
                distance=create_distance(name=metric),
                observer=self._classifier_observer,
            )
            classifier.train(training_set)
            evaluator = Evaluator(
                observer=self._observer,
                n_jobs=self._config.execution.n_jobs,
            )
            scores = evaluator.scores(validation_set, classifier)
            accuracy = mean_score(scores)
        except DigitRecognizerError as exc:
            self._observer.metric_failed(run_id=run_id, metric=metric, reason=str(exc))
            raise

        elapsed_seconds = time.monotonic() - started_at
        self._observer.metric_completed(
            run_id=run_id,
            metric=metric,
            accuracy=accuracy,
            elapsed_seconds=elapsed_seconds,
        )
        return MetricResult(
            metric=metric,
            accuracy=accuracy,
            correct=int(math.fsum(scores)),
            total=len(scores),
            elapsed_seconds=elapsed_seconds,
        )
