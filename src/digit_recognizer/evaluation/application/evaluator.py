"""Evaluator — scores a classifier's predictions against labeled observations."""

import math
from collections.abc import Sequence

from joblib import Parallel, delayed

from digit_recognizer.classifier.domain.classifier import Classifier
from digit_recognizer.evaluation.application.errors import EmptyValidationSetError
from digit_recognizer.evaluation.domain.observer import ScoringObserver
from digit_recognizer.observation.domain.observation import Observation


def mean_score(scores: Sequence[float]) -> float:
    """Return the arithmetic mean of 0/1 scores.

    Raises:
        EmptyValidationSetError: if scores is empty.
    """
    if not scores:
        raise EmptyValidationSetError()
    return math.fsum(scores) / len(scores)


class Evaluator:
    """Measures the proportion of observations a classifier labels correctly.

    Holds no data between calls. Each observation is scored independently, so
    the scoring pass is a map over the validation set followed by a mean; with
    ``n_jobs > 1`` the map runs on a joblib thread pool. The result does not
    depend on the order in which observations are scored.
    """

    def __init__(self, observer: ScoringObserver, n_jobs: int = 1) -> None:
        self._observer = observer
        self._n_jobs = n_jobs

    def score(self, observation: Observation, classifier: Classifier) -> float:
        """Return 1.0 if classifier predicts observation's label exactly, else 0.0."""
        prediction = classifier.predict(observation.pixels)
        matched = prediction == observation.label
        self._observer.observation_scored(
            label=observation.label,
            prediction=prediction,
            matched=matched,
        )
        return 1.0 if matched else 0.0

    def scores(
        self, validation_set: Sequence[Observation], classifier: Classifier
    ) -> list[float]:
        """Score every observation in validation_set, preserving input order.

        Raises:
            EmptyValidationSetError: if validation_set is empty.
        """
        if not validation_set:
            raise EmptyValidationSetError()
        if self._n_jobs == 1:
            return [self.score(observation, classifier) for observation in validation_set]

        # Threads share the trained classifier without pickling it.
        parallel = Parallel(n_jobs=self._n_jobs, prefer="threads")
        return list(
            parallel(
                delayed(self.score)(observation, classifier)
                for observation in validation_set
            )
        )

    def percent_correct(
        self, validation_set: Sequence[Observation], classifier: Classifier
    ) -> float:
        """Return the fraction (0.0 to 1.0) of validation_set predicted correctly.

        Raises:
            EmptyValidationSetError: if validation_set is empty.
        """
        return mean_score(self.scores(validation_set, classifier))
