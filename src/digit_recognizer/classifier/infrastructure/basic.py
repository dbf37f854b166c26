"""BasicClassifier — exhaustive 1-nearest-neighbour search under a Distance."""

from collections.abc import Sequence

from digit_recognizer.classifier.domain.observer import ClassifierObserver
from digit_recognizer.classifier.infrastructure.errors import EmptyTrainingSetError
from digit_recognizer.distance.domain.distance import Distance
from digit_recognizer.observation.domain.observation import Label, Observation


class BasicClassifier:
    """Copies the label of the closest training observation.

    Every training observation is compared exactly once per prediction, so a
    prediction costs O(n * d) for n observations of d pixels. No index is built.

    Satisfies the Classifier protocol structurally.
    """

    def __init__(self, distance: Distance, observer: ClassifierObserver) -> None:
        self._distance = distance
        self._observer = observer
        self._training_set: tuple[Observation, ...] = ()

    @property
    def distance(self) -> Distance:
        return self._distance

    @property
    def training_set(self) -> tuple[Observation, ...]:
        return self._training_set

    def train(self, training_set: Sequence[Observation]) -> None:
        """Replace the held observations with a copy of training_set.

        An empty training set is accepted here; the failure surfaces on predict.
        """
        # Rebind rather than mutate so readers holding the old tuple are unaffected.
        self._training_set = tuple(training_set)
        self._observer.classifier_trained(
            distance=self._distance.name,
            training_size=len(self._training_set),
        )

    def predict(self, pixels: Sequence[int]) -> Label:
        """Return the label of the training observation nearest to pixels.

        Ties go to whichever observation comes first in the training set.

        Raises:
            EmptyTrainingSetError: if the classifier holds no observations.
            InconsistentImageSizeError: if pixels differs in length from a
                training observation.
        """
        training_set = self._training_set
        if not training_set:
            raise EmptyTrainingSetError()

        best = training_set[0]
        shortest = self._distance.between(best.pixels, pixels)

        for observation in training_set[1:]:
            distance = self._distance.between(observation.pixels, pixels)
            if distance < shortest:
                shortest = distance
                best = observation

        return best.label
