"""FakeClassifier — Classifier implementation with canned predictions for tests."""

from collections.abc import Sequence

from digit_recognizer.observation.domain.observation import Observation


class FakeClassifier:
    """Satisfies the Classifier protocol. Looks predictions up by pixel vector."""

    def __init__(self, predictions: dict[tuple[int, ...], str]) -> None:
        self._predictions = predictions
        self.predicted: list[tuple[int, ...]] = []

    def train(self, training_set: Sequence[Observation]) -> None:
        pass

    def predict(self, pixels: Sequence[int]) -> str:
        key = tuple(pixels)
        self.predicted.append(key)
        return self._predictions[key]
