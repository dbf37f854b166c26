"""Classifier Protocol — trains on known observations and predicts labels."""

from collections.abc import Sequence
from typing import Protocol

from digit_recognizer.observation.domain.observation import Label, Observation


class Classifier(Protocol):
    """Predicts the label of a pixel vector from a set of labeled observations.

    ``train`` always replaces the whole training set; there is no incremental
    update. Concurrent ``predict`` calls are safe, but ``train`` must not run
    concurrently with ``predict`` on the same instance.
    """

    def train(self, training_set: Sequence[Observation]) -> None: ...

    def predict(self, pixels: Sequence[int]) -> Label: ...
