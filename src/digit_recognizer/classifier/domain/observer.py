"""Observer port for the classifier domain — defines events in domain language."""

from typing import Protocol


class ClassifierObserver(Protocol):
    def classifier_trained(self, distance: str, training_size: int) -> None: ...
