"""Structlog implementation of the ClassifierObserver port."""

import structlog


class StructlogClassifierObserver:
    """Delegates classifier domain events to structlog.

    Satisfies the ClassifierObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def classifier_trained(self, distance: str, training_size: int) -> None:
        self._log.info(
            "classifier.trained",
            distance=distance,
            training_size=training_size,
        )
