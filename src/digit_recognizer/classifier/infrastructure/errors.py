"""Error types raised by classifier infrastructure."""

from digit_recognizer.core.errors import DigitRecognizerError


class EmptyTrainingSetError(DigitRecognizerError):
    """Raised when a prediction is requested from a classifier with no observations."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to predict label: classifier has no training observations"
        )
