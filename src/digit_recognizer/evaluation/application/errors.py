"""Error types raised by the evaluation application layer."""

from digit_recognizer.core.errors import DigitRecognizerError


class EmptyValidationSetError(DigitRecognizerError):
    """Raised when accuracy is requested over a validation set with no observations."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to compute accuracy: validation set has no observations"
        )
