"""Error types raised by dataset infrastructure."""

from digit_recognizer.core.errors import DigitRecognizerError


class DatasetLoadError(DigitRecognizerError):
    """Raised when a CSV dataset cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")
