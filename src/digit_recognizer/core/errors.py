"""Base exception class for all digit-recognizer-specific errors."""


class DigitRecognizerError(Exception):
    """Base class for all digit-recognizer errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
