"""Error types raised by distance infrastructure."""

from digit_recognizer.core.errors import DigitRecognizerError


class InconsistentImageSizeError(DigitRecognizerError):
    """Raised when a distance is requested between vectors of different lengths."""

    def __init__(self, left_size: int, right_size: int) -> None:
        self.left_size = left_size
        self.right_size = right_size
        super().__init__(
            f"Failed to compute distance: inconsistent image sizes"
            f" ({left_size} != {right_size})"
        )


class DistanceNotSupportedError(DigitRecognizerError):
    """Raised when a distance name does not match any known metric."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Failed to create distance: unsupported distance metric '{name}'"
        )
