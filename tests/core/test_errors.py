"""Tests verifying the DigitRecognizerError type hierarchy."""

from pathlib import Path

from digit_recognizer.classifier.infrastructure.errors import EmptyTrainingSetError
from digit_recognizer.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)
from digit_recognizer.core.errors import DigitRecognizerError
from digit_recognizer.dataset.infrastructure.errors import DatasetLoadError
from digit_recognizer.distance.infrastructure.errors import (
    DistanceNotSupportedError,
    InconsistentImageSizeError,
)
from digit_recognizer.evaluation.application.errors import EmptyValidationSetError


class TestDigitRecognizerErrorHierarchy:
    """All digit-recognizer-specific exceptions inherit from DigitRecognizerError."""

    def test_config_validation_error_is_digit_recognizer_error(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert isinstance(error, DigitRecognizerError)

    def test_config_load_error_is_digit_recognizer_error(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert isinstance(error, DigitRecognizerError)

    def test_dataset_load_error_is_digit_recognizer_error(self) -> None:
        error = DatasetLoadError(reason="file not found")
        assert isinstance(error, DigitRecognizerError)

    def test_distance_not_supported_error_is_digit_recognizer_error(self) -> None:
        error = DistanceNotSupportedError(name="cosine")
        assert isinstance(error, DigitRecognizerError)

    def test_digit_recognizer_error_is_exception(self) -> None:
        error = DigitRecognizerError("test")
        assert isinstance(error, Exception)

    def test_digit_recognizer_error_is_not_retriable_by_default(self) -> None:
        error = DigitRecognizerError("test")
        assert error.retriable is False


class TestPreconditionErrors:
    """Core precondition failures are typed, non-retriable, and say what failed."""

    def test_inconsistent_image_size_is_not_retriable(self) -> None:
        error = InconsistentImageSizeError(left_size=3, right_size=4)
        assert error.retriable is False

    def test_inconsistent_image_size_message_includes_both_sizes(self) -> None:
        error = InconsistentImageSizeError(left_size=3, right_size=4)
        assert "3" in str(error)
        assert "4" in str(error)

    def test_empty_training_set_is_not_retriable(self) -> None:
        assert EmptyTrainingSetError().retriable is False

    def test_empty_validation_set_is_not_retriable(self) -> None:
        assert EmptyValidationSetError().retriable is False

    def test_messages_start_with_failed(self) -> None:
        errors: list[DigitRecognizerError] = [
            InconsistentImageSizeError(left_size=1, right_size=2),
            EmptyTrainingSetError(),
            EmptyValidationSetError(),
            DistanceNotSupportedError(name="cosine"),
            DatasetLoadError(reason="boom"),
            ConfigValidationError(reason="boom"),
            ConfigLoadError(path=Path("missing.yaml")),
        ]
        for error in errors:
            assert str(error).startswith("Failed to ")
