"""Tests for the terminal run summary."""

import pytest

from digit_recognizer.cli.output.report import (
    format_elapsed,
    format_percent,
    print_summary,
)
from digit_recognizer.evaluation.domain.result import MetricResult
from digit_recognizer.evaluation.domain.summary import RunSummary


def _summary(results: list[MetricResult]) -> RunSummary:
    return RunSummary(
        run_id="0123456789abcdef",
        config_name="digits",
        training_sha256="f" * 64,
        validation_sha256="e" * 64,
        training_size=5000,
        validation_size=500,
        results=results,
    )


def _result(metric: str, correct: int) -> MetricResult:
    return MetricResult(
        metric=metric,
        accuracy=correct / 500,
        correct=correct,
        total=500,
        elapsed_seconds=12.5,
    )


class TestFormatting:
    """Number formatting helpers."""

    def test_format_percent_uses_two_decimals(self) -> None:
        assert format_percent(0.9443) == "94.43%"

    def test_format_percent_of_one(self) -> None:
        assert format_percent(1.0) == "100.00%"

    def test_format_elapsed_under_a_minute(self) -> None:
        assert format_elapsed(5.24) == "5.2s"

    def test_format_elapsed_over_a_minute(self) -> None:
        assert format_elapsed(83.4) == "1m 23.4s"


class TestPrintSummary:
    """print_summary writes run metadata and one row per metric to stdout."""

    def test_includes_run_metadata(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_summary(summary=_summary([_result("manhattan", 470)]), elapsed_seconds=3.0)

        out = capsys.readouterr().out
        assert "01234567-..." in out
        assert "digits" in out
        assert "5000 observations" in out
        assert "500 observations" in out

    def test_includes_accuracy_per_metric(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_summary(
            summary=_summary([_result("manhattan", 470), _result("euclidean", 472)]),
            elapsed_seconds=3.0,
        )

        out = capsys.readouterr().out
        assert "manhattan" in out
        assert "94.00%" in out
        assert "470/500" in out
        assert "euclidean" in out
        assert "94.40%" in out

    def test_names_best_metric_when_comparing(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_summary(
            summary=_summary([_result("manhattan", 470), _result("euclidean", 472)]),
            elapsed_seconds=3.0,
        )

        assert "Best: euclidean" in capsys.readouterr().out

    def test_single_metric_has_no_best_callout(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_summary(summary=_summary([_result("manhattan", 470)]), elapsed_seconds=3.0)

        assert "Best:" not in capsys.readouterr().out
