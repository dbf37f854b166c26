"""CLI entrypoint for digit-recognizer — typer app with a `run` command."""

import logging
import sys
import time
from pathlib import Path

import structlog
import typer

from digit_recognizer.classifier.infrastructure.observer import (
    StructlogClassifierObserver,
)
from digit_recognizer.cli.output.report import print_summary
from digit_recognizer.config.infrastructure.observer import StructlogConfigObserver
from digit_recognizer.config.infrastructure.yaml_loader import YamlConfigLoader
from digit_recognizer.core.errors import DigitRecognizerError
from digit_recognizer.dataset.infrastructure.csv_loader import CsvObservationLoader
from digit_recognizer.dataset.infrastructure.observer import StructlogDatasetObserver
from digit_recognizer.evaluation.application.runner import RecognitionRunner
from digit_recognizer.evaluation.domain.observer import EvaluationObserver
from digit_recognizer.evaluation.domain.summary import RunSummary
from digit_recognizer.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from digit_recognizer.evaluation.infrastructure.observer import (
    StructlogEvaluationObserver,
)
from digit_recognizer.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)

app = typer.Typer(add_completion=False)

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        choices = ", ".join(_LOG_LEVELS)
        typer.echo(f"Invalid log level: {log_level!r}. Must be one of: {choices}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def main() -> None:
    """Brute-force 1-nearest-neighbour digit recognizer."""


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to recognizer config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Minimum log level: debug, info, warning or error",
    ),
) -> None:
    """Train a 1-NN classifier per configured metric and report validation accuracy."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)

        observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
        if log_format != "json":
            observers.append(ProgressEvaluationObserver())

        runner = RecognitionRunner(
            config=config,
            dataset_loader=CsvObservationLoader(observer=StructlogDatasetObserver()),
            observer=CompositeEvaluationObserver(observers=observers),
            classifier_observer=StructlogClassifierObserver(),
        )

        started_at = time.monotonic()
        summary: RunSummary = runner.run()
        elapsed_seconds = time.monotonic() - started_at

        print_summary(summary=summary, elapsed_seconds=elapsed_seconds)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Recognition interrupted.")
        sys.exit(1)
    except DigitRecognizerError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
