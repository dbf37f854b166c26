"""Terminal summary for a completed recognition run."""

import typer

from digit_recognizer.evaluation.domain.result import MetricResult
from digit_recognizer.evaluation.domain.summary import RunSummary

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_BLUE = "\033[34m"
_WHITE = "\033[97m"

# Width of the accuracy bar, in cells.
_BAR_W = 20


def _accuracy_color(accuracy: float) -> str:
    if accuracy >= 0.9:
        return _GREEN
    if accuracy >= 0.7:
        return _YELLOW
    return _RED


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def format_percent(accuracy: float) -> str:
    """Format an accuracy ratio as a percentage, e.g. 0.9443 -> '94.43%'."""
    return f"{100.0 * accuracy:.2f}%"


def format_elapsed(elapsed_seconds: float) -> str:
    """Format elapsed seconds as '1m 23.4s' or '5.2s'."""
    minutes, seconds = divmod(elapsed_seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{elapsed_seconds:.1f}s"


def _bar(accuracy: float) -> str:
    filled = round(accuracy * _BAR_W)
    color = _accuracy_color(accuracy=accuracy)
    return f"{color}{'█' * filled}{_DIM}{'░' * (_BAR_W - filled)}{_RESET}"


def _print_results_table(results: list[MetricResult], best: MetricResult) -> None:
    """One row per metric: accuracy, correct/total, elapsed, and a bar."""
    metric_w = max(len("Metric"), *(len(r.metric) for r in results))
    typer.echo(
        f"  {_DIM}{'Metric':<{metric_w}}  {'Accuracy':>8}  {'Correct':>11}"
        f"  {'Elapsed':>8}  Bar{_RESET}"
    )
    typer.echo(f"  {'─' * metric_w}  {'─' * 8}  {'─' * 11}  {'─' * 8}  {'─' * _BAR_W}")

    for result in results:
        color = _accuracy_color(accuracy=result.accuracy)
        marker = f" {_BOLD}▲{_RESET}" if result is best and len(results) > 1 else ""
        correct = f"{result.correct}/{result.total}"
        typer.echo(
            f"  {_WHITE}{result.metric:<{metric_w}}{_RESET}"
            f"  {color}{format_percent(result.accuracy):>8}{_RESET}"
            f"  {_DIM}{correct:>11}{_RESET}"
            f"  {_DIM}{format_elapsed(result.elapsed_seconds):>8}{_RESET}"
            f"  {_bar(result.accuracy)}{marker}"
        )


def print_summary(summary: RunSummary, elapsed_seconds: float) -> None:
    """Print a colorized summary of a recognition run to stdout."""
    best = summary.best()

    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  digit-recognizer  ·  Run Complete{_RESET}")
    _rule(color=_CYAN)
    typer.echo("")

    meta_rows: list[tuple[str, str]] = [
        ("Run ID", f"{summary.run_id[:8]}-..."),
        ("Config", summary.config_name),
        ("Training set", f"{summary.training_size} observations"),
        ("Training SHA256", f"{summary.training_sha256[:16]}..."),
        ("Validation set", f"{summary.validation_size} observations"),
        ("Validation SHA256", f"{summary.validation_sha256[:16]}..."),
        ("Elapsed", format_elapsed(elapsed_seconds=elapsed_seconds)),
    ]
    label_w = max(len(label) for label, _ in meta_rows)
    for label, value in meta_rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")

    typer.echo("")
    _rule(color=_BLUE)
    typer.echo(f"{_BLUE}{_BOLD}  Accuracy by Metric  (1-nearest-neighbour){_RESET}")
    _rule(color=_BLUE)
    _print_results_table(results=summary.results, best=best)

    if len(summary.results) > 1:
        typer.echo("")
        typer.echo(
            f"  {_GREEN}{_BOLD}Best: {best.metric}{_RESET}"
            f"  {_DIM}{format_percent(best.accuracy)} correct{_RESET}"
        )

    typer.echo("")
    _rule(color=_CYAN)
    typer.echo("")
