"""ProgressEvaluationObserver — renders one Rich progress bar per metric to stderr."""

from __future__ import annotations

import sys
import threading

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

# ANSI color names for metric descriptions (Rich markup style).
_METRIC_COLORS: list[str] = [
    "cyan",
    "green",
    "yellow",
    "magenta",
    "blue",
]


class ProgressEvaluationObserver:
    """Renders a Rich progress bar per metric on stderr, plus a running accuracy.

    A row is added when a metric starts and is advanced once per scored
    observation. Scoring events may arrive from worker threads, so the match
    counters are guarded by a lock.

    Pass ``disabled=True`` to keep the counters without any terminal output
    (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._lock = threading.Lock()
        self._metric_names: list[str] = []
        self._current: str | None = None
        self._scored: dict[str, int] = {}
        self._matched: dict[str, int] = {}
        self._task_ids: dict[str, TaskID] = {}
        self._progress: Progress | None = None

    @property
    def scored(self) -> dict[str, int]:
        return dict(self._scored)

    @property
    def matched(self) -> dict[str, int]:
        return dict(self._matched)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _make_desc(self, name: str) -> str:
        """Build a description string for a metric row, with optional color."""
        pad_width = max((len(n) for n in self._metric_names), default=len(name))
        if sys.stderr.isatty():
            index = self._metric_names.index(name) if name in self._metric_names else 0
            color = _METRIC_COLORS[index % len(_METRIC_COLORS)]
            return f"[{color}]{name:<{pad_width}}[/{color}]"
        return f"{name:<{pad_width}}"

    def _accuracy_str(self, name: str) -> str:
        scored = self._scored.get(name, 0)
        if scored == 0:
            return "--.--%"
        return f"{100.0 * self._matched[name] / scored:5.2f}%"

    # ------------------------------------------------------------------
    # Observer events
    # ------------------------------------------------------------------

    def run_started(
        self,
        run_id: str,
        training_size: int,
        validation_size: int,
        metric_names: list[str],
        n_jobs: int,
    ) -> None:
        # Reset state from any previous run.
        self._metric_names = list(metric_names)
        self._current = None
        self._scored = {}
        self._matched = {}
        self._task_ids = {}
        self._progress = None

        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("{task.fields[accuracy]}"),
            TimeElapsedColumn(),
            TextColumn("eta"),
            TimeRemainingColumn(),
            console=Console(stderr=True),
            refresh_per_second=10,
            transient=False,
        )
        self._progress.start()

    def run_completed(
        self, run_id: str, total_metrics: int, elapsed_seconds: float
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_ids = {}
        self._current = None

    def metric_started(
        self, run_id: str, metric: str, total_observations: int
    ) -> None:
        with self._lock:
            self._current = metric
            self._scored[metric] = 0
            self._matched[metric] = 0

        if self._progress is not None:
            self._task_ids[metric] = self._progress.add_task(
                description=self._make_desc(name=metric),
                total=float(total_observations),
                accuracy=self._accuracy_str(name=metric),
            )

    def metric_completed(
        self,
        run_id: str,
        metric: str,
        accuracy: float,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None and metric in self._task_ids:
            self._progress.update(
                self._task_ids[metric],
                accuracy=f"{100.0 * accuracy:5.2f}%",
            )

    def metric_failed(self, run_id: str, metric: str, reason: str) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None

    def observation_scored(self, label: str, prediction: str, matched: bool) -> None:
        with self._lock:
            metric = self._current
            if metric is None:
                return
            self._scored[metric] += 1
            if matched:
                self._matched[metric] += 1
            accuracy = self._accuracy_str(name=metric)

        if self._progress is not None and metric in self._task_ids:
            self._progress.update(
                self._task_ids[metric], advance=1, accuracy=accuracy
            )
