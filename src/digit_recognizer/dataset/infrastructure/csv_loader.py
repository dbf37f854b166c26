"""CSV dataset loader — reads label,pixel,pixel,... rows and returns Observation objects."""

import csv
import hashlib
import io
from pathlib import Path

from digit_recognizer.dataset.domain.load_result import DatasetLoadResult
from digit_recognizer.dataset.domain.observer import DatasetObserver
from digit_recognizer.dataset.infrastructure.errors import DatasetLoadError
from digit_recognizer.observation.domain.observation import Observation


class CsvObservationLoader:
    """Loads a comma-separated dataset file and returns Observation value objects.

    The first row is a header and is skipped. Column 0 holds the label and every
    remaining column holds one integer pixel value.
    """

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> DatasetLoadResult:
        """
        Load all observations from the CSV file at path.

        Emits observer events as loading progresses. Collects ALL per-row errors
        before raising a single DatasetLoadError listing every issue found.

        Raises:
            DatasetLoadError: if the file is missing or not UTF-8, if any row has
                an empty label or a non-integer pixel, or if rows disagree on the
                number of pixels.
        """
        path_str = str(path)
        self._observer.dataset_loading_started(path=path_str)

        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            reason = f"file is not valid UTF-8: {path_str} ({exc.reason})"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason) from exc

        observations, errors = self._parse_rows(text=text)

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        self._observer.dataset_loading_completed(
            path=path_str,
            total_observations=len(observations),
            pixels_per_observation=observations[0].size if observations else 0,
        )
        return DatasetLoadResult(
            observations=observations,
            sha256=hashlib.sha256(raw).hexdigest(),
        )

    def _parse_rows(self, text: str) -> tuple[list[Observation], list[str]]:
        """Parse each data row into an Observation, collecting errors without aborting early."""
        observations: list[Observation] = []
        errors: list[str] = []
        expected_size: int | None = None

        reader = csv.reader(io.StringIO(text))
        header_seen = False
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            if not header_seen:
                header_seen = True
                continue

            line_number = reader.line_num
            result = self._parse_row(row=row, line_number=line_number)
            if isinstance(result, str):
                errors.append(result)
                continue

            if expected_size is None:
                expected_size = result.size
            elif result.size != expected_size:
                errors.append(
                    f"line {line_number}: expected {expected_size} pixels,"
                    f" found {result.size}"
                )
                continue

            observations.append(result)

        return observations, errors

    def _parse_row(self, row: list[str], line_number: int) -> Observation | str:
        """
        Parse a single CSV row into an Observation.

        Returns an Observation on success, or an error string describing the problem.
        """
        label = row[0].strip()
        if not label:
            return f"line {line_number}: missing label"

        pixel_cells = row[1:]
        if not pixel_cells:
            return f"line {line_number}: no pixel values"

        pixels: list[int] = []
        for column, cell in enumerate(pixel_cells, start=1):
            try:
                pixels.append(int(cell))
            except ValueError:
                return f"line {line_number}: column {column}: invalid pixel value {cell!r}"

        return Observation(label=label, pixels=tuple(pixels))
