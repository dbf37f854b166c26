"""Concrete distance metrics: Manhattan and squared Euclidean."""

from collections.abc import Sequence

from digit_recognizer.distance.infrastructure.errors import InconsistentImageSizeError


def _check_sizes(pixels1: Sequence[int], pixels2: Sequence[int]) -> None:
    if len(pixels1) != len(pixels2):
        raise InconsistentImageSizeError(
            left_size=len(pixels1), right_size=len(pixels2)
        )


class ManhattanDistance:
    """Sum of absolute per-pixel differences.

    Satisfies the Distance protocol structurally.
    """

    name = "manhattan"

    def between(self, pixels1: Sequence[int], pixels2: Sequence[int]) -> float:
        _check_sizes(pixels1=pixels1, pixels2=pixels2)
        return float(sum(abs(a - b) for a, b in zip(pixels1, pixels2)))


class EuclideanDistance:
    """Sum of squared per-pixel differences.

    The final square root is omitted: it does not change which neighbour is
    nearest, and callers asserting literal values rely on the squared form.

    Satisfies the Distance protocol structurally.
    """

    name = "euclidean"

    def between(self, pixels1: Sequence[int], pixels2: Sequence[int]) -> float:
        _check_sizes(pixels1=pixels1, pixels2=pixels2)
        return float(sum((a - b) ** 2 for a, b in zip(pixels1, pixels2)))
