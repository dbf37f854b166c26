"""Distance Protocol — structural interface for comparing two pixel vectors."""

from collections.abc import Sequence
from typing import Protocol


class Distance(Protocol):
    """Scores the dissimilarity of two equal-length pixel vectors.

    Identical vectors score 0.0 and the score never goes negative. Calling
    ``between`` with vectors of different lengths is a programming error and
    must raise rather than return a value.
    """

    @property
    def name(self) -> str: ...

    def between(self, pixels1: Sequence[int], pixels2: Sequence[int]) -> float: ...
