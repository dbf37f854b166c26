"""Distance registry — maps a configured metric name to a Distance instance."""

from digit_recognizer.distance.domain.distance import Distance
from digit_recognizer.distance.infrastructure.errors import DistanceNotSupportedError
from digit_recognizer.distance.infrastructure.metrics import (
    EuclideanDistance,
    ManhattanDistance,
)

_DISTANCES: dict[str, type[ManhattanDistance] | type[EuclideanDistance]] = {
    ManhattanDistance.name: ManhattanDistance,
    EuclideanDistance.name: EuclideanDistance,
}

SUPPORTED_DISTANCES: tuple[str, ...] = tuple(_DISTANCES)


def create_distance(name: str) -> Distance:
    """Return the Distance registered under name.

    Raises:
        DistanceNotSupportedError: if name is not a known metric.
    """
    try:
        distance_cls = _DISTANCES[name]
    except KeyError:
        raise DistanceNotSupportedError(name=name) from None
    return distance_cls()
