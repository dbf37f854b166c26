"""Observation domain value object — one labeled image as a flat pixel vector."""

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

Label: TypeAlias = str


class Observation(BaseModel):
    """Immutable value object pairing a digit label with the pixels that draw it.

    Pixel order is significant: position ``i`` is the same pixel coordinate in
    every observation of a run. Lists are coerced to tuples on construction so
    that neither the caller nor a classifier can mutate the vector afterwards.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    pixels: tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.pixels)
