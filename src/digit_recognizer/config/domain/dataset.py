"""Dataset configuration model."""

from pathlib import Path

from pydantic import BaseModel


class DatasetConfig(BaseModel, frozen=True):
    training_path: Path
    validation_path: Path
