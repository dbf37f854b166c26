"""Execution configuration model."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    n_jobs: int = Field(default=1, ge=1)
