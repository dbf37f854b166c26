"""YAML config loader — parses, validates, resolves paths, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from digit_recognizer.config.domain.config import RecognizerConfig
from digit_recognizer.config.domain.observer import ConfigObserver
from digit_recognizer.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)
from digit_recognizer.distance.infrastructure.registry import SUPPORTED_DISTANCES


class YamlConfigLoader:
    """Loads, validates, and returns a RecognizerConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> RecognizerConfig:
        """
        Load, validate, and return a RecognizerConfig from a YAML file.

        Relative dataset paths are resolved against the directory holding the
        config file.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            ConfigValidationError: if the schema is violated, or any metric name is
                unknown or repeated (all problems collected first).
        """
        raw = _parse_yaml(path=path)
        _check_metrics(raw=raw)
        cfg = _build_config(raw=raw)
        cfg = _resolve_dataset_paths(cfg=cfg, base_dir=path.parent)
        self._observer.config_loaded(
            name=cfg.name, version=cfg.version, metrics=list(cfg.metrics)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    return raw


def _check_metrics(raw: dict[str, Any]) -> None:
    """
    Validate metric names against the distance registry.

    Raises:
        ConfigValidationError: listing ALL unknown and duplicated metric names
            before raising (not just the first one).
    """
    metrics = raw.get("metrics") or []
    if not isinstance(metrics, list):
        return  # left for the schema check to report

    problems: list[str] = []
    seen: set[str] = set()
    for name in metrics:
        if not isinstance(name, str):
            continue
        if name not in SUPPORTED_DISTANCES:
            supported = ", ".join(SUPPORTED_DISTANCES)
            problems.append(f"unknown metric '{name}' (supported: {supported})")
        elif name in seen:
            problems.append(f"metric '{name}' listed more than once")
        seen.add(name)

    if problems:
        raise ConfigValidationError("; ".join(problems))


def _build_config(raw: dict[str, Any]) -> RecognizerConfig:
    try:
        return RecognizerConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_dataset_paths(cfg: RecognizerConfig, base_dir: Path) -> RecognizerConfig:
    dataset = cfg.dataset.model_copy(
        update={
            "training_path": base_dir / cfg.dataset.training_path,
            "validation_path": base_dir / cfg.dataset.validation_path,
        }
    )
    return cfg.model_copy(update={"dataset": dataset})
