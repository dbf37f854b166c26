"""Fake ConfigObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    name: str
    version: str
    metrics: list[str]


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []

    def config_loaded(self, name: str, version: str, metrics: list[str]) -> None:
        self.loaded.append(ConfigLoadedEvent(name=name, version=version, metrics=metrics))
