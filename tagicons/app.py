"""Application bootstrap and context container for tagicons."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import TagIconsConfig, load_config
from .settings import SettingsStore


@dataclass(slots=True)
class AppContext:
    """Aggregates configuration and the settings store for one CLI run."""

    config: TagIconsConfig
    store: SettingsStore


def bootstrap(config_path: Path | None) -> AppContext:
    """Load configuration and wire up the settings store."""

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path)
    store = SettingsStore(config.settings_path)
    return AppContext(config=config, store=store)
