"""JSON-backed persistence for the tag/icon pair list."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PAIRS_KEY = "tagIconPairs"


class SettingsError(RuntimeError):
    """Raised when the persisted settings blob cannot be read or written."""


@dataclass(slots=True)
class TagIconPair:
    """A tag (``category/name``) and the glyph that replaces it."""

    tag: str = ""
    icon: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data["tag"] = self.tag
        data["icon"] = self.icon
        return data


@dataclass(slots=True)
class Settings:
    """Ordered pair list plus any extra keys found in the stored blob."""

    tag_icon_pairs: list[TagIconPair] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data[PAIRS_KEY] = [pair.to_dict() for pair in self.tag_icon_pairs]
        return data


def default_settings() -> dict[str, Any]:
    return {PAIRS_KEY: []}


def settings_from_dict(raw: dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a decoded blob, merged over the defaults."""

    merged = default_settings()
    merged.update(raw)

    pairs_raw = merged.pop(PAIRS_KEY)
    if not isinstance(pairs_raw, list):
        raise SettingsError(f"'{PAIRS_KEY}' must be a list")

    pairs: list[TagIconPair] = []
    for position, item in enumerate(pairs_raw):
        if not isinstance(item, dict):
            raise SettingsError(f"Pair #{position} must be an object")
        extra = dict(item)
        tag = extra.pop("tag", "")
        icon = extra.pop("icon", "")
        if not isinstance(tag, str) or not isinstance(icon, str):
            raise SettingsError(f"Pair #{position} must hold string 'tag' and 'icon'")
        pairs.append(TagIconPair(tag=tag, icon=icon, extra=extra))

    return Settings(tag_icon_pairs=pairs, extra=merged)


class SettingsStore:
    """Load and save the settings blob kept inside the vault."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> Settings:
        if not self.path.exists():
            logger.debug("No settings at %s, using defaults", self.path)
            return settings_from_dict({})

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise SettingsError(f"Settings file {self.path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Settings file {self.path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise SettingsError(f"Failed to read settings: {exc}") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise SettingsError("Settings root must be a JSON object")
        return settings_from_dict(raw)

    def save(self, settings: Settings) -> None:
        payload = json.dumps(settings.to_dict(), ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Failed to save settings: {exc}") from exc
        logger.debug("Saved %d pairs to %s", len(settings.tag_icon_pairs), self.path)
