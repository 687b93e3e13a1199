"""Row editing workflows behind the ``ls``/``add``/``rm``/``mv``/``set`` commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..settings import Settings, SettingsStore, TagIconPair

logger = logging.getLogger(__name__)

ACTION_UP = "up"
ACTION_DOWN = "down"
ACTION_REMOVE = "remove"


class PanelError(RuntimeError):
    """Raised when a row operation refers to a row that does not exist."""


@dataclass(frozen=True, slots=True)
class RowDescriptor:
    """Everything needed to render one editable row."""

    index: int
    tag: str
    icon: str
    actions: tuple[str, ...]

    @property
    def position(self) -> int:
        return self.index + 1


def build_rows(settings: Settings) -> list[RowDescriptor]:
    """Describe each pair as a row with the controls that apply to it."""

    pairs = settings.tag_icon_pairs
    last = len(pairs) - 1
    rows: list[RowDescriptor] = []
    for index, pair in enumerate(pairs):
        actions: list[str] = []
        if index > 0:
            actions.append(ACTION_UP)
        if index < last:
            actions.append(ACTION_DOWN)
        actions.append(ACTION_REMOVE)
        rows.append(
            RowDescriptor(index=index, tag=pair.tag, icon=pair.icon, actions=tuple(actions))
        )
    return rows


def _check_index(settings: Settings, index: int) -> None:
    count = len(settings.tag_icon_pairs)
    if not 0 <= index < count:
        raise PanelError(
            f"Row {index + 1} does not exist ({count} row{'s' if count != 1 else ''})."
        )


class SettingsPanel:
    """Mutates the pair list in place and saves after every change."""

    def __init__(self, store: SettingsStore, settings: Settings | None = None) -> None:
        self.store = store
        self.settings = settings if settings is not None else store.load()

    @property
    def pairs(self) -> list[TagIconPair]:
        return self.settings.tag_icon_pairs

    def rows(self) -> list[RowDescriptor]:
        return build_rows(self.settings)

    def add(self, tag: str = "", icon: str = "") -> RowDescriptor:
        self.pairs.append(TagIconPair(tag=tag, icon=icon))
        self._save()
        return self.rows()[-1]

    def remove(self, index: int) -> TagIconPair:
        _check_index(self.settings, index)
        removed = self.pairs.pop(index)
        self._save()
        return removed

    def move_up(self, index: int) -> bool:
        """Swap the row with the one above it; False when already first."""

        _check_index(self.settings, index)
        if index == 0:
            return False
        self._swap(index - 1, index)
        return True

    def move_down(self, index: int) -> bool:
        """Swap the row with the one below it; False when already last."""

        _check_index(self.settings, index)
        if index == len(self.pairs) - 1:
            return False
        self._swap(index, index + 1)
        return True

    def set_tag(self, index: int, value: str) -> None:
        _check_index(self.settings, index)
        self.pairs[index].tag = value
        self._save()

    def set_icon(self, index: int, value: str) -> None:
        _check_index(self.settings, index)
        self.pairs[index].icon = value
        self._save()

    def _swap(self, first: int, second: int) -> None:
        pairs = self.pairs
        pairs[first], pairs[second] = pairs[second], pairs[first]
        self._save()

    def _save(self) -> None:
        self.store.save(self.settings)
        logger.debug("Settings saved with %d rows", len(self.pairs))


__all__ = [
    "ACTION_DOWN",
    "ACTION_REMOVE",
    "ACTION_UP",
    "PanelError",
    "RowDescriptor",
    "SettingsPanel",
    "build_rows",
]
