"""Type definitions for tagicons plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - type check only
    from ..config import TagIconsConfig


class SnippetWriter(Protocol):
    """Callable that delivers a generated stylesheet somewhere."""

    def __call__(
        self,
        *,
        css: str,
        config: "TagIconsConfig",
    ) -> Path | None:  # pragma: no cover - Protocol
        """Deliver ``css`` and return the file written, if any."""


@dataclass(slots=True, frozen=True)
class SnippetTarget:
    """Descriptor for an output target contributed by a plugin."""

    target_id: str
    writer: SnippetWriter
    description: str
