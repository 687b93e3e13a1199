"""Hook specifications for tagicons plugins."""

from __future__ import annotations

from collections.abc import Iterable

from tagicons.config import TagIconsConfig

from ._markers import hookspec
from .types import SnippetTarget


class TagIconsHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def snippet_targets(self, config: TagIconsConfig) -> Iterable[SnippetTarget]:
        """Return output targets the generated stylesheet can be sent to."""
