"""Helpers for creating and working with the tagicons plugin manager."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from typing import Tuple

import pluggy

from ..config import TagIconsConfig
from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import TagIconsHookSpec
from .types import SnippetTarget


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager(*, load_entry_points: bool = True) -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` configured for tagicons."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(TagIconsHookSpec)

    if load_entry_points:
        manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except pluggy.PluginValidationError as exc:
            raise PluginRegistrationError(str(exc)) from exc


def iter_snippet_targets(
    manager: pluggy.PluginManager,
    config: TagIconsConfig,
) -> Iterator[SnippetTarget]:
    """Yield output targets from all registered plugins."""

    for contributions in manager.hook.snippet_targets(config=config):
        if not contributions:
            continue
        yield from _ensure_iterable(contributions)


def iter_plugin_modules() -> Tuple[object, ...]:
    """Return plugin modules bundled with tagicons."""

    return _builtin_plugin_modules()


@lru_cache(maxsize=1)
def _builtin_plugin_modules() -> Tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()
    _builtin_plugin_modules.cache_clear()


def load_snippet_targets(config: TagIconsConfig) -> dict[str, SnippetTarget]:
    """Collect output targets from all registered plugins, keyed by id."""

    manager = get_plugin_manager()

    targets: dict[str, SnippetTarget] = {}
    for target in iter_snippet_targets(manager, config):
        key = target.target_id.lower()
        if key in targets:
            raise PluginRegistrationError(
                f"Duplicate snippet target detected: '{target.target_id}'."
            )
        targets[key] = target

    return targets


def _ensure_iterable(contributions: object) -> Iterable[SnippetTarget]:
    """Normalize hook return values to a concrete iterable of targets."""

    if isinstance(contributions, SnippetTarget):
        return (contributions,)

    if not isinstance(contributions, Iterable) or isinstance(
        contributions, (str, bytes)
    ):
        raise PluginRegistrationError(
            "Plugin hook did not return an iterable target collection."
        )

    normalized: list[SnippetTarget] = []
    for item in contributions:
        if not isinstance(item, SnippetTarget):
            raise PluginRegistrationError(
                "Snippet targets must be SnippetTarget instances."
            )
        normalized.append(item)
    return tuple(normalized)


__all__ = [
    "PluginRegistrationError",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_plugin_modules",
    "iter_snippet_targets",
    "load_snippet_targets",
    "register_modules",
    "reset_plugin_manager_cache",
]
