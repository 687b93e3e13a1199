"""tagicons plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    get_plugin_manager,
    load_snippet_targets,
    reset_plugin_manager_cache,
)
from .types import SnippetTarget, SnippetWriter

__all__ = [
    "ENTRY_POINT_GROUP",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "SnippetTarget",
    "SnippetWriter",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_snippet_targets",
    "reset_plugin_manager_cache",
]
