"""Pluggy markers and constants for the tagicons plugin namespace."""

from __future__ import annotations

import pluggy

PLUGIN_NAMESPACE = "tagicons"
ENTRY_POINT_GROUP = "tagicons.plugins"

hookspec = pluggy.HookspecMarker(PLUGIN_NAMESPACE)
hookimpl = pluggy.HookimplMarker(PLUGIN_NAMESPACE)

__all__ = ["PLUGIN_NAMESPACE", "ENTRY_POINT_GROUP", "hookspec", "hookimpl"]
