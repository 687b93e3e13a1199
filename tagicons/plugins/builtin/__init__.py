"""Built-in tagicons plugins."""

from __future__ import annotations

from . import snippet, stdout

BUILTIN_PLUGINS = (snippet, stdout)

__all__ = ["BUILTIN_PLUGINS"]
