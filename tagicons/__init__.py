"""Replace tag text in a note vault's editor with icons via a CSS snippet."""

from __future__ import annotations

__version__ = "0.1.0"
