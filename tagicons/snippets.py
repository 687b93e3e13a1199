"""Read and write the generated CSS snippet file."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SnippetError(RuntimeError):
    """Raised when the snippet file cannot be written or read."""


def write_snippet(path: Path, css: str) -> Path:
    """Write ``css`` to ``path``, creating the snippets directory if needed.

    Existing content is overwritten. Text is written without newline
    translation so reading it back yields the same string.
    """

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(css)
    except OSError as exc:
        raise SnippetError(f"Failed to write snippet {path}: {exc}") from exc

    logger.info("CSS has been written to %s", path)
    return path


def read_snippet(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except UnicodeDecodeError as exc:
        raise SnippetError(f"Snippet {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SnippetError(f"Failed to read snippet {path}: {exc}") from exc
