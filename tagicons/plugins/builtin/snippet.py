"""Built-in target writing the stylesheet into the vault's snippets folder."""

from __future__ import annotations

from pathlib import Path

from ...config import TagIconsConfig
from ...snippets import write_snippet
from .. import PluginRegistrationError, SnippetTarget, hookimpl

TARGET_ID = "snippet"


def resolve_snippet_path(config: TagIconsConfig) -> Path:
    """Return the output file, honouring a ``[plugins.snippet] filename`` override."""

    settings = config.plugins.get(TARGET_ID, {})
    filename = settings.get("filename")
    if filename is None:
        return config.snippet_path
    if not isinstance(filename, str) or not filename.strip():
        raise PluginRegistrationError(
            "'plugins.snippet.filename' must be a non-empty string"
        )
    name = filename.strip()
    if "/" in name or "\\" in name:
        raise PluginRegistrationError(
            "'plugins.snippet.filename' must be a plain name, not a path"
        )
    return config.snippets_dir / name


def _write_vault_snippet(*, css: str, config: TagIconsConfig) -> Path:
    return write_snippet(resolve_snippet_path(config), css)


@hookimpl
def snippet_targets(config: TagIconsConfig) -> tuple[SnippetTarget, ...]:
    """Expose the vault snippet file as an output target."""

    filename = resolve_snippet_path(config).name
    target = SnippetTarget(
        target_id=TARGET_ID,
        writer=_write_vault_snippet,
        description=f"Write {filename} to the vault snippets folder",
    )
    return (target,)
