"""Generate-and-write workflow behind the ``generate`` command."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..app import AppContext
from ..config import TagIconsConfig
from ..generator import generate_css
from ..plugins import (
    PluginRegistrationError,
    SnippetTarget,
    load_snippet_targets,
    reset_plugin_manager_cache,
)
from ..snippets import SnippetError

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "snippet"


class TargetError(RuntimeError):
    """Raised when the requested output target is unknown or unusable."""


@dataclass(slots=True)
class GenerationResult:
    """Outcome of one generation run; ``error`` is set when writing failed."""

    css: str
    target_id: str
    path: Path | None = None
    error: SnippetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clear_target_registry_cache() -> None:
    """Reset cached target discovery (primarily for testing)."""

    reset_plugin_manager_cache()


def _load_target_registry(config: TagIconsConfig) -> dict[str, SnippetTarget]:
    try:
        return load_snippet_targets(config)
    except PluginRegistrationError as exc:
        raise TargetError(str(exc)) from exc


def get_target_descriptions(config: TagIconsConfig) -> list[tuple[str, str]]:
    """Return tuples of ``(target_id, description)`` for available targets."""

    registry = _load_target_registry(config)
    return sorted(
        ((target_id, target.description) for target_id, target in registry.items()),
        key=lambda item: item[0],
    )


def resolve_target(config: TagIconsConfig, target_id: str) -> SnippetTarget:
    targets = _load_target_registry(config)
    target = targets.get(target_id.lower())
    if target is None:
        available = ", ".join(sorted(targets))
        if available:
            raise TargetError(f"Unknown target: {target_id}. Available: {available}.")
        raise TargetError("No snippet targets are available.")
    return target


def generate_snippet(
    ctx: AppContext, *, target_id: str = DEFAULT_TARGET
) -> GenerationResult:
    """Render the stylesheet from the saved pairs and hand it to a target.

    Malformed tags propagate as ``MalformedTagError`` unless the
    configuration enables ``skip_malformed``. Write failures are logged and
    reported through the returned result instead of being raised.
    """

    target = resolve_target(ctx.config, target_id)
    settings = ctx.store.load()
    css = generate_css(
        settings.tag_icon_pairs, skip_malformed=ctx.config.skip_malformed
    )

    result = GenerationResult(css=css, target_id=target.target_id)
    try:
        result.path = target.writer(css=css, config=ctx.config)
    except SnippetError as exc:
        logger.error("Error writing CSS file: %s", exc)
        result.error = exc
    return result


__all__ = [
    "DEFAULT_TARGET",
    "GenerationResult",
    "TargetError",
    "clear_target_registry_cache",
    "generate_snippet",
    "get_target_descriptions",
    "resolve_target",
]
