"""Built-in target printing the stylesheet instead of writing it."""

from __future__ import annotations

import click

from ...config import TagIconsConfig
from .. import SnippetTarget, hookimpl


def _print_css(*, css: str, config: TagIconsConfig) -> None:
    click.echo(css, nl=False)


@hookimpl
def snippet_targets() -> tuple[SnippetTarget, ...]:
    """Expose standard output as a preview target."""

    return (
        SnippetTarget(
            target_id="stdout",
            writer=_print_css,
            description="Print the stylesheet without touching the vault",
        ),
    )
