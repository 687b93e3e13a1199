"""Set command for tagicons CLI."""

from __future__ import annotations

import click

from ..services.panel import PanelError
from ..settings import SettingsError
from ._common import TagIconsCliError, get_panel, position_to_index


@click.command(name="set")
@click.option("--tag", "tag", type=str, default=None, help="New tag (category/name)")
@click.option("--icon", "icon", type=str, default=None, help="New icon glyph")
@click.argument("position", type=click.IntRange(min=1))
@click.pass_context
def set_row(
    ctx: click.Context, position: int, tag: str | None, icon: str | None
) -> None:
    """Edit the tag and/or icon of the row at POSITION."""

    if tag is None and icon is None:
        raise TagIconsCliError("Nothing to change: pass '--tag' and/or '--icon'.")

    panel = get_panel(ctx)
    index = position_to_index(position)
    try:
        if tag is not None:
            panel.set_tag(index, tag)
        if icon is not None:
            panel.set_icon(index, icon)
    except (PanelError, SettingsError) as exc:
        raise TagIconsCliError(str(exc)) from exc

    pair = panel.pairs[index]
    click.echo(f"Row {position}: {pair.tag or '(empty)'} -> {pair.icon or '-'}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(set_row)
