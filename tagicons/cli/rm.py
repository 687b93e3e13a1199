"""Remove command for tagicons CLI."""

from __future__ import annotations

import click

from ..services.panel import PanelError
from ..settings import SettingsError
from ._common import TagIconsCliError, get_panel, position_to_index


@click.command(name="rm")
@click.option(
    "-y",
    "--yes",
    "assume_yes",
    is_flag=True,
    help="Skip confirmation prompt",
)
@click.argument("position", type=click.IntRange(min=1))
@click.pass_context
def rm(ctx: click.Context, position: int, assume_yes: bool) -> None:
    """Remove the row at POSITION."""

    panel = get_panel(ctx)
    if not assume_yes:
        confirm = click.confirm(
            f"Remove row {position}?", default=False, show_default=True
        )
        if not confirm:
            raise TagIconsCliError("Removal aborted.")

    try:
        removed = panel.remove(position_to_index(position))
    except (PanelError, SettingsError) as exc:
        raise TagIconsCliError(str(exc)) from exc

    click.echo(f"Removed {removed.tag or 'empty row'}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(rm)
