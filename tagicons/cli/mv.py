"""Move command for tagicons CLI."""

from __future__ import annotations

import click

from ..services.panel import PanelError
from ..settings import SettingsError
from ._common import TagIconsCliError, get_panel, position_to_index


@click.command(name="mv")
@click.option("--up", "direction", flag_value="up", help="Move the row up one place")
@click.option(
    "--down", "direction", flag_value="down", help="Move the row down one place"
)
@click.argument("position", type=click.IntRange(min=1))
@click.pass_context
def mv(ctx: click.Context, position: int, direction: str | None) -> None:
    """Move the row at POSITION one place up or down."""

    if direction is None:
        raise TagIconsCliError("Pass either '--up' or '--down'.")

    panel = get_panel(ctx)
    index = position_to_index(position)
    try:
        if direction == "up":
            moved = panel.move_up(index)
        else:
            moved = panel.move_down(index)
    except (PanelError, SettingsError) as exc:
        raise TagIconsCliError(str(exc)) from exc

    if not moved:
        edge = "top" if direction == "up" else "bottom"
        click.echo(f"Row {position} is already at the {edge}")
        return

    new_position = position - 1 if direction == "up" else position + 1
    click.echo(f"Moved row {position} to position {new_position}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(mv)
