"""Add command for tagicons CLI."""

from __future__ import annotations

import click

from ..settings import SettingsError
from ._common import TagIconsCliError, get_panel


@click.command(name="add")
@click.argument("tag", required=False, default="")
@click.argument("icon", required=False, default="")
@click.pass_context
def add(ctx: click.Context, tag: str, icon: str) -> None:
    """Append a row mapping TAG (category/name) to ICON.

    Both values may be omitted to add an empty row and fill it later with
    'tagicons set'.
    """

    panel = get_panel(ctx)
    try:
        row = panel.add(tag=tag, icon=icon)
    except SettingsError as exc:
        raise TagIconsCliError(str(exc)) from exc

    label = row.tag or "empty row"
    click.echo(f"Added {label} at position {row.position}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(add)
