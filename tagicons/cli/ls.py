"""List command for tagicons CLI."""

from __future__ import annotations

import click

from ._common import get_panel


@click.command(name="ls")
@click.pass_context
def ls(ctx: click.Context) -> None:
    """Show the tag/icon rows in generation order."""

    panel = get_panel(ctx)
    rows = panel.rows()
    if not rows:
        click.echo("No tag-icon pairs yet. Add one with 'tagicons add TAG ICON'.")
        return

    labels = [row.tag or "(empty)" for row in rows]
    width = max(len(label) for label in labels)
    for row, tag in zip(rows, labels):
        icon = row.icon or "-"
        actions = ", ".join(row.actions)
        click.echo(f"{row.position:>4}  {tag:<{width}}  {icon}  [{actions}]")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
