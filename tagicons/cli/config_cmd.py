"""Config command for tagicons CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ._common import TagIconsCliError


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Open the tagicons configuration file in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or config_module.DEFAULT_CONFIG_PATH

    created = config_module.bootstrap_config_file(config_path)

    try:
        result = click.edit(filename=str(config_path))
    except click.ClickException as exc:
        raise TagIconsCliError(f"Failed to launch editor: {exc}") from exc

    if created:
        click.echo(f"Created configuration at {config_path}")

    if result is None:
        click.echo(f"Opened configuration at {config_path}")
    else:  # pragma: no cover - depends on click behaviour
        click.echo(f"Updated configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
