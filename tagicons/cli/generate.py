"""Generate command for tagicons CLI."""

from __future__ import annotations

import click

from ..generator import MalformedTagError
from ..services.generate import (
    DEFAULT_TARGET,
    TargetError,
    generate_snippet,
    get_target_descriptions,
)
from ..settings import SettingsError
from ._common import TagIconsCliError, get_app


@click.command(name="generate")
@click.option(
    "-l",
    "--list-targets",
    "list_targets",
    is_flag=True,
    help="List available output targets and exit.",
)
@click.option(
    "-t",
    "--target",
    "target_id",
    type=str,
    default=DEFAULT_TARGET,
    show_default=True,
    metavar="TARGET",
    help="Where to send the generated CSS.",
)
@click.pass_context
def generate(ctx: click.Context, list_targets: bool, target_id: str) -> None:
    """Replace tag display (generate CSS)."""

    app = get_app(ctx)

    if list_targets:
        try:
            descriptions = get_target_descriptions(app.config)
        except TargetError as exc:
            raise TagIconsCliError(str(exc)) from exc

        if not descriptions:
            click.echo("No output targets are available.")
        else:
            click.echo("Available output targets:\n")
            for name, desc in descriptions:
                if desc:
                    click.echo(f"  - {name}: {desc}")
                else:
                    click.echo(f"  - {name}")
        ctx.exit(0)

    try:
        result = generate_snippet(app, target_id=target_id)
    except (TargetError, SettingsError, MalformedTagError) as exc:
        raise TagIconsCliError(str(exc)) from exc

    if not result.ok:
        raise TagIconsCliError(f"Error writing CSS file: {result.error}")

    if result.path is not None:
        click.echo(f"CSS has been written to {result.path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(generate)
