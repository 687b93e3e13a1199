"""tagicons CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from . import add, config_cmd, generate, ls, mv, rm, set_cmd
from ._common import CONTEXT_SETTINGS, TagIconsCliError, configure_logging

__all__ = ["cli", "main", "TagIconsCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log progress to stderr (repeat for debug output).",
)
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None, verbose: int) -> None:
    """Replace tag text with icons in your vault's editor."""

    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    configure_logging(verbose)
    ctx.obj["config_path"] = config_path_opt


for register_command in (
    generate.register,
    ls.register,
    add.register,
    rm.register,
    mv.register,
    set_cmd.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="tagicons", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return result if isinstance(result, int) else 0
