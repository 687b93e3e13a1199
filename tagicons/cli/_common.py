"""Shared helpers for tagicons CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError
from ..services.panel import SettingsPanel
from ..settings import SettingsError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class TagIconsCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; ``-v`` shows INFO, ``-vv`` DEBUG."""

    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except MissingConfigError as exc:
        raise TagIconsCliError(
            "Configuration not found. Run 'tagicons config' once to set up tagicons."
        ) from exc
    except ConfigError as exc:
        raise TagIconsCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def get_panel(ctx: click.Context) -> SettingsPanel:
    """Return a settings panel over the stored pairs."""

    app = get_app(ctx)
    try:
        return SettingsPanel(app.store)
    except SettingsError as exc:
        raise TagIconsCliError(str(exc)) from exc


def position_to_index(position: int) -> int:
    """Convert a 1-based row position from the command line to a list index."""

    return position - 1
