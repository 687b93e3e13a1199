"""Configuration management for tagicons."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/tagicons").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_HOST_CONFIG_DIRNAME = ".obsidian"
DEFAULT_SNIPPET_NAME = "tags.css"
PLUGIN_DIRNAME = "tagicons"
SETTINGS_FILENAME = "data.json"
SNIPPETS_DIRNAME = "snippets"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file misses required keys or values."""


@dataclass(slots=True)
class TagIconsConfig:
    """In-memory representation of the tagicons configuration file."""

    vault_dir: Path
    config_dir: str = DEFAULT_HOST_CONFIG_DIRNAME
    snippet_name: str = DEFAULT_SNIPPET_NAME
    skip_malformed: bool = False
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None

    @property
    def host_config_dir(self) -> Path:
        """Directory the host application keeps its own configuration in."""

        return self.vault_dir / self.config_dir

    @property
    def settings_path(self) -> Path:
        return self.host_config_dir / "plugins" / PLUGIN_DIRNAME / SETTINGS_FILENAME

    @property
    def snippets_dir(self) -> Path:
        return self.host_config_dir / SNIPPETS_DIRNAME

    @property
    def snippet_path(self) -> Path:
        return self.snippets_dir / self.snippet_name


def load_config(path: Path | None = None) -> TagIconsConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/tagicons/config.toml``) is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If mandatory settings are missing or malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Configuration is not valid TOML: {exc}") from exc

    section = raw.get("tagicons")
    if not isinstance(section, dict):
        raise InvalidConfigError("'tagicons' section is required and must be a table")

    base_dir = config_path.parent if path is not None else DEFAULT_CONFIG_DIR

    # Relative vault paths are resolved against the configuration directory.
    vault_raw = section.get("vault_dir")
    if not isinstance(vault_raw, str) or not vault_raw.strip():
        raise InvalidConfigError("'vault_dir' is required and must be a non-empty string")
    vault_path = Path(vault_raw.strip()).expanduser()
    vault_dir = (vault_path if vault_path.is_absolute() else base_dir / vault_path).resolve()

    config_dir = _optional_name(section, "config_dir", DEFAULT_HOST_CONFIG_DIRNAME)
    snippet_name = _optional_name(section, "snippet_name", DEFAULT_SNIPPET_NAME)

    skip_malformed = section.get("skip_malformed", False)
    if not isinstance(skip_malformed, bool):
        raise InvalidConfigError("'skip_malformed' must be a boolean when provided")

    plugins_section = raw.get("plugins")
    plugins: dict[str, dict[str, Any]] = {}
    if isinstance(plugins_section, dict):
        for key, value in plugins_section.items():
            plugins[key] = dict(value) if isinstance(value, dict) else {}

    return TagIconsConfig(
        vault_dir=vault_dir,
        config_dir=config_dir,
        snippet_name=snippet_name,
        skip_malformed=skip_malformed,
        plugins=plugins,
        source_path=config_path,
    )


def _optional_name(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    name = value.strip()
    if not name:
        return default
    if "/" in name or "\\" in name:
        raise InvalidConfigError(f"'{key}' must be a plain name, not a path")
    return name


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[tagicons]\n"
        'vault_dir = "~/notes"\n'
        f'config_dir = "{DEFAULT_HOST_CONFIG_DIRNAME}"\n'
        f'snippet_name = "{DEFAULT_SNIPPET_NAME}"\n'
        "skip_malformed = false\n"
    )
    path.write_text(default_content, encoding="utf-8")
    return True
