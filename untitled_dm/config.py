# untitled-dm — session launcher menu — MIT Licensed
"""config.py
Configuration loader for untitled-dm menus.

A configuration file lists the menu entries in order. TOML example:

    [[Commands]]
    Name = "Sway"
    Command = "sway"
    Args = []

    [[Commands]]
    Name = "Shell"
    Command = "bash"
    Args = ["-l"]

An entry with an empty (or missing) `Command` is shown in the menu but has
nothing to run. YAML files with the same structure are accepted too.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from untitled_dm.exceptions import ConfigDecodeError
from untitled_dm.logger import logger

DEFAULT_CONFIG_PATH = "config.toml"


class CommandConfig(BaseModel):
    """One menu entry as written in the configuration file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(alias="Name")
    command: str = Field(default="", alias="Command")
    args: list[str] = Field(default_factory=list, alias="Args")


class MenuConfig(BaseModel):
    """Top level of the configuration file."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, alias="Title")
    commands: list[CommandConfig] = Field(default_factory=list, alias="Commands")


def _decode(path: Path) -> Any:
    with path.open("r", encoding="UTF-8") as config_file:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        return toml.load(config_file)


def load_config(file_path: Path | str = DEFAULT_CONFIG_PATH) -> MenuConfig:
    """
    Load the menu configuration from a TOML or YAML file.

    A missing file is not an error: the menu simply has no configured
    commands. Files ending in `.yaml` or `.yml` are read as YAML, everything
    else as TOML.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        MenuConfig: The validated configuration.

    Raises:
        ConfigDecodeError: If the file exists but cannot be parsed or validated.
    """
    path = Path(file_path)
    if not path.is_file():
        logger.debug("No config file at '%s', starting with no commands.", path)
        return MenuConfig()

    try:
        raw_config = _decode(path)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError, yaml.YAMLError) as error:
        raise ConfigDecodeError(path, error) from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigDecodeError(
            path, "configuration must be a mapping with a 'Commands' list"
        )

    try:
        config = MenuConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigDecodeError(path, error) from error

    logger.debug("Loaded %d command(s) from '%s'.", len(config.commands), path)
    return config
