# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Read-only commands that display the contents of a config file."""

from __future__ import annotations

import rich_click as click

from parseconfig.errors import ConfigError
from parseconfig.eyecandy.table_renderer import TableRenderer
from parseconfig.logging import logger
from parseconfig.store import ConfigStore

CONFIG_FILE_ENV = "PARSECONFIG_FILE"

config_file_argument = click.argument(
    "config_file", envvar=CONFIG_FILE_ENV, type=click.Path(dir_okay=False)
)
strict_option = click.option(
    "--strict", is_flag=True, help="Fail on malformed lines instead of skipping them"
)


def load_store(config_file: str, *, strict: bool = False) -> ConfigStore:
    """Load a config file, turning store errors into CLI errors."""
    try:
        return ConfigStore(config_file, strict=strict)
    except ConfigError as e:
        logger.error("❌ Could not load %s: %s", config_file, e)
        raise click.ClickException(str(e)) from e


@click.command()
@config_file_argument
@strict_option
def show(config_file: str, *, strict: bool) -> None:
    """Show all parameters and groups of a config file."""
    store = load_store(config_file, strict=strict)
    TableRenderer().render_store(store)


@click.command()
@config_file_argument
@click.argument("key")
@click.option("--group", "-g", help="Look the key up inside this group")
@strict_option
def get(config_file: str, key: str, group: str | None, *, strict: bool) -> None:
    """Print the value of KEY."""
    store = load_store(config_file, strict=strict)
    if group is None:
        value = store.get(key)
    else:
        section = store.get(group)
        if not isinstance(section, dict):
            msg = f"No group named '{group}'"
            raise click.ClickException(msg)
        value = section.get(key)

    if value is None:
        msg = f"No parameter named '{key}'"
        raise click.ClickException(msg)
    if isinstance(value, dict):
        # KEY names a group; print its entries in config form
        for name, item in value.items():
            click.echo(f"{name} = {item}")
        return
    click.echo(value)


@click.command()
@config_file_argument
@strict_option
def groups(config_file: str, *, strict: bool) -> None:
    """List the groups of a config file."""
    store = load_store(config_file, strict=strict)
    for name in store.group_names():
        click.echo(name)
