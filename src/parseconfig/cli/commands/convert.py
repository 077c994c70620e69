# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Commands that re-serialize a config file."""

from __future__ import annotations

import json
import sys

import rich_click as click
import yaml

from parseconfig.cli.commands.view import config_file_argument, load_store, strict_option
from parseconfig.logging import logger


@click.command(name="format")
@config_file_argument
@click.option("--unquoted", is_flag=True, help="Write values without surrounding quotes")
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False), help="Write to a file instead of stdout"
)
@strict_option
def format_cmd(config_file: str, output: str | None, *, unquoted: bool, strict: bool) -> None:
    """Rewrite a config file in normalized form."""
    store = load_store(config_file, strict=strict)
    if output is None:
        store.write(sys.stdout, quoted=not unquoted)
        return
    try:
        path = store.save(output, quoted=not unquoted)
    except OSError as e:
        logger.error("❌ Could not write %s: %s", output, e)
        raise click.ClickException(str(e)) from e
    logger.info("✅ Wrote %s", path)


@click.command(name="export")
@config_file_argument
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)
@strict_option
def export_cmd(config_file: str, output_format: str, *, strict: bool) -> None:
    """Export a config file as YAML or JSON."""
    store = load_store(config_file, strict=strict)
    data = store.to_dict()
    if output_format == "json":
        click.echo(json.dumps(data, indent=2, default=str))
    else:
        click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
