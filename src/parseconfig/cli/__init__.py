# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for parseconfig."""

from __future__ import annotations

import rich_click as click

from parseconfig.__about__ import __version__
from parseconfig.cli.commands import convert, view
from parseconfig.logging import init_cli_logging, logger


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]}, invoke_without_command=True
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="parseconfig")
def parseconfig(*, verbose: bool) -> None:
    """parseconfig - Inspect and rewrite 'param = value' config files."""
    init_cli_logging(verbose=verbose)

    ctx = click.get_current_context()
    if ctx is None or ctx.invoked_subcommand is None:
        logger.info("parseconfig - Inspect and rewrite 'param = value' config files")
        logger.info("Run 'parseconfig --help' for available commands.")


# Register subcommands
parseconfig.add_command(view.show)
parseconfig.add_command(view.get)
parseconfig.add_command(view.groups)
parseconfig.add_command(convert.format_cmd, name="format")
parseconfig.add_command(convert.export_cmd, name="export")
