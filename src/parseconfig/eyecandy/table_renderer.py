# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>

#
# SPDX-License-Identifier: MIT

"""Table renderer interface for the parseconfig CLI UI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from parseconfig.store import ConfigStore


class TableRenderer:
    """
    Declarative interface to render config data.

    Args:
        console (Console | None): Rich console instance for output
            (optional, creates default if None)
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_key_values(self, title: str, data: dict[str, Any]) -> None:
        """Render a key/value panel view."""
        if not data:
            self.console.print(f"[dim]{escape(title)}: no parameters[/dim]")
            return

        table = Table(show_header=False, box=None, pad_edge=False)
        for key, value in data.items():
            table.add_row(Text(key, style="bold cyan"), Text(str(value), style="white"))

        panel = Panel(
            table,
            title=f"[bold blue]{escape(title)}[/bold blue]",
            border_style="blue",
            padding=(1, 2),
        )
        self.console.print(panel)

    def render_store(self, store: ConfigStore) -> None:
        """Render plain parameters, then one panel per group."""
        scalars = {k: v for k, v in store.params.items() if not isinstance(v, dict)}
        if not scalars and not store.groups:
            self.console.print("[dim]Config is empty[/dim]")
            return

        if scalars:
            self.render_key_values("Parameters", scalars)
        for group in store.groups:
            self.render_key_values(f"[{group}]", store.params[group])
