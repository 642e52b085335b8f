"""
Keywarden Console Interface
============================

Rich-powered console abstraction giving every Keywarden command the same
banner, section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_WARDEN_THEME = Theme(
    {
        "warden.banner": "bold bright_cyan",
        "warden.section": "bold bright_magenta",
        "warden.success": "bold green",
        "warden.warning": "bold yellow",
        "warden.error": "bold red",
        "warden.info": "bold bright_blue",
        "warden.dim": "dim white",
        "warden.critical": "bold white on red",
        "warden.high": "bold red",
        "warden.medium": "bold yellow",
        "warden.low": "bold bright_cyan",
        "warden.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  _  __                                   _
 | |/ /___ _   ___      ____ _ _ __ __| | ___ _ __
 | ' // _ \ | | \ \ /\ / / _` | '__/ _` |/ _ \ '_ \
 | . \  __/ |_| |\ V  V / (_| | | | (_| |  __/ | | |
 |_|\_\___|\__, | \_/\_/ \__,_|_|  \__,_|\___|_| |_|
           |___/
[/bright_cyan]"""

_TAGLINE = "Password Strength Analysis & Generation Toolkit"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "warden.critical",
    "HIGH": "warden.high",
    "MEDIUM": "warden.medium",
    "LOW": "warden.low",
    "INFO": "warden.informational",
}


class WardenConsole:
    """Unified console interface for Keywarden commands.

    Usage::

        con = WardenConsole()
        con.banner()
        con.section("Analysis")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (library / test mode).
        """
        self._console = Console(theme=_WARDEN_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner with version and local time."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[warden.banner]{_TAGLINE}[/warden.banner]\n"
            f"[warden.dim]Version: {version}  |  {now}[/warden.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a horizontal rule with *title* in it."""
        self._console.rule(f"  {title}  ", style="warden.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[warden.success][✔] SUCCESS:[/warden.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[warden.warning][⚠] WARNING:[/warden.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[warden.error][✘] ERROR:[/warden.error] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[warden.info][ℹ] INFO:[/warden.info] {message}")

    def critical(self, message: str) -> None:
        self._console.print(f"[warden.critical][☠] CRITICAL: {message}[/warden.critical]")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled table; every cell is stringified."""
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (see :class:`shared.models.Finding`).
        """
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=12)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = _SEVERITY_STYLES.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)
