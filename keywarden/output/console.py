"""
Keywarden Console Output
=========================

Rich-based formatters for analysis results, generated passwords, bulk
checks and the security report. Analysed
passwords are shown masked; generated passwords and passphrases are shown
in clear since printing them is the point of the command.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import WardenConsole

from keywarden.core.models import (
    AnalysisResult,
    BulkEntry,
    Outcome,
    SecurityReport,
    StrengthLabel,
)
from keywarden.output.findings import analysis_findings

_STRENGTH_COLOURS: dict[str, str] = {
    StrengthLabel.VERY_WEAK.value: "bold white on red",
    StrengthLabel.WEAK.value: "bold red",
    StrengthLabel.MODERATE.value: "bold yellow",
    StrengthLabel.STRONG.value: "bold green",
    StrengthLabel.VERY_STRONG.value: "bold bright_green",
}

_METER_WIDTH = 40


class KeywardenConsoleOutput:
    """Console renderers for Keywarden results.

    Usage::

        output = KeywardenConsoleOutput(WardenConsole())
        output.display_analysis(result)
        output.display_report(report)
    """

    def __init__(self, console: Optional[WardenConsole] = None) -> None:
        self.console = console or WardenConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: AnalysisResult, *, show_password: bool = False) -> None:
        """Strength meter, signal breakdown, findings and recommendations."""
        self.console.section("Password Analysis")
        self._rich.print(Panel(self._meter(result), title="Strength Meter", border_style="cyan"))

        details = Table(border_style="bright_cyan", header_style="bold bright_magenta", show_lines=True)
        details.add_column("Property", style="bold")
        details.add_column("Value")
        details.add_row("Password", escape(result.password if show_password else result.masked))
        details.add_row("Length", str(result.length))
        details.add_row("Entropy", f"{result.entropy:.1f} bits")
        details.add_row("Time to Crack", result.time_to_crack)
        details.add_row(
            "Compromised",
            "[bold red]YES[/bold red]" if result.is_compromised else "[green]NO[/green]",
        )
        self._rich.print(details)

        breakdown = result.breakdown
        signals = Table(
            title="Signal Breakdown",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        signals.add_column("Signal", style="bold")
        signals.add_column("Score", justify="right")
        signals.add_column("Feedback")
        signals.add_row("Length", str(breakdown.length.score), breakdown.length.feedback)
        signals.add_row("Variety", str(breakdown.variety.score), breakdown.variety.feedback)
        signals.add_row("Patterns", str(breakdown.patterns.score), breakdown.patterns.feedback)
        signals.add_row(
            "Commonality", str(breakdown.commonality.score), breakdown.commonality.feedback
        )
        signals.add_row("Breach", "-", breakdown.breach.feedback)
        self._rich.print(signals)

        self.console.findings_table(analysis_findings(result))

        if result.is_compromised:
            self.console.critical(breakdown.breach.feedback)

        self._rich.print()
        self._rich.print("[bold]Recommendations:[/bold]")
        for rec in result.recommendations:
            self._rich.print(f"  [bright_cyan]•[/bright_cyan] {rec}")

    def _meter(self, result: AnalysisResult) -> Text:
        colour = _STRENGTH_COLOURS.get(result.strength.value, "white")
        filled = max(0, min(_METER_WIDTH, int(result.score / result.max_score * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/{result.max_score}  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.25:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.50:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(result.strength.value.upper(), style=colour)
        return meter

    def display_bulk(self, entries: list[BulkEntry]) -> None:
        """One row per password: strength, score, entropy, breach status."""
        self.console.section("Bulk Password Check")
        tbl = Table(border_style="bright_cyan", header_style="bold bright_magenta", show_lines=True)
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Password")
        tbl.add_column("Strength")
        tbl.add_column("Score", justify="right")
        tbl.add_column("Entropy", justify="right")
        tbl.add_column("Time to Crack")
        tbl.add_column("Compromised", justify="center")

        for idx, entry in enumerate(entries, start=1):
            outcome = entry.analysis
            if not outcome.ok:
                tbl.add_row(
                    str(idx), escape(repr(entry.password)),
                    f"[red]{outcome.display}[/red]", "-", "-", "-", "-",
                )
                continue
            result: AnalysisResult = outcome.value
            colour = _STRENGTH_COLOURS.get(result.strength.value, "white")
            tbl.add_row(
                str(idx),
                escape(result.masked),
                f"[{colour}]{result.strength.value}[/{colour}]",
                str(result.score),
                f"{result.entropy:.1f}",
                result.time_to_crack,
                "[bold red]YES[/bold red]" if result.is_compromised else "[green]NO[/green]",
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def display_passwords(self, outcomes: list[Outcome]) -> None:
        """Generated passwords, with inline errors for failed slots."""
        self.console.section("Generated Passwords")
        for idx, outcome in enumerate(outcomes, start=1):
            if outcome.ok:
                self._rich.print(f"  [dim]{idx:>3}.[/dim] [bold]{escape(outcome.value)}[/bold]")
            else:
                self.console.error(f"{idx:>3}. {outcome.error.message}")

    def display_passphrase(self, passphrase: str) -> None:
        self.console.section("Generated Passphrase")
        self._rich.print(Panel(Text(passphrase, style="bold bright_green"), border_style="cyan"))

    def display_report(self, report: SecurityReport) -> None:
        """Strength distribution and aggregate figures."""
        self.console.section("Security Report")
        summary = Text()
        summary.append("Total Analysed: ", style="bold")
        summary.append(f"{report.total_analyzed}\n")
        summary.append("Compromised: ", style="bold")
        summary.append(
            str(report.compromised_count),
            style="bold red" if report.compromised_count else "green",
        )
        summary.append("\nAverage Entropy: ", style="bold")
        summary.append(f"{report.average_entropy:.1f} bits")
        self._rich.print(Panel(summary, title="Summary", border_style="cyan"))

        total = report.total_analyzed or 1
        self.console.table(
            "Strength Distribution",
            ["Strength", "Count", "Share"],
            [
                (label, count, f"{count / total:.0%}")
                for label, count in report.strength_distribution.items()
            ],
            styles=["bold", "", ""],
        )
