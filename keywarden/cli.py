"""
Keywarden CLI
==============

Click-based command-line interface for the Keywarden password toolkit.
Provides subcommands for strength analysis, bulk checks, password and
passphrase generation, and analysis of the built-in sample passwords.

Usage::

    keywarden analyze "MyP@ssw0rd!"
    keywarden bulk password Tr0ub4dor&3 --file passwords.txt
    keywarden generate --length 20 --count 5 --no-symbols --report
    keywarden passphrase --words 5 --separator _
    keywarden -o json samples

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import click

from shared.config import KeywardenConfig
from shared.console import WardenConsole
from shared.logger import WardenLogger

from keywarden import __version__
from keywarden.core.engine import KeywardenToolkit
from keywarden.core.errors import KeywardenError
from keywarden.core.models import AnalysisResult, BulkEntry, SecurityReport
from keywarden.generators.random_source import SeededRandomSource
from keywarden.output.console import KeywardenConsoleOutput
from keywarden.output.report import KeywardenReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="keywarden")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Keywarden configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, console output and log messages.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Keywarden -- Password Strength Analysis & Generation Toolkit.

    Score passwords, check them against the breach table, and generate
    policy-constrained passwords and passphrases.
    """
    ctx.ensure_object(dict)

    warden_config = KeywardenConfig.load(config) if config else KeywardenConfig()
    ctx.obj["config"] = warden_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = WardenConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["display"] = KeywardenConsoleOutput(console)
    ctx.obj["reporter"] = KeywardenReportGenerator()
    ctx.obj["logger"] = WardenLogger.from_config("cli", warden_config, quiet=quiet)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _toolkit(ctx: click.Context, seed: Optional[int] = None) -> KeywardenToolkit:
    """Toolkit for this invocation; a seed makes generation reproducible."""
    config: KeywardenConfig = ctx.obj["config"]
    return KeywardenToolkit(
        config,
        random_source=SeededRandomSource(seed) if seed is not None else None,
        logger=WardenLogger.from_config("engine", config, quiet=ctx.obj["quiet"]),
    )


def _handle_output(
    ctx: click.Context,
    payload: Any,
    *,
    kind: str,
    analyses: Sequence[AnalysisResult] = (),
    security_report: Optional[SecurityReport] = None,
) -> None:
    """Write *payload* as JSON, or *analyses* as an HTML report.

    Args:
        ctx: Click context containing configuration.
        payload: Model (or list of models) serialised for JSON output.
        kind: Report kind, used in metadata and default file names.
        analyses: Analysis results rendered in the HTML report.
        security_report: Optional security report appended to the HTML.
    """
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: KeywardenReportGenerator = ctx.obj["reporter"]
    console: WardenConsole = ctx.obj["console"]
    logger: WardenLogger = ctx.obj["logger"]
    config: KeywardenConfig = ctx.obj["config"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(payload, Path(output_file), kind=kind)
            logger.info("Wrote %s JSON report to %s", kind, path)
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(payload, kind=kind))
    elif output_format == "html":
        if output_file:
            target = Path(output_file)
        else:
            target = Path(config.global_settings.output_dir) / f"keywarden_{kind}.html"
        path = reporter.generate_html(
            analyses,
            target,
            title=f"Keywarden {kind.replace('_', ' ').title()} Report",
            security_report=security_report,
        )
        logger.info("Wrote %s HTML report to %s", kind, path)
        console.success(f"HTML report saved to: {path}")


def _analyses(entries: Sequence[BulkEntry]) -> list[AnalysisResult]:
    return [entry.analysis.value for entry in entries if entry.analysis.ok]


def _show_bulk(ctx: click.Context, entries: list[BulkEntry], kind: str) -> None:
    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_bulk(entries)
    else:
        _handle_output(ctx, entries, kind=kind, analyses=_analyses(entries))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.option(
    "--show-password",
    is_flag=True,
    default=False,
    help="Print the password in clear instead of masked.",
)
@click.pass_context
def analyze(ctx: click.Context, password: str, show_password: bool) -> None:
    """Analyse the strength of a single password.

    Scores length, character variety, structural patterns and
    commonality, checks the breach table, and estimates entropy and
    time to crack.
    """
    toolkit = _toolkit(ctx)
    outcome = toolkit.analyze_password(password)
    if not outcome.ok:
        raise click.ClickException(outcome.error.message)

    result: AnalysisResult = outcome.value
    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_analysis(result, show_password=show_password)
    else:
        _handle_output(ctx, result, kind="analysis", analyses=[result])


@cli.command()
@click.argument("passwords", nargs=-1)
@click.option(
    "--file", "password_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read additional passwords from a file, one per line.",
)
@click.pass_context
def bulk(ctx: click.Context, passwords: tuple[str, ...], password_file: Optional[str]) -> None:
    """Analyse several passwords at once.

    Passwords given as arguments come first, followed by the non-empty
    lines of --file, in order.
    """
    candidates = list(passwords)
    if password_file:
        text = Path(password_file).read_text(encoding="utf-8")
        candidates.extend(line for line in text.splitlines() if line)
    if not candidates:
        raise click.UsageError("Provide passwords as arguments or with --file.")

    entries = _toolkit(ctx).check_passwords_in_bulk(candidates)
    _show_bulk(ctx, entries, kind="bulk")


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length.")
@click.option("--count", "-n", type=int, default=1, show_default=True, help="Number of passwords.")
@click.option("--no-lowercase", is_flag=True, default=False, help="Exclude lowercase letters.")
@click.option("--no-uppercase", is_flag=True, default=False, help="Exclude uppercase letters.")
@click.option("--no-numbers", is_flag=True, default=False, help="Exclude digits.")
@click.option("--no-symbols", is_flag=True, default=False, help="Exclude symbols.")
@click.option(
    "--exclude-ambiguous",
    is_flag=True,
    default=False,
    help="Drop look-alike characters (il1Lo0O).",
)
@click.option(
    "--no-variety",
    is_flag=True,
    default=False,
    help="Do not force one character from every enabled class.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--report",
    is_flag=True,
    default=False,
    help="Append a security report over the generated passwords.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    count: int,
    no_lowercase: bool,
    no_uppercase: bool,
    no_numbers: bool,
    no_symbols: bool,
    exclude_ambiguous: bool,
    no_variety: bool,
    seed: Optional[int],
    report: bool,
) -> None:
    """Generate random passwords.

    Defaults come from the [generator] section of the configuration;
    flags given here override them.
    """
    if count < 1:
        raise click.BadParameter("must be at least 1", param_hint="--count")

    toolkit = _toolkit(ctx, seed)
    overrides: dict[str, Any] = {}
    if length is not None:
        overrides["length"] = length
    if no_lowercase:
        overrides["include_lowercase"] = False
    if no_uppercase:
        overrides["include_uppercase"] = False
    if no_numbers:
        overrides["include_numbers"] = False
    if no_symbols:
        overrides["include_symbols"] = False
    if exclude_ambiguous:
        overrides["exclude_ambiguous"] = True
    if no_variety:
        overrides["ensure_variety"] = False

    try:
        outcomes = toolkit.generate_multiple_passwords(count, **overrides)
    except KeywardenError as exc:
        raise click.ClickException(exc.message) from exc

    security_report = toolkit.generate_security_report() if report else None

    if ctx.obj["output_format"] == "console":
        display: KeywardenConsoleOutput = ctx.obj["display"]
        display.display_passwords(outcomes)
        if security_report is not None:
            display.display_report(security_report)
    else:
        payload: dict[str, Any] = {"passwords": outcomes}
        if security_report is not None:
            payload["security_report"] = security_report
        analyses = [
            toolkit.analyze_password(o.value).value for o in outcomes if o.ok
        ]
        _handle_output(
            ctx,
            payload,
            kind="generation",
            analyses=analyses,
            security_report=security_report,
        )

    if not any(o.ok for o in outcomes):
        ctx.exit(1)


@cli.command()
@click.option("--words", "-w", type=int, default=None, help="Number of words.")
@click.option("--separator", "-s", default=None, help="Separator between tokens.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.pass_context
def passphrase(
    ctx: click.Context,
    words: Optional[int],
    separator: Optional[str],
    seed: Optional[int],
) -> None:
    """Generate a word-list passphrase ending in a number."""
    toolkit = _toolkit(ctx, seed)
    try:
        phrase = toolkit.generate_passphrase(words, separator)
    except KeywardenError as exc:
        raise click.ClickException(exc.message) from exc

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_passphrase(phrase)
    else:
        analysis = toolkit.analyze_password(phrase).value
        _handle_output(
            ctx, {"passphrase": phrase}, kind="passphrase", analyses=[analysis]
        )


@cli.command()
@click.pass_context
def samples(ctx: click.Context) -> None:
    """Analyse the built-in reference passwords."""
    entries = _toolkit(ctx).analyze_samples()
    _show_bulk(ctx, entries, kind="samples")


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keywarden CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
