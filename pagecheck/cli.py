"""
pagecheck — CLI.

Audits index.html (or docs/index.html), prints the transcript, publishes
the report to the CI summary and PR, and exits non-zero unless every rule
passed.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from pagecheck import __version__
from pagecheck.audit import AuditEngine, Report
from pagecheck.audit.scoring import gate_exit_code
from pagecheck.config import SETTLE_CONDITIONS, AuditSettings, SinkConfig
from pagecheck.i18n import SUPPORTED_LANGUAGES, get_trans
from pagecheck.report import append_summary, publish_comment, render_console, render_summary_markdown

console = Console()
logger = logging.getLogger("pagecheck")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def publish(report: Report, sinks: SinkConfig, lang: str) -> None:
    """Console transcript, step summary, then the PR comment."""
    render_console(report, console, lang)
    append_summary(render_summary_markdown(report, lang), sinks)
    # Nothing to comment on when the document was never audited.
    if report.results:
        publish_comment(report, sinks, lang)


@click.command()
@click.version_option(__version__, prog_name="pagecheck")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory the candidate paths are resolved against",
)
@click.option(
    "--candidate",
    "candidates",
    multiple=True,
    help="Candidate document path, first existing wins (repeatable)",
)
@click.option("--width", "widths", type=int, multiple=True, help="Viewport width in px (repeatable)")
@click.option(
    "--wait-until",
    type=click.Choice(SETTLE_CONDITIONS),
    default=None,
    help="Load state to wait for before measuring (default: networkidle)",
)
@click.option("--timeout-ms", type=float, default=None, help="Navigation timeout per width")
@click.option("--concurrent", "concurrency", type=int, default=None, help="Browsers to run at once")
@click.option("--lang", type=click.Choice(sorted(SUPPORTED_LANGUAGES)), default=None, help="Report language")
@click.option("--no-comment", is_flag=True, help="Never post a PR comment")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(root, candidates, widths, wait_until, timeout_ms, concurrency, lang, no_comment, verbose) -> None:
    """Check one HTML page for SEO/structure rules and horizontal overflow."""
    setup_logging(verbose)
    try:
        settings = AuditSettings.from_env(
            candidates=tuple(candidates) or None,
            widths=tuple(widths) or None,
            wait_until=wait_until,
            timeout_ms=timeout_ms,
            concurrency=concurrency,
            lang=lang,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    logger.debug("Settings: %s", settings)
    engine = AuditEngine(settings, root=root)
    with console.status("[bold blue]Checking page...[/]"):
        report = engine.run_sync()

    publish(report, SinkConfig.from_env(comment_enabled=not no_comment), settings.lang)

    code = gate_exit_code(report)
    if report.results:
        console.print()
        console.print(get_trans("gate_passed" if code == 0 else "gate_failed", settings.lang))
    sys.exit(code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
