"""Console transcript, step-summary table and review comment for a Report."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from pagecheck.audit.types import Report
from pagecheck.i18n import get_trans

PASS_ICON = "✅"
FAIL_ICON = "❌"
NOTE_ICON = "ℹ️"


def _icon(passed: bool) -> str:
    return PASS_ICON if passed else FAIL_ICON


def _score_sep(lang: str) -> str:
    return "：" if lang.lower().startswith("zh") else ": "


def _cell(label: str) -> str:
    # Pipes would split the table cell.
    return label.replace("|", "\\|")


def console_lines(report: Report, lang: str = "en") -> list[str]:
    """Plain transcript: score, optional note, one line per rule in order."""
    lines = [get_trans("report_score_console", lang).format(score=report.score)]
    if report.note:
        lines.append(f"{NOTE_ICON} {report.note}")
    for r in report.results:
        lines.append(f"{_icon(r.passed)} {r.label}")
    return lines


def render_console(report: Report, console: Console, lang: str = "en") -> None:
    lines = console_lines(report, lang)
    style = "bold green" if report.all_passed else "bold red"
    console.print(f"[{style}]{escape(lines[0])}[/]")
    for line in lines[1:]:
        console.print(escape(line))


def render_summary_markdown(report: Report, lang: str = "en") -> str:
    """Markdown block appended to the CI step summary."""
    lines = [
        f"# {get_trans('report_title', lang)}",
        f"**{get_trans('report_total_score', lang)}{_score_sep(lang)}{report.score}/100**",
    ]
    if report.note:
        lines.append(f"\n> {report.note}\n")
    lines.append(f"\n| {get_trans('report_col_rule', lang)} | {get_trans('report_col_result', lang)} |")
    lines.append("|------|------|")
    for r in report.results:
        lines.append(f"| {_cell(r.label)} | {_icon(r.passed)} |")
    return "\n".join(lines) + "\n"


def render_comment_markdown(report: Report, lang: str = "en") -> str:
    """Markdown body for the pull request comment."""
    passed = get_trans("report_passed", lang)
    failed = get_trans("report_failed", lang)
    lines = [
        f"## 🎯 {get_trans('report_title', lang)}",
        "",
        f"### {get_trans('report_total_score', lang)}{_score_sep(lang)}{report.score}/100",
    ]
    if report.note:
        lines.append(f"\n> {report.note}\n")
    lines.append("")
    lines.append(f"| {get_trans('report_col_rule', lang)} | {get_trans('report_col_result', lang)} |")
    lines.append("|------|------|")
    for r in report.results:
        result = f"{PASS_ICON} {passed}" if r.passed else f"{FAIL_ICON} {failed}"
        lines.append(f"| {_cell(r.label)} | {result} |")
    lines.append("")
    lines.append("---")
    lines.append(get_trans("report_attribution", lang))
    return "\n".join(lines)
