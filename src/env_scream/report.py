"""
Human-readable output for the scream analysis.

Everything is written to stdout via a shared ``rich`` console; pass a console
explicitly to capture output elsewhere.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from env_scream.classifier import Autopsy
from env_scream.config import DetectorConfig, get_config

console = Console(soft_wrap=True, emoji=False)

REPORT_TITLE = "🔍 ENV SCREAM ANALYSIS REPORT"
MISSING_HEADING = "🚨 MISSING VARIABLES (add to .env):"
MISCONFIGURED_HEADING = "⚠️  MISCONFIGURED (check values in .env):"
CLOSING_REMARK = "💡 Remember: Environment variables should whisper, not scream."
NO_SCREAMS = "✅ No screams detected. Either perfect code or silent suffering."


def _out(target: Console | None) -> Console:
    return target if target is not None else console


def print_usage(prog: str, target: Console | None = None) -> None:
    """Print usage text with an example invocation."""
    out = _out(target)
    out.print(f"Usage: {escape(prog)} <logfile>")
    out.print(f"Example: {escape(prog)} error.log")
    out.print()
    out.print("Pro tip: Your logs are probably screaming right now.")


def print_log_not_found(path: str, target: Console | None = None) -> None:
    out = _out(target)
    out.print(f"[bold red]❌ Log file not found:[/] {escape(path)}", emoji=False)
    out.print("Tip: Try screaming louder next time.")


def print_no_screams(target: Console | None = None) -> None:
    _out(target).print(f"[bold green]{NO_SCREAMS}[/]")


def print_report(
    autopsy: Autopsy,
    target: Console | None = None,
    config: DetectorConfig | None = None,
) -> None:
    """
    Print the full analysis report.

    Sections with no entries are omitted; the header and closing remark are
    always printed.
    """
    out = _out(target)
    config = config or get_config()

    out.print(f"[bold]{REPORT_TITLE}[/]")
    out.print("=" * config.rule_width)

    if autopsy.missing:
        out.print()
        out.print(f"[bold red]{MISSING_HEADING}[/]")
        for name in autopsy.missing:
            out.print(f"  - {escape(name)}={escape(config.placeholder_value)}")

    if autopsy.misconfigured:
        out.print()
        out.print(f"[bold yellow]{MISCONFIGURED_HEADING}[/]")
        for name in autopsy.misconfigured:
            out.print(f"  - {escape(name)}")

    out.print()
    out.print(CLOSING_REMARK)
