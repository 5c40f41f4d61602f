"""``outline-cli doctor`` — environment diagnostics command.

Gathers runtime and configuration information and renders a Rich table
summarising whether outline-cli is ready to talk to getOutline.

This module lives in the CLI layer. It renders via Rich and never
contacts the API.
"""

from __future__ import annotations

import platform
import sys

from outline_cli.cli import exit_codes
from outline_cli.cli.console import console
from outline_cli.config import Settings, load_settings
from outline_cli.exceptions import ConfigurationError
from outline_cli.version import __version__

OK: str = "[green]OK[/green]"
WARN: str = "[yellow]WARN[/yellow]"
FAIL: str = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _httpx_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the httpx row."""
    try:
        import httpx
    except ImportError:
        return "httpx", "NOT INSTALLED", FAIL
    return "httpx", str(getattr(httpx, "__version__", "unknown")), OK


def _outline_cli_version_check() -> tuple[str, str, str]:
    return "outline-cli", __version__, OK


def _mask(secret: str) -> str:
    """Show only the last four characters of *secret*."""
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * 8 + secret[-4:]


def _api_key_check(settings: Settings) -> tuple[str, str, str]:
    """Return (label, value, status) for the API key row."""
    try:
        key = settings.require_api_key()
    except ConfigurationError:
        return "API key", "GETOUTLINE_API_KEY not set", FAIL
    return "API key", _mask(key), OK


def _base_url_check(settings: Settings) -> tuple[str, str, str]:
    status = OK if settings.base_url.startswith("https://") else WARN
    return "API URL", settings.base_url, status


def _collect_checks() -> list[tuple[str, str, str]]:
    checks = [
        _outline_cli_version_check(),
        _python_version_check(),
        _httpx_version_check(),
    ]
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        checks.append(("Configuration", str(exc), FAIL))
        return checks
    checks.append(_api_key_check(settings))
    checks.append(_base_url_check(settings))
    return checks


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\noutline-cli doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<38} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<38} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = _collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(
            title="outline-cli doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
