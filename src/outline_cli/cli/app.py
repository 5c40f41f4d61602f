"""CLI application entry point and error boundary for outline-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~outline_cli.exceptions.OutlineCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here. argv becomes a
  :data:`~outline_cli.cli.commands.Command` and is handed to the router.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from outline_cli.cli import exit_codes
from outline_cli.cli.commands import Command, Doctor, DownloadDocument, ListDocuments, WhoAmI
from outline_cli.cli.console import configure_logging, console, escape
from outline_cli.config import load_settings
from outline_cli.core.document_service import DocumentService
from outline_cli.exceptions import DocumentNotFoundError, OutlineCliError
from outline_cli.infra.file_saver import FileDocumentSaver
from outline_cli.infra.outline_client import OutlineClient
from outline_cli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="outline-cli",
        description="List and download markdown documents from getOutline.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    list_parser = subparsers.add_parser(
        "list-documents",
        help="List documents that you have access to.",
    )
    list_parser.add_argument(
        "-o",
        "--mine-only",
        action="store_true",
        help="Only show documents you wrote.",
    )

    download_parser = subparsers.add_parser(
        "download-document",
        help="Fetch a document and save it as a markdown file.",
    )
    download_parser.add_argument(
        "--id",
        required=True,
        dest="document_id",
        help="ID of the document to download.",
    )
    download_parser.add_argument(
        "-f",
        "--file-name",
        default=None,
        help="Name of the file to create (.md is appended if missing).",
    )
    download_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write into (default: current directory).",
    )

    subparsers.add_parser("whoami", help="Show the user that owns the API token.")
    subparsers.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _to_command(args: argparse.Namespace) -> Command | None:
    """Convert parsed arguments into a :data:`Command`; ``None`` if absent."""
    if args.command == "list-documents":
        return ListDocuments(mine_only=args.mine_only)
    if args.command == "download-document":
        return DownloadDocument(
            id=args.document_id,
            file_name=args.file_name,
            output_dir=args.output_dir,
        )
    if args.command == "whoami":
        return WhoAmI()
    if args.command == "doctor":
        return Doctor()
    return None


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _execute(command: Command) -> int:
    """Wire infra + core for *command* and run it through the router."""
    if isinstance(command, Doctor):
        from outline_cli.cli.doctor import run_doctor

        return run_doctor()

    from outline_cli.cli.router import run_command

    settings = load_settings()
    with OutlineClient(settings) as client:
        return run_command(command, DocumentService(client), FileDocumentSaver())


def _exit_code_for(command: Command, exc: OutlineCliError) -> int:
    if isinstance(command, DownloadDocument):
        if isinstance(exc, DocumentNotFoundError):
            return exit_codes.NOT_FOUND
        return exit_codes.DOWNLOAD_FAILED
    return exit_codes.GENERAL_ERROR


def _report(exc: OutlineCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the outline-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    command = _to_command(args)
    if command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    try:
        return _execute(command)
    except OutlineCliError as exc:
        logger.debug("Command %r failed", command, exc_info=True)
        _report(exc)
        return _exit_code_for(command, exc)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
