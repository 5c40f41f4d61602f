"""Command dispatch — turns a :data:`Command` into service calls and output.

The router owns terminal output and the single filesystem write.  It
does not catch errors; :func:`outline_cli.cli.app.main` renders them and
picks the exit code.
"""

from __future__ import annotations

from collections.abc import Sequence

from outline_cli.cli import exit_codes
from outline_cli.cli.commands import Command, Doctor, DownloadDocument, ListDocuments, WhoAmI
from outline_cli.cli.console import console, escape
from outline_cli.core.document_service import DocumentService
from outline_cli.core.documents import (
    content_to_bytes,
    display_header,
    resolve_filename,
    summarize_for_display,
)
from outline_cli.core.models import DisplayRow
from outline_cli.core.protocols import DocumentSaver


def render_table(rows: Sequence[DisplayRow]) -> None:
    """Print the document table to stdout, header first."""
    print(display_header())
    for row in rows:
        print(row.render())


def _list_documents(command: ListDocuments, service: DocumentService) -> int:
    documents = service.list_documents(mine_only=command.mine_only)
    render_table(summarize_for_display(documents))
    if not documents:
        console.print("[dim]No documents found.[/dim]")
    return exit_codes.SUCCESS


def _download_document(
    command: DownloadDocument,
    service: DocumentService,
    saver: DocumentSaver,
) -> int:
    document = service.fetch_document(command.id)
    file_name = resolve_filename(document, command.file_name)
    path = saver.save(content_to_bytes(document), file_name, command.output_dir)
    console.print(f"[bold green]Document saved:[/bold green] {escape(str(path))}")
    return exit_codes.SUCCESS


def _whoami(service: DocumentService) -> int:
    user = service.current_user()
    console.print(f"Authenticated as [bold]{escape(user.name)}[/bold] (user ID {escape(user.id)})")
    return exit_codes.SUCCESS


def run_command(command: Command, service: DocumentService, saver: DocumentSaver) -> int:
    """Execute an API-backed *command* and return its exit code."""
    if isinstance(command, ListDocuments):
        return _list_documents(command, service)
    if isinstance(command, DownloadDocument):
        return _download_document(command, service, saver)
    if isinstance(command, WhoAmI):
        return _whoami(service)
    if isinstance(command, Doctor):
        raise TypeError("doctor does not talk to getOutline; run it via run_doctor()")
    raise TypeError(f"Unknown command: {command!r}")
