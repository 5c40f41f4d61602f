"""Infrastructure layer — external system integration.

This layer wraps all interaction with the getOutline HTTP API and the
local filesystem.  Every raw third-party exception must be caught here
and re-raised as a :class:`~outline_cli.exceptions.OutlineCliError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from outline_cli.infra.file_saver import FileDocumentSaver
from outline_cli.infra.outline_client import OutlineClient

__all__: list[str] = [
    "FileDocumentSaver",
    "OutlineClient",
]
