"""Infrastructure: write downloaded documents to the local filesystem.

Rules
-----
* Never overwrite an existing file.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from outline_cli.exceptions import DocumentSaveError, TargetExistsError

logger = logging.getLogger(__name__)


class FileDocumentSaver:
    """Concrete :class:`~outline_cli.core.protocols.DocumentSaver`."""

    def save(self, content: bytes, file_name: str, directory: Path) -> Path:
        """Create ``directory / file_name`` exclusively and write *content*.

        Raises
        ------
        TargetExistsError
            When the target already exists.
        DocumentSaveError
            When the directory is missing or the write fails.
        """
        target = directory / file_name
        try:
            # "x" fails atomically if the file exists.
            with target.open("xb") as handle:
                handle.write(content)
        except FileExistsError as exc:
            raise TargetExistsError(str(target)) from exc
        except OSError as exc:
            raise DocumentSaveError(
                f"Could not save the document to {target}: {exc.strerror or exc}",
            ) from exc

        logger.debug("Wrote %d bytes to %s", len(content), target)
        return target
