"""Tests for FileDocumentSaver (infra/file_saver.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from outline_cli.exceptions import DocumentSaveError, TargetExistsError
from outline_cli.infra.file_saver import FileDocumentSaver


class TestFileDocumentSaver:
    def test_writes_exact_bytes(self, tmp_path: Path) -> None:
        path = FileDocumentSaver().save(b"# Title\nHello", "Title.md", tmp_path)

        assert path == tmp_path / "Title.md"
        assert path.read_bytes() == b"# Title\nHello"

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        existing = tmp_path / "Title.md"
        existing.write_bytes(b"original")

        with pytest.raises(TargetExistsError) as exc_info:
            FileDocumentSaver().save(b"new", "Title.md", tmp_path)

        assert existing.read_bytes() == b"original"
        assert exc_info.value.hint is not None
        assert "--file-name" in exc_info.value.hint

    def test_missing_directory_is_save_error(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentSaveError) as exc_info:
            FileDocumentSaver().save(b"x", "a.md", tmp_path / "nope")
        assert not isinstance(exc_info.value, TargetExistsError)
