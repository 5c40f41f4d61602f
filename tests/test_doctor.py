"""Tests for the ``outline-cli doctor`` command (cli/doctor.py).

No network access; configuration comes from the isolated environment.

Coverage:
* Doctor returns SUCCESS when an API key is configured.
* Doctor returns GENERAL_ERROR when the key is missing or config is invalid.
* Individual check functions return correct tuples.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from outline_cli.cli import exit_codes
from outline_cli.cli.doctor import (
    _api_key_check,
    _base_url_check,
    _httpx_version_check,
    _mask,
    _python_version_check,
    _status_plain,
    run_doctor,
)
from outline_cli.config import Settings


class TestChecks:
    def test_python_row(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status

    def test_httpx_installed(self) -> None:
        label, _, status = _httpx_version_check()
        assert label == "httpx"
        assert "OK" in status

    @patch.dict("sys.modules", {"httpx": None})
    def test_httpx_missing(self) -> None:
        _, value, status = _httpx_version_check()
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    def test_api_key_masked(self) -> None:
        _, value, status = _api_key_check(Settings(api_key="ol_api_secret1234"))
        assert value.endswith("1234")
        assert "secret" not in value
        assert "OK" in status

    def test_api_key_missing(self) -> None:
        _, _, status = _api_key_check(Settings(api_key=None))
        assert "FAIL" in status

    def test_plain_http_base_url_warns(self) -> None:
        _, _, status = _base_url_check(Settings(base_url="http://localhost:3000/api"))
        assert "WARN" in status

    @pytest.mark.parametrize(
        ("secret", "expected"),
        [("abc", "***"), ("abcdefgh", "********efgh")],
    )
    def test_mask(self, secret: str, expected: str) -> None:
        assert _mask(secret) == expected

    @pytest.mark.parametrize(
        ("markup", "plain"),
        [("[green]OK[/green]", "OK"), ("[red]FAIL[/red]", "FAIL"), ("[yellow]WARN[/yellow]", "WARN")],
    )
    def test_status_plain(self, markup: str, plain: str) -> None:
        assert _status_plain(markup) == plain


class TestRunDoctor:
    def test_success_with_key(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GETOUTLINE_API_KEY", "ol_api_secret1234")

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "All checks passed." in err
        assert "secret" not in err

    def test_failure_without_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().err

    def test_invalid_configuration_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GETOUTLINE_TIMEOUT_SECONDS", "-1")
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GETOUTLINE_API_KEY", "ol_api_secret1234")

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "outline-cli doctor" in err
        assert "All checks passed." in err
