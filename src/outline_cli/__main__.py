"""Allow ``python -m outline_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m outline_cli`` behaves identically to the ``outline-cli``
console script.
"""

from __future__ import annotations

from outline_cli.cli.app import cli

if __name__ == "__main__":
    cli()
