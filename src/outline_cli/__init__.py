"""outline-cli — list and download getOutline documents from the terminal.

Built on httpx with a strict layered architecture.
"""

from outline_cli.version import __version__

__all__: list[str] = ["__version__"]
