"""qiwi-cli entry point."""

import sys

from .app import build_parser, run_cli


def main() -> None:
    sys.exit(run_cli())


__all__ = [
    "build_parser",
    "main",
    "run_cli",
]
