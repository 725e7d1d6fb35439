"""
plc — narzędzie CLI do sprawdzania rozumowań w logice zdań.

Użycie:
  plc <komenda> [opcje]

Komendy:
  check   Sprawdza, czy wniosek (ostatnia linia) wynika z przesłanek.
  parse   Parsuje zdania i wyświetla ich postać symboliczną.
"""

from __future__ import annotations

import argparse
import sys

from plc.commands import check as cmd_check
from plc.commands import parse as cmd_parse

VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plc",
        description="PropCheck — sprawdzanie rozumowań w logice zdań.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"plc {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_check.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby symbole
    # spójników (¬ ∨ → ⟷) i polskie znaki były wypisywane poprawnie.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
