"""Komenda: plc parse — pokazuje, jak parser rozumie pojedyncze zdania."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

console = Console(width=160)


def run(args: argparse.Namespace) -> None:
    from grammar import SentenceParseError, parse_sentence

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("ZDANIE",    no_wrap=False, max_width=60)
    table.add_column("SPÓJNIK",   style="yellow", no_wrap=True)
    table.add_column("WYRAŻENIE", style="bold cyan", no_wrap=True)

    failed = False
    for sentence in args.sentence:
        try:
            expression = parse_sentence(sentence, strict=args.strict)
        except SentenceParseError as e:
            console.print(f"[red]Błąd parsowania ({e.kind}):[/red] {escape(str(e))}")
            failed = True
            continue
        connective = "atom" if expression.degrade() is not None else str(expression.connective)
        table.add_row(escape(sentence), connective, str(expression))

    if table.row_count:
        console.print(table)
    if failed:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje zdania i wyświetla ich postać symboliczną.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje każde podane zdanie tą samą gramatyką co plc check
i wyświetla spójnik główny oraz wyrażenie.

Przykłady:
  plc parse "if it rains, then the street is wet"
  plc parse "p or q" "not p" --strict
        """,
    )
    p.add_argument(
        "sentence",
        nargs="+",
        metavar="ZDANIE",
        help="Zdanie do sparsowania (można podać kilka).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Zgłaszaj błąd dla klauzul z nierozpoznanym spójnikiem.",
    )
    p.set_defaults(func=run)
