"""Komenda: plc check — sprawdza, czy wniosek wynika z przesłanek."""

from __future__ import annotations

import argparse
import dataclasses
import pathlib
import sys

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from plc._config import get_limits, get_sentinel
from plc._input import read_until_sentinel

console = Console(width=160)

EXIT_CODES: dict[str, int] = {
    "derived":      0,
    "not_derived":  2,
    "inconclusive": 3,
}


# ---------------------------------------------------------------------------
# Wyświetlanie
# ---------------------------------------------------------------------------

def _show_argument(argument) -> None:
    variables = argument.variables
    if variables:
        table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
        table.add_column("SYMBOL", style="bold cyan", no_wrap=True)
        table.add_column("ZDANIE")
        for symbol, text in variables.items():
            table.add_row(symbol, escape(text))
        console.print(table)

    console.print("[bold]Przesłanki:[/bold]")
    if not argument.premises:
        console.print("  [dim](brak)[/dim]")
    for i, premise in enumerate(argument.premises, start=1):
        console.print(f"  {i}. {premise}")
    console.print(f"[bold]Wniosek:[/bold] [cyan]{argument.conclusion}[/cyan]")


def _show_derivations(result) -> None:
    """Wyświetla fakty pochodne razem z regułą, która je dała."""
    if not result.derivations:
        console.print("\n[yellow]Brak faktów pochodnych.[/yellow]")
        return

    console.print("\n[bold]Fakty pochodne:[/bold]")
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",      style="dim", no_wrap=True)
    table.add_column("FAKT",   style="bold cyan", no_wrap=True)
    table.add_column("REGUŁA", no_wrap=True)
    table.add_column("Z",      no_wrap=False)
    for i, derivation in enumerate(result.derivations, start=1):
        table.add_row(
            str(i),
            str(derivation.fact),
            derivation.rule,
            f"{derivation.left}, {derivation.right}",
        )
    console.print(table)


def _show_verdict(result) -> None:
    from solver import Verdict

    if result.verdict == Verdict.DERIVED:
        console.print("\n[green]WNIOSEK WYNIKA[/green] z przesłanek")
    elif result.verdict == Verdict.NOT_DERIVED:
        console.print("\n[red]WNIOSEK NIE WYNIKA[/red] — saturacja nie dała wniosku")
    else:
        console.print("\n[yellow]NIEROZSTRZYGNIĘTE[/yellow] — przekroczono limit przeszukiwania")

    console.print(
        f"  [dim]{len(result.derivations)} faktów pochodnych, "
        f"{result.steps} par, {result.elapsed:.3f}s[/dim]"
    )


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def _read_text(args: argparse.Namespace, sentinel: str) -> str:
    if args.file:
        path = pathlib.Path(args.file)
        if not path.exists():
            console.print(f"[red]Brak pliku:[/red] {path}")
            raise SystemExit(1)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            console.print(f"[red]Błąd wejścia:[/red] plik {path} nie jest w UTF-8 ({e.reason})")
            raise SystemExit(1)

    interactive = sys.stdin.isatty()
    if interactive:
        console.print(
            f"Wpisz przesłanki, w ostatniej linii wniosek; "
            f"zakończ linią [bold]{sentinel}[/bold]."
        )
    return read_until_sentinel(
        sys.stdin,
        sentinel,
        prompt=(lambda: console.print(" > ", end="")) if interactive else None,
    )


def run(args: argparse.Namespace) -> None:
    from grammar import SentenceParseError
    from solver import Argument, EmptyArgumentError, rules_table

    try:
        limits   = get_limits()
        sentinel = get_sentinel()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    overrides = {
        name: value
        for name, value in (
            ("max_facts",   args.max_facts),
            ("max_steps",   args.max_steps),
            ("max_seconds", args.timeout),
        )
        if value is not None
    }
    limits = dataclasses.replace(limits, **overrides)

    text = _read_text(args, sentinel)

    try:
        argument = Argument.parse(text, strict=args.strict)
    except SentenceParseError as e:
        console.print(f"[red]Błąd parsowania zdania ({e.kind}):[/red] {escape(str(e))}")
        raise SystemExit(1)
    except EmptyArgumentError as e:
        console.print(f"[red]Błąd wejścia:[/red] {e}")
        raise SystemExit(1)

    _show_argument(argument)

    result = argument.search(limits, rules_table(with_conjunction=args.with_conjunction))

    if args.trace:
        _show_derivations(result)
    _show_verdict(result)

    code = EXIT_CODES[result.verdict]
    if code:
        raise SystemExit(code)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza, czy wniosek (ostatnia linia) wynika z przesłanek.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje rozumowanie z pliku albo interaktywnie ze stdin (do linii STOP),
parsuje każdą linię i uruchamia saturację reguł wnioskowania:
modus ponens, modus tollens, sylogizm hipotetyczny, sylogizm dysjunkcyjny,
rezolucja (opcjonalnie koniunkcja).

Gramatyka zdań (bez rozróżniania wielkości liter, w tej kolejności):
  X iff Y          → X ⟷ Y
  if X, then Y     → X → Y
  X or Y           → X ∨ Y
  X and Y          → X ^ Y
  not X            → ¬X   (symbol zmiennej = pierwsza litera klauzuli)

Kody wyjścia:
  0  wniosek wynika
  2  wniosek nie wynika
  3  nierozstrzygnięte (przekroczony limit)
  1  błąd wejścia / parsowania / konfiguracji

Zmienne środowiskowe (lub plik .env):
  PLC_MAX_FACTS, PLC_MAX_STEPS, PLC_TIMEOUT, PLC_SENTINEL

Przykłady:
  plc check --file modus_ponens.txt
  plc check --file argument.txt --trace
  plc check --file argument.txt --with-conjunction --max-facts 500
  plc check            (interaktywnie, zakończ linią STOP)
        """,
    )
    p.add_argument(
        "--file", "-f",
        metavar="PLIK",
        help="Plik tekstowy z rozumowaniem (domyślnie: stdin do linii STOP).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Zgłaszaj błąd dla klauzul z nierozpoznanym spójnikiem zamiast traktować je jako atomy.",
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Wyświetl wszystkie fakty pochodne wraz z regułą, która je dała.",
    )
    p.add_argument(
        "--with-conjunction",
        action="store_true",
        dest="with_conjunction",
        help="Dołącz regułę koniunkcji (uwaga: gwałtowny wzrost liczby faktów).",
    )
    p.add_argument(
        "--max-facts",
        type=int,
        metavar="N",
        dest="max_facts",
        help="Maks. liczba faktów na liście roboczej (domyślnie: PLC_MAX_FACTS lub 2000).",
    )
    p.add_argument(
        "--max-steps",
        type=int,
        metavar="N",
        dest="max_steps",
        help="Maks. liczba rozpatrzonych par faktów (domyślnie: PLC_MAX_STEPS lub 200000).",
    )
    p.add_argument(
        "--timeout",
        type=float,
        metavar="SEKUNDY",
        help="Limit czasu przeszukiwania w sekundach (domyślnie: PLC_TIMEOUT lub brak).",
    )
    p.set_defaults(func=run)
