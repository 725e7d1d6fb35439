"""Wczytywanie rozumowania linia po linii aż do linii-wartownika (domyślnie STOP)."""

from __future__ import annotations

from typing import Callable, TextIO


def read_until_sentinel(
    stream:   TextIO,
    sentinel: str = "STOP",
    prompt:   Callable[[], None] | None = None,
) -> str:
    """
    Zbiera linie ze stream do linii równej sentinel (bez znaku końca linii)
    albo do EOF. Zwraca je jako jeden tekst rozdzielony '\\n'.

    prompt — opcjonalna funkcja wywoływana przed każdą linią (np. " > ").
    """
    lines: list[str] = []
    while True:
        if prompt is not None:
            prompt()
        line = stream.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line == sentinel:
            break
        lines.append(line)
    return "\n".join(lines)
