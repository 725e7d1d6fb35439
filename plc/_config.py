"""Konfiguracja limitów wyszukiwania — przez zmienne środowiskowe (opcjonalnie plik .env)."""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

from solver import SearchLimits

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


def get_limits() -> SearchLimits:
    timeout = os.getenv("PLC_TIMEOUT")
    return SearchLimits(
        max_facts   = int(os.getenv("PLC_MAX_FACTS", "2000")),
        max_steps   = int(os.getenv("PLC_MAX_STEPS", "200000")),
        max_seconds = float(timeout) if timeout else None,
    )


def get_sentinel() -> str:
    return os.getenv("PLC_SENTINEL", "STOP")
