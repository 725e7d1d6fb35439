import io
import sys

import pytest

from plc._config import get_limits, get_sentinel
from plc._input import read_until_sentinel
from plc.cli import main


def write(tmp_path, text: str) -> str:
    path = tmp_path / "argument.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# read_until_sentinel
# ---------------------------------------------------------------------------

def test_reader_stops_at_sentinel():
    stream = io.StringIO("if p, then q\np\nq\nSTOP\nignored\n")
    assert read_until_sentinel(stream) == "if p, then q\np\nq"


def test_reader_stops_at_eof_and_handles_crlf():
    assert read_until_sentinel(io.StringIO("p\r\nq\r\n")) == "p\nq"


def test_reader_custom_sentinel_and_prompt():
    calls = []
    stream = io.StringIO("p\nEND\n")

    text = read_until_sentinel(stream, "END", prompt=lambda: calls.append(1))

    assert text == "p"
    assert len(calls) == 2


def test_reader_sentinel_must_match_whole_line():
    assert read_until_sentinel(io.StringIO("STOP here\nSTOP\n")) == "STOP here"


# ---------------------------------------------------------------------------
# Konfiguracja
# ---------------------------------------------------------------------------

def test_limits_from_environment(monkeypatch):
    monkeypatch.setenv("PLC_MAX_FACTS", "10")
    monkeypatch.setenv("PLC_MAX_STEPS", "20")
    monkeypatch.setenv("PLC_TIMEOUT", "2.5")
    monkeypatch.setenv("PLC_SENTINEL", "KONIEC")

    limits = get_limits()

    assert (limits.max_facts, limits.max_steps, limits.max_seconds) == (10, 20, 2.5)
    assert get_sentinel() == "KONIEC"


def test_limit_defaults(monkeypatch):
    for name in ("PLC_MAX_FACTS", "PLC_MAX_STEPS", "PLC_TIMEOUT", "PLC_SENTINEL"):
        monkeypatch.delenv(name, raising=False)

    limits = get_limits()

    assert (limits.max_facts, limits.max_steps, limits.max_seconds) == (2000, 200_000, None)
    assert get_sentinel() == "STOP"


# ---------------------------------------------------------------------------
# plc check / plc parse
# ---------------------------------------------------------------------------

def test_check_derived(tmp_path, capsys):
    main(["check", "--file", write(tmp_path, "if p, then q\np\nq\n")])

    out = capsys.readouterr().out
    assert "WNIOSEK WYNIKA" in out
    assert "(p → q)" in out


def test_check_not_derived_exit_code(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", write(tmp_path, "p\nq\nr\n")])

    assert exc_info.value.code == 2
    assert "WNIOSEK NIE WYNIKA" in capsys.readouterr().out


def test_check_inconclusive_exit_code(tmp_path, capsys):
    path = write(tmp_path, "if p, then q\nif q, then r\nif r, then s\nt\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", path, "--max-steps", "1"])

    assert exc_info.value.code == 3
    assert "NIEROZSTRZYGNIĘTE" in capsys.readouterr().out


def test_check_trace_lists_rules(tmp_path, capsys):
    main(["check", "--file", write(tmp_path, "p or q\nnot p\nq\n"), "--trace"])
    assert "disjunctive syllogism" in capsys.readouterr().out


def test_check_timeout_exit_code(tmp_path, capsys):
    path = write(tmp_path, "if p, then q\nif q, then r\np\nr\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", path, "--timeout=-1"])

    assert exc_info.value.code == 3
    assert "NIEROZSTRZYGNIĘTE" in capsys.readouterr().out


def test_check_with_conjunction(tmp_path, capsys):
    main(["check", "--file", write(tmp_path, "p\nq\np and q\n"), "--with-conjunction"])
    assert "WNIOSEK WYNIKA" in capsys.readouterr().out


@pytest.mark.parametrize(
    "text, extra",
    [
        ("\n\n", []),
        ("p xor q\nq\n", ["--strict"]),
    ],
)
def test_check_input_errors(tmp_path, capsys, text, extra):
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", write(tmp_path, text), *extra])
    assert exc_info.value.code == 1


def test_check_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", str(tmp_path / "brak.txt")])
    assert exc_info.value.code == 1


def test_check_file_not_utf8(tmp_path, capsys):
    path = tmp_path / "argument.txt"
    path.write_bytes(b"if p, then q\n\xff\xfe\xfa\nq\n")

    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", str(path)])

    assert exc_info.value.code == 1
    assert "Błąd wejścia" in capsys.readouterr().out


def test_check_bad_configuration(tmp_path, monkeypatch):
    monkeypatch.setenv("PLC_MAX_FACTS", "dużo")
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--file", write(tmp_path, "p\np\n")])
    assert exc_info.value.code == 1


def test_check_reads_stdin_until_stop(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("if p, then q\nnot q\nnot p\nSTOP\n"))
    main(["check"])
    assert "WNIOSEK WYNIKA" in capsys.readouterr().out


def test_parse_command(capsys):
    main(["parse", "if a, then b", "not c"])

    out = capsys.readouterr().out
    assert "(a → b)" in out
    assert "imply" in out
    assert "¬c" in out


def test_parse_command_strict_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["parse", "p xor q", "--strict"])
    assert exc_info.value.code == 1
