import io
import sys

from triefind.cli import CLEAR_SCREEN, DEFAULT_WORDS, main, read_keys, run
from triefind.fuzzy import Color


def test_read_keys_stops_after_ctrl_c():
    assert list(read_keys(io.BytesIO(b"ab\x03cd"))) == [ord("a"), ord("b"), 3]


def test_read_keys_stops_at_eof():
    assert list(read_keys(io.BytesIO(b"xy"))) == [ord("x"), ord("y")]


def test_run_extends_term():
    search = run([ord("e"), ord("l")], ["hello", "hero"], "h", io.StringIO())
    assert search.search_term == "hel"
    by_word = {s.word: s.upto for s in search.words}
    assert by_word["hello"] == 3
    assert by_word["hero"] == 2


def test_run_backspace_removes_char():
    search = run([ord("e"), 127], ["hello"], "h", io.StringIO())
    assert search.search_term == "h"
    assert search.words[0].upto == 1


def test_run_backspace_on_empty_term_is_ignored():
    search = run([127], ["hello"], "", io.StringIO())
    assert search.search_term == ""


def test_run_uses_default_words():
    search = run([], out=io.StringIO())
    assert [s.word for s in search.words] == list(DEFAULT_WORDS)
    assert search.search_term == "h"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"e")))
    assert main(["hello", "--term", "h"]) == 0
    output = capsys.readouterr().out
    assert output.startswith(CLEAR_SCREEN)
    assert f"{Color.GREEN.value}e{Color.RESET.value}" in output