"""Interactive terminal front end for the fuzzy word list."""

from __future__ import annotations

import argparse
import contextlib
import sys
from typing import BinaryIO, Iterable, Iterator, Sequence, TextIO

from triefind.fuzzy import FuzzySearchList

DEFAULT_WORDS = ("hello", "hell", "heaven", "heavy", "hero", "puppy")
BACKSPACE = 127
CTRL_C = 3
CLEAR_SCREEN = "\033[2J\033[H"


def read_keys(stream: BinaryIO) -> Iterator[int]:
    """Yield bytes from ``stream`` one at a time, ending after Ctrl+C or at EOF."""
    while True:
        chunk = stream.read(1)
        if not chunk:
            return
        key = chunk[0]
        yield key
        if key == CTRL_C:
            return


def run(
    keys: Iterable[int],
    words: Iterable[str] = DEFAULT_WORDS,
    search_term: str = "h",
    out: TextIO | None = None,
) -> FuzzySearchList:
    """Feed key codes into a fuzzy search list and return it."""
    search = FuzzySearchList(words, search_term, out)
    for key in keys:
        if key == BACKSPACE:
            if search.search_term:
                search.remove_char()
        else:
            search.extend(chr(key))
    return search


@contextlib.contextmanager
def _raw_mode(stream: TextIO) -> Iterator[None]:
    if not stream.isatty():
        yield
        return
    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive search on standard input."""
    parser = argparse.ArgumentParser(description="Highlight words as a search term is typed.")
    parser.add_argument("words", nargs="*", help="words to search (default: a built-in list)")
    parser.add_argument("--term", default="h", help="initial search term")
    args = parser.parse_args(argv)

    words = args.words or DEFAULT_WORDS
    stdin = sys.stdin
    with _raw_mode(stdin):
        sys.stdout.write(CLEAR_SCREEN)
        run(read_keys(stdin.buffer), words, args.term, sys.stdout)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())