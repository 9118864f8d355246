"""Incremental subsequence matching with terminal highlighting."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, TextIO


class Color(str, Enum):
    """ANSI colour escape sequences."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    RESET = "\033[0m"


def highlight(word: str, match_indexes: Iterable[int]) -> str:
    """Return ``word`` with the letters at ``match_indexes`` coloured green."""
    matched = set(match_indexes)
    return "".join(
        f"{Color.GREEN.value}{char}{Color.RESET.value}" if index in matched else char
        for index, char in enumerate(word)
    )


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


@dataclass
class WordSearchState:
    """How far one word has matched the search term so far."""

    word: str
    upto: int = 0
    match_indexes: list[int] = field(default_factory=list)

    def search_and_highlight(self, search_term: str, start: int = 0, out: TextIO | None = None) -> None:
        """Match further letters of ``search_term`` from ``start`` on and print the word."""
        for offset, char in enumerate(self.word[start:]):
            if self.upto < len(search_term) and search_term[self.upto] == char:
                self.match_indexes.append(offset + start)
                self.upto += 1
        _stream(out).write(highlight(self.word, self.match_indexes) + "\r\n")

    def on_remove_char(self, letter_removed: str) -> None:
        """Drop the last match if it was for the letter just removed from the term."""
        if not self.match_indexes:
            if self.upto != 0:
                raise RuntimeError(f"word {self.word!r} has progress but no matches")
            return
        if letter_removed == self.word[self.match_indexes[-1]]:
            self.match_indexes.pop()
            self.upto -= 1

    def on_search_term_extended(self, search_term: str, out: TextIO | None = None) -> None:
        """Continue matching after the search term grew."""
        self.search_and_highlight(search_term, len(self.match_indexes), out)


class FuzzySearchList:
    """A list of words matched as a group against a growing search term."""

    def __init__(self, words: Iterable[str] = (), search_term: str = "", out: TextIO | None = None) -> None:
        self.search_term = search_term
        self.out = out
        self.words = [WordSearchState(word) for word in words]
        self.search_and_highlight()

    def search_and_highlight(self) -> None:
        """Match every word against the whole search term from the start."""
        for state in self.words:
            state.search_and_highlight(self.search_term, 0, self.out)

    def extend(self, text: str) -> None:
        """Append ``text`` to the search term and update every word."""
        self.search_term += text
        for state in self.words:
            state.on_search_term_extended(self.search_term, self.out)

    def add_word(self, word: str) -> None:
        """Add ``word`` and match it against the current search term."""
        state = WordSearchState(word)
        state.search_and_highlight(self.search_term, 0, self.out)
        self.words.append(state)

    def remove_char(self) -> None:
        """Remove the last letter of the search term; best matches go last."""
        if not self.search_term:
            raise IndexError("search term is empty")
        removed = self.search_term[-1]
        for state in self.words:
            state.on_remove_char(removed)
        self.search_term = self.search_term[:-1]
        self.words.sort(key=lambda state: state.upto)
        for state in self.words:
            state.on_search_term_extended(self.search_term, self.out)