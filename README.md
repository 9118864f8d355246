# triefind

Two small text-search tools and a terminal command built on one of them:

- **`triefind.trie.Trie`** is a prefix tree. It looks up exact words, checks
  prefixes and lists completions. It can also search forgivingly by skipping a
  limited number of stray letters in the query.
- **`triefind.fuzzy.FuzzySearchList`** is an incremental fuzzy (subsequence)
  matcher. Each time the search term grows or shrinks, every word is written out
  again with its matched letters highlighted in green.
- **`triefind`** is a command that runs the fuzzy matcher interactively on the
  keys you type.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install with `pip install .[test]` and then run `pytest`.

## Using the trie

```python
from triefind.trie import Trie

trie = Trie()
for word in ("apple", "application", "app"):
    trie.insert(word)

trie.contains_word("app")        # True
trie.contains_prefix("appl")     # True
sorted(trie.search("app"))       # ['app', 'apple', 'application']

# Allow up to one letter in the query that leads nowhere in the trie
trie.search_discarding_extra_letters("apfple", 1)   # ['apple']
trie.search_discarding_extra_letters("apffple", 1)  # []
```

`search` returns the stored words that start with the query, in breadth-first
order, so shorter words come first. It returns an empty list when no stored
word has that prefix.

`search_discarding_extra_letters(word, max_mistakes)` walks the query letter by
letter. A letter with no matching branch is dropped and counted as a mistake.
Once there are more than `max_mistakes` mistakes the result is an empty list.
Otherwise the result is every word below the letters that were kept.

Each node of the tree is a `triefind.trie.Node`. `Node.words_below(prefix)`
lists the words stored at or under a node, and `Node.is_child_of(other)` tells
whether a node hangs directly below another.

## Incremental fuzzy search

```python
import io
from triefind.fuzzy import FuzzySearchList

out = io.StringIO()
search = FuzzySearchList(["hello", "help", "world"], "", out)
search.extend("hel")   # letters matched in order are highlighted
search.remove_char()   # the term is now "he"
print(out.getvalue())
```

A word matches the next letter of the search term when that letter appears
later in the word than the previous match. Every word's state
(`WordSearchState`) keeps `upto`, the number of search-term letters matched so
far, and `match_indexes`, the positions in the word where they matched.

- `FuzzySearchList(words, search_term, out)` matches every word against the
  starting term and writes each one out. If `out` is `None`, output goes to
  standard output.
- `extend(text)` appends to the search term and continues matching.
- `add_word(word)` matches a new word against the current term and adds it.
- `remove_char()` removes the last letter of the term. It undoes a word's last
  match if that match was for the removed letter, sorts the words so that those
  with the most matched letters come last, and writes them all out again. It
  raises `IndexError` if the term is already empty.

Every written line ends with `\r\n`, so the output stays readable when the
terminal is in raw mode. `triefind.fuzzy.highlight(word, match_indexes)`
returns a word with the given positions wrapped in the ANSI colour codes from
`triefind.fuzzy.Color`.

## Interactive command

```
triefind
```

The command clears the screen and reads standard input one key at a time. When
standard input is a terminal, it first puts the terminal into raw mode and
restores it on exit. It starts with the words `hello`, `hell`, `heaven`,
`heavy`, `hero` and `puppy` and the search term `h`. Every key you type is
added to the search term. Backspace removes the last letter, and does nothing
when the term is empty. The highlighted list is written out again after every
key. Input stops at Ctrl+C or at the end of input.

You can give your own word list and starting term:

```
triefind --term he apple apricot banana
```

The same loop can be driven from code. `triefind.cli.run(keys, words,
search_term, out)` takes key codes as integers and returns the resulting
`FuzzySearchList`. `triefind.cli.read_keys(stream)` yields the bytes of a binary
stream one at a time.

## What it does not do

The interactive command and the trie are separate: the command highlights
fuzzy matches but does not use the trie for completion. The command also does
not narrow or hide the list. Every word is always shown, whether or not it
matches.