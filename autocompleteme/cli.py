"""Interactive command-line search over a file of weighted queries."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence

from .engine import Autocomplete
from .powerstring import word_format
from .term import Term

PROG = "autocompleteme"
GREETING = (
    "Enjoy the Auto-complete Me search engine!\n"
    'Please input the search query (type "exit" to quit): '
)
FAREWELL = "Thank you for using the Auto-complete feature!"
NO_MATCH = "No matched query!"
EXIT_WORD = "Exit"

_LINE = re.compile(r"\s*([+-]?\d+)\s*(.*)", re.DOTALL)
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def load_terms(lines: Iterable[str]) -> Iterator[Term]:
    """Yield a term for each ``<weight> <query>`` line.

    Blank lines and lines without a query are skipped; a line that does
    not start with an integer weight raises ``ValueError``.
    """
    for number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        match = _LINE.fullmatch(text)
        if match is None:
            raise ValueError(f"line {number}: expected a weight followed by a query")
        weight, query = match.groups()
        if query:
            yield Term(query, int(weight))


def _parse_count(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(text)
    return int(match.group(1))


def _read_prefix() -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    return word_format(line.rstrip("\r\n"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive search; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {PROG} <filename> <number>")
        return 1

    filename, count_text = args
    try:
        with open(filename, encoding="utf-8", errors="replace") as infile:
            terms = list(load_terms(infile))
    except OSError:
        print(f"Cannot open the file named {filename}")
        return 2

    try:
        count = _parse_count(count_text)
    except ValueError:
        print("Invalid input! Please provide an integer.")
        return 3
    if count < 1:
        print("Please provide a positive number of matching terms!")
        return 3

    engine = Autocomplete()
    for term in terms:
        engine.insert(term)
    engine.sort()

    print(GREETING)
    prefix = _read_prefix()
    while prefix is not None and prefix != EXIT_WORD:
        matches = engine.all_matches(prefix)
        if len(matches) == 0:
            print(NO_MATCH)
        else:
            if count > len(matches):
                print(
                    "Requested number of matches is greater than the number of "
                    f"found matches. Printing {len(matches)} matches."
                )
            for term in list(matches)[:count]:
                print(term)
        print(GREETING)
        prefix = _read_prefix()
    print(FAREWELL)
    return 0


if __name__ == "__main__":
    sys.exit(main())