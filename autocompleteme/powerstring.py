"""String clean-up helpers for search queries."""

from __future__ import annotations

import re
import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_BLANKS = " \t"
_SPACE_RUN = re.compile(" {2,}")


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII letters in lower case."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters in upper case."""
    return text.translate(_TO_UPPER)


def remove_extra_space(text: str) -> str:
    """Strip leading and trailing blanks and collapse runs of spaces to one."""
    return _SPACE_RUN.sub(" ", text.lstrip(_BLANKS)).rstrip(_BLANKS)


def word_format(text: str) -> str:
    """Normalise spacing, lower-case, then capitalise the first letter of each word."""
    cleaned = to_lower(remove_extra_space(text))
    result = []
    cap_next = True
    for ch in cleaned:
        if cap_next and ch in string.ascii_letters:
            result.append(ch.upper())
            cap_next = False
            continue
        if ch == " ":
            cap_next = True
        result.append(ch)
    return "".join(result)