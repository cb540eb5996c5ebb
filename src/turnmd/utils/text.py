#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/utils/text.py
"""Text utilities for assembling Markdown output.

Nested block elements each ask for blank-line separation from their
siblings. Concatenating their own leading and trailing newlines would
compound into several blank lines, so fragments are merged with
:func:`join_fragments`, which keeps the longer newline run and caps it at
one blank line.
"""

from __future__ import annotations

import re

_LEADING_OUTPUT_WHITESPACE = re.compile(r"^[\t\r\n]+")
_TRAILING_OUTPUT_WHITESPACE = re.compile(r"[\t\r\n\s]+$")


def _trailing_newlines(text: str) -> str:
    return text[len(text.rstrip("\n")) :]


def _leading_newlines(text: str) -> str:
    return text[: len(text) - len(text.lstrip("\n"))]


def separating_newlines(first: str, second: str) -> str:
    """Return the newline run that belongs between two fragments.

    Parameters
    ----------
    first : str
        Fragment on the left
    second : str
        Fragment on the right

    Returns
    -------
    str
        The longer of ``first``'s trailing and ``second``'s leading newline
        runs, capped at two newlines

    """
    newlines = max(_trailing_newlines(first), _leading_newlines(second), key=len)
    return newlines if len(newlines) < 2 else "\n\n"


def join_fragments(first: str, second: str) -> str:
    r"""Merge two output fragments with the correct newline separation.

    Parameters
    ----------
    first : str
        Accumulated output so far
    second : str
        Fragment to append

    Returns
    -------
    str
        ``first`` without its trailing newlines, the separator from
        :func:`separating_newlines`, then ``second`` without its leading
        newlines

    Examples
    --------
        >>> join_fragments("a\n\n", "\nb")
        'a\n\nb'
        >>> join_fragments("a", "b")
        'ab'

    """
    separator = separating_newlines(first, second)
    return first.rstrip("\n") + separator + second.lstrip("\n")


def trim_output(text: str) -> str:
    """Strip leading tab/CR/LF runs and trailing whitespace from final output."""
    text = _LEADING_OUTPUT_WHITESPACE.sub("", text)
    return _TRAILING_OUTPUT_WHITESPACE.sub("", text)


def strip_outer_newlines(text: str) -> str:
    """Remove every leading and trailing newline."""
    return text.strip("\n")


def indent_lines(text: str, prefix: str) -> str:
    r"""Insert ``prefix`` after every newline in ``text``.

    The first line is left alone; callers prepend their own marker.

    Examples
    --------
        >>> indent_lines("a\nb", "    ")
        'a\n    b'

    """
    return text.replace("\n", "\n" + prefix)


def longest_run(text: str, character: str) -> int:
    """Length of the longest consecutive run of ``character`` in ``text``."""
    if len(character) != 1:
        raise ValueError(f"character must be a single character, got {character!r}")
    longest = 0
    current = 0
    for char in text:
        if char == character:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


__all__ = [
    "join_fragments",
    "separating_newlines",
    "trim_output",
    "strip_outer_newlines",
    "indent_lines",
    "longest_run",
]
