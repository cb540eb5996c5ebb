#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/utils/escape.py
"""Markdown escaping for literal text runs.

Text taken from the HTML tree may contain characters that Markdown would
read as syntax. :func:`escape_markdown` inserts a backslash in front of
those characters and leaves everything else alone.

The substitutions run in a fixed order. Block-level markers (thematic
breaks, list bullets, blockquotes) are positional and are matched line by
line; emphasis, code spans and link brackets are delimiter pairs and are
matched anywhere. Later substitutions must not be reordered ahead of
earlier ones.

"""

from __future__ import annotations

import re
from typing import Callable

# Lines made only of 3+ `-`, `*` or `_`, optionally separated by spaces
_HR_LINE = re.compile(r"^([-*_] *){3,}$", re.MULTILINE)

_ORDERED_LIST_MARKER = re.compile(r"^(\W* {0,3})([0-9]+)\. ", re.MULTILINE)

_BULLET_LIST_MARKER = re.compile(r"^([^\\\w]*)([*+-]) ", re.MULTILINE)

_BLOCKQUOTE_MARKER = re.compile(r"^(\W* {0,3})> ", re.MULTILINE)

# `\W` admits `*`, so a span opened by `*` plus a word character runs to the
# last asterisk in the text. Same spans as \*{1,2}([^\W*]+\W*)+\*{1,2}.
_STAR_SPAN = re.compile(r"\*{1,2}\w[\s\S]*\*")

# `\W` excludes `_`, so the span ends at the next underscore run.
# Same spans as _{1,2}([^\W_]+\W*)+_{1,2}.
_UNDERSCORE_SPAN = re.compile(r"_{1,2}[^\W_][^_]*_{1,2}")

# Same spans as `([^\W`]+\W*)+`
_BACKTICK_SPAN = re.compile(r"`\w[\s\S]*`")

_LINK_BRACKETS = re.compile(r"\[([^\]]*)\]")


def _escape_all(character: str) -> Callable[[re.Match[str]], str]:
    def replace(match: re.Match[str]) -> str:
        return match.group(0).replace(character, "\\" + character)

    return replace


def _escape_hr(match: re.Match[str]) -> str:
    # group(1) holds the last repetition; only that character is escaped
    character = match.group(1)
    return match.group(0).replace(character, "\\" + character)


def escape_markdown(text: str) -> str:
    r"""Escape Markdown syntax in a run of literal text.

    Parameters
    ----------
    text : str
        Text content of a single text node

    Returns
    -------
    str
        Text with a backslash inserted before Markdown-significant syntax

    Examples
    --------
        >>> escape_markdown("* item")
        '\\* item'
        >>> escape_markdown("1. item")
        '1\\. item'
        >>> escape_markdown("[label]")
        '\\[label\\]'

    """
    if not text:
        return text

    text = _HR_LINE.sub(_escape_hr, text)
    text = _ORDERED_LIST_MARKER.sub(r"\1\2\\. ", text)
    text = _BULLET_LIST_MARKER.sub(r"\1\\\2 ", text)
    text = _BLOCKQUOTE_MARKER.sub(r"\1\\> ", text)
    text = _STAR_SPAN.sub(_escape_all("*"), text)
    text = _UNDERSCORE_SPAN.sub(_escape_all("_"), text)
    text = _BACKTICK_SPAN.sub(_escape_all("`"), text)
    text = _LINK_BRACKETS.sub(r"\\[\1\\]", text)
    return text


__all__ = ["escape_markdown"]
