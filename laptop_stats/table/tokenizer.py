from __future__ import annotations

import re

"""Best-effort quoted CSV line tokenizer.

A comma is a split point only when an even number of double quotes follows it
on the same line, i.e. when it lies outside a quoted span. One leading and one
trailing quote are stripped from each cell, then surrounding whitespace.

Known limitation: escaped quotes inside a quoted field (``""``) are not
unescaped to a single quote.
"""

__all__ = [
    "DELIMITER",
    "QUOTE",
    "tokenize_row",
]

DELIMITER = ","
QUOTE = '"'

_SPLIT = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')
_SURROUNDING_QUOTE = re.compile(r'^"|"$')


def tokenize_row(line: str) -> list[str]:
    """Split one line into cell strings.

    >>> tokenize_row('A,"B,C",D')
    ['A', 'B,C', 'D']
    """
    return [_SURROUNDING_QUOTE.sub("", cell).strip() for cell in _SPLIT.split(line)]
