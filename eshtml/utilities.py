"""
# EsHTML: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Iterable


def compute_line_and_column(string: str, offset: int) -> tuple[int, int]:
    """
    Compute the 1-based line and column numbers of an offset into a string.
    """
    line_number = string.count('\n', 0, offset) + 1
    line_start_offset = string.rfind('\n', 0, offset) + 1
    column_number = offset - line_start_offset + 1

    return line_number, column_number


def sort_longest_first(tokens: Iterable[str]) -> list[str]:
    """
    Sort tokens by descending length.

    The sort is stable, so tokens of equal length keep their declaration order.
    """
    return sorted(tokens, key=len, reverse=True)


def build_alternation_regex(tokens: Iterable[str]) -> str:
    """
    Build a regex alternation that tries longer tokens before shorter ones.

    For example, `['ta', 'tamaño', 'e1']` gives `tamaño|ta|e1`,
    so that `ta` can never match the leading characters of `tamaño`.
    """
    return '|'.join(
        re.escape(token)
        for token in sort_longest_first(tokens)
    )
