# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Cell-level helpers for spreadsheet payloads.

Covers cell length limits, column letter conversion, duration formatting
and the locale-aware ordering key used for report rows.
"""

import logging
import unicodedata
from typing import Any, Tuple

logger = logging.getLogger(__name__)


def enforce_max_length(value: Any, max_length: int) -> str:
    """
    Convert a value to a cell string no longer than ``max_length``.

    The limit is counted in UTF-8 code units; a multi-byte character that
    would straddle the limit is dropped rather than split.

    Args:
        value: String, number or None
        max_length: Maximum cell length

    Returns:
        Truncated string, or an empty string for None and unsupported types

    Raises:
        ValueError: If max_length is not a non-negative integer
    """
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0:
        raise ValueError("max_length must be a non-negative integer")
    if value is None or isinstance(value, bool):
        return ""
    if not isinstance(value, (str, int, float)):
        logger.debug(f"Unsupported cell value type {type(value).__name__}, using empty string")
        return ""

    text = str(value)
    encoded = text.encode("utf-8")
    if len(encoded) <= max_length:
        return text
    return encoded[:max_length].decode("utf-8", errors="ignore")


def number_to_letter(number: int) -> str:
    """
    Convert a 0-based column index to its spreadsheet letter (0 -> A, 26 -> AA).

    Raises:
        TypeError: If number is not a non-negative integer
    """
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise TypeError("Column number must be a non-negative integer.")

    letters = ""
    number += 1
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def letter_to_number(letter: str) -> int:
    """
    Convert a spreadsheet column letter to its 0-based index (A -> 0, AA -> 26).

    Raises:
        TypeError: If letter is not a non-empty alphabetic string
    """
    if not isinstance(letter, str) or not letter.isalpha() or not letter.isascii():
        raise TypeError("Column letter must be a non-empty string of letters.")

    number = 0
    for char in letter.upper():
        number = number * 26 + (ord(char) - ord("A") + 1)
    return number - 1


def format_duration(duration_ms: Any) -> str:
    """
    Format a duration in milliseconds as ``minutes:seconds:milliseconds``.

    Args:
        duration_ms: Duration in milliseconds

    Returns:
        Formatted duration, or an empty string when no numeric duration is given
    """
    if duration_ms is None or isinstance(duration_ms, bool) or not isinstance(duration_ms, (int, float)):
        return ""

    duration_ms = int(duration_ms)
    minutes = duration_ms // 60000
    seconds = (duration_ms % 60000) // 1000
    milliseconds = duration_ms % 1000
    return f"{minutes}:{seconds}:{milliseconds}"


def locale_sort_key(text: str) -> Tuple[str, str, str]:
    """
    Build a sort key approximating locale collation.

    Accents and case are ignored first, then case is compared with lowercase
    ordered before uppercase, and finally accents break remaining ties.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return (base.casefold(), base.swapcase(), text)
