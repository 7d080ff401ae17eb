from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import re

from third_mapping.constants import ADVANCING_THIRDS, SLOTS

THIRD_TOKEN_RE = re.compile(r"\b3[A-L]\b", flags=re.ASCII)
# Lookbehind keeps the letter of a "3E" token out of the group set.
GROUP_LETTER_RE = re.compile(r"(?<!\d)\b([A-L])\b", flags=re.ASCII)
STANDALONE_LETTER_RE = re.compile(r"\b([A-L])\b", flags=re.ASCII)


class TableParseError(ValueError):
    """A line looks like a table row but its advancing groups can't be resolved."""


@dataclass
class ParsedRow:
    key: str
    assignment: Dict[str, str]


def unique_in_order(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def find_third_tokens(text: str) -> List[str]:
    return THIRD_TOKEN_RE.findall(text)


def find_group_letters(text: str) -> List[str]:
    return GROUP_LETTER_RE.findall(text)


def find_group_letters_fallback(text: str) -> List[str]:
    """
    Same result as find_group_letters without relying on lookbehind:
    collect standalone letters, then drop any sitting right after a digit.
    """
    letters: List[str] = []
    for m in STANDALONE_LETTER_RE.finditer(text):
        start = m.start(1)
        if start > 0 and text[start - 1] in "0123456789":
            continue
        letters.append(m.group(1))
    return letters


def parse_line(line: str) -> Optional[ParsedRow]:
    """
    Parse one line of the pasted allocation table.

    A data line carries a row number, the 8 advancing groups and the 8 "3X"
    assignments in SLOTS order. Returns None for anything that isn't a data
    line (blank, headers, fewer than 8 "3X" tokens). Raises TableParseError
    when the 8 assignments are there but the group set can't be resolved.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    third_tokens = find_third_tokens(trimmed)
    if len(third_tokens) < ADVANCING_THIRDS:
        return None

    # earlier matches are row-number artifacts, the assignments come last
    thirds = third_tokens[-ADVANCING_THIRDS:]

    groups = unique_in_order(find_group_letters(trimmed))
    if len(groups) != ADVANCING_THIRDS:
        groups = unique_in_order(token[1] for token in thirds)

    if len(groups) != ADVANCING_THIRDS:
        raise TableParseError(f"Could not reliably parse groups from line: {line}")

    key = "".join(sorted(groups))
    assignment = dict(zip(SLOTS, thirds))
    return ParsedRow(key=key, assignment=assignment)
