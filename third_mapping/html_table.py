from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from third_mapping.constants import ADVANCING_THIRDS
from third_mapping.parser import find_third_tokens

CELL_SEPARATOR = " | "


def extract_table_lines(page_source_html: str) -> List[str]:
    """
    Flatten the allocation table of a saved HTML page into text lines.

    Every <tr> becomes one line of its non-empty cell texts joined by " | ".
    Only rows carrying at least 8 "3X" tokens are kept.
    """
    soup = BeautifulSoup(page_source_html, "html.parser")

    lines: List[str] = []
    for tr in soup.find_all("tr"):
        cells = [cell.get_text(" ", strip=True) for cell in tr.find_all(["th", "td"])]
        line = CELL_SEPARATOR.join(c for c in cells if c)
        if len(find_third_tokens(line)) >= ADVANCING_THIRDS:
            lines.append(line)

    if not lines:
        raise ValueError("Could not locate any third-place allocation rows in the provided HTML.")
    return lines
