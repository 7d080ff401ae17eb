from pathlib import Path
from typing import Callable, List

import pytest

from third_mapping.combinations import expected_combinations
from third_mapping.constants import INPUT_FILENAME


def _table_line(number: int, combo: str) -> str:
    shift = number % len(combo)
    thirds = combo[shift:] + combo[:shift]
    return f"{number} | {' '.join(combo)} | {' '.join('3' + g for g in thirds)}"


@pytest.fixture
def table_lines() -> List[str]:
    """All 495 rows, laid out the way the pasted table reads."""
    return [_table_line(i, combo) for i, combo in enumerate(expected_combinations(), start=1)]


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[[List[str]], Path]:
    def _write(lines: List[str], newline: str = "\n") -> Path:
        path = tmp_path / INPUT_FILENAME
        header = "No. | Advancing groups | 1A 1B 1D 1E 1G 1I 1K 1L"
        path.write_bytes(newline.join([header, "", *lines, ""]).encode("utf-8"))
        return path

    return _write
