### Run this from the directory holding third-mapping-table.txt ###
"""
Generate third-mapping.json from the 48-team round-of-32 third-place table.

Each data line of the pasted table holds a row number, the 8 groups whose
third-placed teams advance, and the 8 assignments in this order:
    1A, 1B, 1D, 1E, 1G, 1I, 1K, 1L

Output schema:
    {
      "EFGHIJKL": {"1A": "3E", "1B": "3J", ..., "1L": "3K"},
      ...
    }
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import json
import re
import sys

from third_mapping.combinations import missing_combinations
from third_mapping.constants import EXPECTED_COMBINATIONS, INPUT_FILENAME, OUTPUT_FILENAME
from third_mapping.parser import parse_line

MAX_MISSING_SHOWN = 10


@dataclass
class GenerationResult:
    output_path: Path
    parsed_rows: int
    mapping: Dict[str, Dict[str, str]]

    @property
    def unique_keys(self) -> int:
        return len(self.mapping)


def read_table(input_path: str | Path) -> List[str]:
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Missing {input_path}")
    # stray cp1252 bytes in pasted headers decode to U+FFFD
    raw = input_path.read_text(encoding="utf-8", errors="replace")
    return re.split(r"\r?\n", raw)


def build_mapping(lines: Iterable[str]) -> Tuple[Dict[str, Dict[str, str]], int]:
    mapping: Dict[str, Dict[str, str]] = {}
    parsed = 0
    for line in lines:
        row = parse_line(line)
        if row is None:
            continue
        # last write wins on a repeated combination
        mapping[row.key] = row.assignment
        parsed += 1
    return mapping, parsed


def write_mapping(mapping: Dict[str, Dict[str, str]], output_path: str | Path) -> None:
    output_path = Path(output_path)
    tmp = output_path.with_suffix(output_path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        f.write(json.dumps(mapping, indent=2))
    tmp.replace(output_path)


def generate(input_path: str | Path, output_path: str | Path) -> GenerationResult:
    lines = read_table(input_path)
    # a TableParseError stops us here, before anything is written
    mapping, parsed = build_mapping(lines)
    write_mapping(mapping, output_path)
    return GenerationResult(output_path=Path(output_path), parsed_rows=parsed, mapping=mapping)


def report(result: GenerationResult) -> None:
    print(f"Wrote {result.output_path}")
    print(f"Parsed rows: {result.parsed_rows}")
    print(f"Unique keys: {result.unique_keys}")

    if result.unique_keys != EXPECTED_COMBINATIONS:
        print(
            f"Warning: expected {EXPECTED_COMBINATIONS} combinations, got {result.unique_keys}.",
            file=sys.stderr,
        )
        print(
            "This can happen if the table text formatting changed. "
            f"Make sure you pasted the full 1-{EXPECTED_COMBINATIONS} block cleanly.",
            file=sys.stderr,
        )
        missing = missing_combinations(result.mapping)
        if missing:
            shown = ", ".join(missing[:MAX_MISSING_SHOWN])
            more = "..." if len(missing) > MAX_MISSING_SHOWN else ""
            print(f"Missing combinations ({len(missing)}): {shown}{more}", file=sys.stderr)


def main() -> int:
    input_path = Path.cwd() / INPUT_FILENAME
    output_path = Path.cwd() / OUTPUT_FILENAME

    if not input_path.exists():
        print(f"Missing {input_path}", file=sys.stderr)
        print(f"Create {INPUT_FILENAME} and paste your full table into it.", file=sys.stderr)
        return 1

    result = generate(input_path, output_path)
    report(result)
    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
