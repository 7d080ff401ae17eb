from __future__ import annotations

from itertools import combinations
from pathlib import Path
from typing import Dict, Iterable, List
import json

from third_mapping.constants import ADVANCING_THIRDS, GROUPS, SLOTS


def expected_combinations() -> List[str]:
    return ["".join(c) for c in combinations(GROUPS, ADVANCING_THIRDS)]


def missing_combinations(mapping: Dict[str, Dict[str, str]]) -> List[str]:
    return [combo for combo in expected_combinations() if combo not in mapping]


def load_mapping(path: str | Path) -> Dict[str, Dict[str, str]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing third-place mapping file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Third-place mapping in {path} is not a JSON object")

    expected_slots = set(SLOTS)
    for combo, assignment in data.items():
        if not isinstance(assignment, dict) or set(assignment) != expected_slots:
            raise ValueError(
                f"Third-place mapping entry {combo} in {path} must have slots {list(SLOTS)}"
            )
    return data


def resolve_third_place_slots(
    mapping: Dict[str, Dict[str, str]], groups: Iterable[str]
) -> Dict[str, str]:
    """
    Look up which group's third-placed team each group winner faces.

    groups: the 8 groups whose third-placed teams advanced, in any order.
    Returns slot -> group letter, e.g. {"1A": "E", ...}.
    """
    combo_key = "".join(sorted(groups))
    if combo_key not in mapping:
        raise ValueError(f"Missing round-of-32 combo mapping for groups: {combo_key}")
    assignment = mapping[combo_key]
    return {slot: assignment[slot][-1] for slot in SLOTS}
