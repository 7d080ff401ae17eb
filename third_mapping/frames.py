from __future__ import annotations

from typing import Dict

import pandas as pd

from third_mapping.constants import SLOTS

COMBO_COLUMN = "combo"


def mapping_to_frame(mapping: Dict[str, Dict[str, str]]) -> pd.DataFrame:
    """One row per combination: combo, 1A, 1B, ... 1L."""
    records = [
        {COMBO_COLUMN: combo, **{slot: assignment[slot] for slot in SLOTS}}
        for combo, assignment in mapping.items()
    ]
    return pd.DataFrame(records, columns=[COMBO_COLUMN, *SLOTS])


def frame_to_mapping(df: pd.DataFrame) -> Dict[str, Dict[str, str]]:
    required = {COMBO_COLUMN, *SLOTS}
    missing = required.difference(df.columns)
    if missing:
        raise ValueError(
            f"Third-place combinations frame missing columns: {sorted(missing)}"
        )
    combos: Dict[str, Dict[str, str]] = {}
    for row in df.to_dict(orient="records"):
        combo = str(row.get(COMBO_COLUMN, "")).strip()
        combos[combo] = {slot: str(row.get(slot, "")).strip() for slot in SLOTS}
    return combos
