from third_mapping.constants import EXPECTED_COMBINATIONS, GROUPS, SLOTS
from third_mapping.parser import ParsedRow, TableParseError, parse_line

__all__ = [
    "EXPECTED_COMBINATIONS",
    "GROUPS",
    "SLOTS",
    "ParsedRow",
    "TableParseError",
    "parse_line",
]
