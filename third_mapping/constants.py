import math

INPUT_FILENAME = "third-mapping-table.txt"
OUTPUT_FILENAME = "third-mapping.json"

# Group winners whose round-of-32 opponent is a third-placed team, in table order.
SLOTS = ("1A", "1B", "1D", "1E", "1G", "1I", "1K", "1L")

GROUPS = "ABCDEFGHIJKL"
ADVANCING_THIRDS = 8

# 12 groups choosing 8 third-placed qualifiers
EXPECTED_COMBINATIONS = math.comb(len(GROUPS), ADVANCING_THIRDS)
