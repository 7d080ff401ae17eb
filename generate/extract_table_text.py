### Turn a saved allocation-table page into third-mapping-table.txt ###

import sys

from third_mapping.constants import INPUT_FILENAME
from third_mapping.html_table import extract_table_lines

if __name__ == "__main__":
    # Save the page with "View Page Source" and point at it here.
    html_path = sys.argv[1] if len(sys.argv) > 1 else "third_mapping_table.html"
    with open(html_path, "r", encoding="utf-8") as f:
        html = f.read()

    lines = extract_table_lines(html)

    with open(INPUT_FILENAME, "w", encoding="utf-8") as out:
        out.write("\n".join(lines) + "\n")
    print(f"wrote {len(lines)} rows to {INPUT_FILENAME}")
