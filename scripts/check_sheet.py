"""Check the goals sheet for rows the API will skip or overwrite.

Usage:
    python scripts/check_sheet.py                 # Check the configured sheet
    python scripts/check_sheet.py --url <csv-url> # Check another export
"""

import asyncio
import sys
from pathlib import Path
from collections import Counter

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from goalsheet.config import SHEET_CSV_URL
from goalsheet.services.sheet_loader import fetch_sheet_csv, iter_sheet_rows, parse_goals_csv


def check_rows(rows: list[tuple[int, dict]]) -> dict:
    """Collect problems in (line number, row) pairs from iter_sheet_rows."""
    skipped = []
    no_difficulty = []
    names = Counter()
    for line_no, row in rows:
        if not row["name"] or not row["description"]:
            skipped.append((line_no, row["name"] or "<no name>"))
            continue
        names[row["name"].lower()] += 1
        if not row["difficulty"]:
            no_difficulty.append(row["name"])
    duplicates = sorted(n for n, c in names.items() if c > 1)
    return {"skipped": skipped, "duplicates": duplicates, "no_difficulty": no_difficulty}


async def check_sheet(url: str = SHEET_CSV_URL):
    text = await fetch_sheet_csv(url)
    rows = list(iter_sheet_rows(text))
    goals = parse_goals_csv(text)
    report = check_rows(rows)

    print(f"Rows: {len(rows)}, goals served: {len(goals)}")

    print(f"\nSkipped rows (missing Name or Description): {len(report['skipped'])}")
    for line_no, name in report["skipped"]:
        print(f"  line {line_no}: {name}")

    print(f"\nDuplicate names (last row wins): {len(report['duplicates'])}")
    for name in report["duplicates"]:
        print(f"  {name}")

    print(f"\nGoals without difficulty: {len(report['no_difficulty'])}")
    for name in report["no_difficulty"]:
        print(f"  {name}")


if __name__ == "__main__":
    url = SHEET_CSV_URL
    if "--url" in sys.argv:
        url = sys.argv[sys.argv.index("--url") + 1]
    asyncio.run(check_sheet(url))
