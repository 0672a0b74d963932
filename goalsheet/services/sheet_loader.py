"""Fetch the goals sheet as CSV and turn it into Goal records."""

import csv
import io
import logging
import httpx
from goalsheet.config import SHEET_CSV_URL, GOALS_FETCH_TIMEOUT
from goalsheet.errors import UpstreamError
from goalsheet.models import Goal

logger = logging.getLogger(__name__)

# Sheet header -> Goal field
COLUMNS = {
    "Name": "name",
    "Description": "description",
    "Level(s)": "levels",
    "Difficulty": "difficulty",
    "Video Link": "video_link",
}
REQUIRED_COLUMNS = ("Name", "Description")


async def fetch_sheet_csv(url: str = SHEET_CSV_URL,
                          client: httpx.AsyncClient | None = None) -> str:
    """Download the sheet export. Raises UpstreamError on any HTTP failure."""
    try:
        if client is not None:
            response = await client.get(url, follow_redirects=True)
        else:
            async with httpx.AsyncClient(timeout=GOALS_FETCH_TIMEOUT) as own_client:
                response = await own_client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise UpstreamError(f"Failed to fetch goals sheet: {e}") from e
    return response.text


def iter_sheet_rows(text: str):
    """Yield (line number, row) for every data row, row being a dict of
    trimmed Goal field values.

    The line number is the file line the record ends on, so quoted cells
    spanning several lines do not shift later rows. Rows are yielded even
    when Name or Description is empty so callers can report on them;
    missing cells come back as "".
    """
    reader = csv.DictReader(io.StringIO(text))
    try:
        header = [(h or "").strip() for h in (reader.fieldnames or [])]
        missing = [c for c in REQUIRED_COLUMNS if c not in header]
        if missing:
            raise UpstreamError(f"Goals sheet is missing column(s): {', '.join(missing)}")
        reader.fieldnames = header
        for row in reader:
            yield reader.line_num, {field: (row.get(col) or "").strip() for col, field in COLUMNS.items()}
    except csv.Error as e:
        raise UpstreamError(f"Goals sheet is not valid CSV: {e}") from e


def parse_goals_csv(text: str) -> dict[str, Goal]:
    """Build the lowercase-name -> Goal mapping, in sheet order."""
    goals: dict[str, Goal] = {}
    for _, row in iter_sheet_rows(text):
        if not row["name"] or not row["description"]:
            continue
        key = row["name"].lower()
        if key in goals:
            # Later rows overwrite earlier ones
            logger.warning(f"Duplicate goal name in sheet: {row['name']!r}")
        goals[key] = Goal(**row)
    return goals


async def load_goals(url: str = SHEET_CSV_URL,
                     client: httpx.AsyncClient | None = None) -> dict[str, Goal]:
    text = await fetch_sheet_csv(url, client)
    goals = parse_goals_csv(text)
    logger.info(f"Loaded {len(goals)} goals from sheet")
    return goals
