"""FastAPI dependency providing the goal data source."""

from goalsheet.config import SHEET_CSV_URL
from goalsheet.models import Goal
from goalsheet.services.sheet_loader import load_goals


class SheetGoalSource:
    """Reloads the whole sheet on every call; nothing is cached."""

    def __init__(self, url: str = SHEET_CSV_URL):
        self.url = url

    async def load(self) -> dict[str, Goal]:
        return await load_goals(self.url)


def get_goal_source() -> SheetGoalSource:
    return SheetGoalSource()
