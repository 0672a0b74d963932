"""Shared fixtures: a small goals sheet export and a fake goal source."""

import pytest

from goalsheet.services.sheet_loader import parse_goals_csv

SAMPLE_CSV = """Name,Description,Level(s),Difficulty,Video Link
Jano Skip Glitch,Skip Jano's fight with a wall clip,Chapter 3,★★★,https://youtu.be/jano
Jano Skip,  Skip Jano the intended way  ,Chapter 3,★★,
Ice Climb,Climb the ice wall without falling,"Chapter 1, Chapter 2",★,
No Description,,Chapter 4,★,
,Orphan description,,,
Speed Run,Finish the game in under ten minutes,,,https://youtu.be/speed
"""


class FakeGoalSource:
    """Stands in for SheetGoalSource; counts loads instead of fetching."""

    def __init__(self, goals=None, error=None):
        self.goals = goals if goals is not None else {}
        self.error = error
        self.calls = 0

    async def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.goals


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def sample_goals():
    return parse_goals_csv(SAMPLE_CSV)


@pytest.fixture
def goal_source(sample_goals):
    return FakeGoalSource(sample_goals)
