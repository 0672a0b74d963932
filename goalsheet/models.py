from pydantic import BaseModel


class Goal(BaseModel):
    name: str
    description: str
    levels: str = ""
    difficulty: str = ""
    video_link: str = ""  # empty when the sheet has no video


class GoalSummary(BaseModel):
    name: str
    description: str  # truncated to 100 chars
    levels: str
    difficulty: str
    hasVideo: bool


class GoalListResponse(BaseModel):
    totalGoals: int
    goals: list[GoalSummary]


class DifficultyResponse(BaseModel):
    difficulty: str
    count: int
    goals: list[str]
