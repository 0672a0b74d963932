"""Goal lookup endpoints. Every request reloads the sheet."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from goalsheet.dependencies import SheetGoalSource, get_goal_source
from goalsheet.errors import ValidationError, NotFoundError
from goalsheet.models import GoalListResponse, DifficultyResponse
from goalsheet.services.goal_search import search_goals, filter_by_difficulty, pick_random_goal
from goalsheet.services.formatter import (
    format_goal_full, format_goal_compact, format_matches, summarize_goal,
    FULL_MATCH_LIMIT, COMPACT_MATCH_LIMIT,
)

router = APIRouter()


async def _lookup(name: str, source: SheetGoalSource):
    query = name.strip()
    if not query:
        raise ValidationError("Please provide a goal name (?name=...)")
    goals = await source.load()
    matches = search_goals(goals, query)
    if not matches:
        raise NotFoundError(f"Goal '{query}' not found.")
    return query, matches


@router.get("/goal", response_class=PlainTextResponse)
async def get_goal(name: str = "", source: SheetGoalSource = Depends(get_goal_source)):
    query, matches = await _lookup(name, source)
    if len(matches) == 1:
        return format_goal_full(matches[0])
    return format_matches(query, matches, FULL_MATCH_LIMIT)


@router.get("/goal/compact", response_class=PlainTextResponse)
async def get_goal_compact(name: str = "", source: SheetGoalSource = Depends(get_goal_source)):
    """Single-line variant for chat bots."""
    query, matches = await _lookup(name, source)
    if len(matches) == 1:
        return format_goal_compact(matches[0])
    return format_matches(query, matches, COMPACT_MATCH_LIMIT)


@router.get("/goal/random", response_class=PlainTextResponse)
async def get_random_goal(source: SheetGoalSource = Depends(get_goal_source)):
    goals = await source.load()
    goal = pick_random_goal(goals)
    if goal is None:
        raise NotFoundError("No goals available.")
    return format_goal_full(goal)


@router.get("/goals")
async def list_goals(source: SheetGoalSource = Depends(get_goal_source)):
    goals = await source.load()
    return GoalListResponse(
        totalGoals=len(goals),
        goals=[summarize_goal(g) for g in goals.values()],
    )


@router.get("/goals/difficulty/{level}")
async def goals_by_difficulty(level: str, source: SheetGoalSource = Depends(get_goal_source)):
    token = level.strip()
    if not token:
        raise ValidationError("Please provide a difficulty (/goals/difficulty/...)")
    goals = await source.load()
    matches = filter_by_difficulty(goals, token)
    if not matches:
        return JSONResponse({"error": f"No goals found with difficulty '{token}'"}, status_code=404)
    return DifficultyResponse(
        difficulty=token,
        count=len(matches),
        goals=[g.name for g in matches],
    )
