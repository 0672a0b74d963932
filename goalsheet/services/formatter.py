"""Render goals as text for chat bots and as summaries for the JSON API."""

from goalsheet.models import Goal, GoalSummary

FULL_MATCH_LIMIT = 5
COMPACT_MATCH_LIMIT = 3
DESCRIPTION_PREVIEW_CHARS = 100


def format_goal_full(goal: Goal) -> str:
    lines = [f"{goal.name}: {goal.description}"]
    if goal.levels:
        lines.append(f"Level: {goal.levels}")
    if goal.difficulty:
        lines.append(f"Difficulty: {goal.difficulty}")
    if goal.video_link:
        lines.append(f"Video: {goal.video_link}")
    return "\n".join(lines)


def format_goal_compact(goal: Goal) -> str:
    """Single line for low character budgets (e.g. Twitch chat); no video link."""
    text = f"{goal.name}: {goal.description}"
    if goal.levels:
        text += f" | {goal.levels}"
    if goal.difficulty:
        text += f" | {goal.difficulty}"
    return text


def format_matches(query: str, goals: list[Goal], limit: int = FULL_MATCH_LIMIT) -> str:
    """Disambiguation line listing the first `limit` matching names."""
    names = ", ".join(g.name for g in goals[:limit])
    text = f"Found {len(goals)} goals matching '{query}': {names}"
    if len(goals) > limit:
        text += f" (+{len(goals) - limit} more)"
    return text


def truncate(text: str, max_chars: int = DESCRIPTION_PREVIEW_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def summarize_goal(goal: Goal) -> GoalSummary:
    return GoalSummary(
        name=goal.name,
        description=truncate(goal.description),
        levels=goal.levels,
        difficulty=goal.difficulty,
        hasVideo=bool(goal.video_link),
    )
