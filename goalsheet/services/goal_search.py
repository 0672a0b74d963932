"""Name search, difficulty filter and random pick over a loaded goal mapping."""

import random
from goalsheet.models import Goal


def normalize_query(query: str) -> str:
    return query.strip().lower()


def search_goals(goals: dict[str, Goal], query: str) -> list[Goal]:
    """Exact-then-fuzzy lookup by goal name.

    An exact (case-insensitive) name match short-circuits and is returned
    alone. Otherwise a goal matches when its name contains the whole query,
    or contains every whitespace-separated word of it. Results keep the
    mapping's order.
    """
    q = normalize_query(query)
    if q in goals:
        return [goals[q]]

    tokens = q.split()
    matches = []
    for key, goal in goals.items():
        if q in key or (tokens and all(t in key for t in tokens)):
            matches.append(goal)
    return matches


def filter_by_difficulty(goals: dict[str, Goal], difficulty: str) -> list[Goal]:
    """Goals whose difficulty contains the given token ("★" also matches "★★")."""
    token = difficulty.strip().lower()
    return [g for g in goals.values() if token in g.difficulty.lower()]


def pick_random_goal(goals: dict[str, Goal], rng=random) -> Goal | None:
    pool = list(goals.values())
    if not pool:
        return None
    return pool[rng.randrange(len(pool))]
