"""Difficulty levels and their display colors."""

NEUTRAL_COLOR = "#ebedf0"

# Upper bounds (exclusive) for levels 1..6; anything above is level 7.
LEVEL_BOUNDS = (1200, 1400, 1600, 1900, 2100, 2400)

LEVEL_COLORS = {
    1: "#9ca3af",  # gray
    2: "#22c55e",  # green
    3: "#06b6d4",  # cyan
    4: "#3b82f6",  # blue
    5: "#a855f7",  # purple
    6: "#f97316",  # orange
    7: "#ef4444",  # red
}

MAX_LEVEL = len(LEVEL_BOUNDS) + 1


def difficulty_level(rating: float) -> int:
    """Map a rating to a level from 1 to 7."""
    for level, bound in enumerate(LEVEL_BOUNDS, start=1):
        if rating < bound:
            return level
    return MAX_LEVEL


def difficulty_color(level: int) -> str:
    """Color for a level; 0 and unknown levels are neutral."""
    return LEVEL_COLORS.get(level, NEUTRAL_COLOR)


def _legend_label(level: int) -> str:
    if level == 1:
        return f"<{LEVEL_BOUNDS[0]}"
    if level == MAX_LEVEL:
        return f"{LEVEL_BOUNDS[-1]}+"
    return f"{LEVEL_BOUNDS[level - 2]}-{LEVEL_BOUNDS[level - 1] - 1}"


DIFFICULTY_LEGEND: list[tuple[int, str, str]] = [
    (level, _legend_label(level), LEVEL_COLORS[level]) for level in range(1, MAX_LEVEL + 1)
]
