"""Unit tests for calendar heatmap aggregation."""

from datetime import date

import pytest

from domain.calendar import (
    COUNT_COLORS,
    EMPTY_COLOR,
    aggregate,
    build_grid,
    build_weeks,
    collect_cells,
    count_solved,
    default_color_index,
    default_window,
    max_of,
    month_labels,
    problem_rating,
    to_heatmap_cells,
    week_start,
)
from domain.models import HeatmapCell, MonthLabel, SolvedProblem


def solved(solved_at: str, difficulty: str = "") -> SolvedProblem:
    return SolvedProblem(problem_url="https://codeforces.com/contest/1/problem/A", difficulty=difficulty, solved_at=solved_at)


class TestDateBucketing:
    """Folding problems into per-day values."""

    def test_count_mode(self):
        """Test that count mode adds one per record on the same day."""
        problems = [
            solved("2024-01-01 08:00:00"),
            solved("2024-01-01 23:59:59"),
            solved("2024-01-02 00:00:00"),
        ]

        assert collect_cells(problems, count_solved) == {"2024-01-01": 2, "2024-01-02": 1}

    def test_max_mode_skips_unknown_difficulty(self):
        """Test that max mode ignores records without a numeric difficulty."""
        problems = [
            solved("2024-01-01 08:00:00", "1500"),
            solved("2024-01-01 09:00:00", "2100"),
            solved("2024-01-01 10:00:00", ""),
            solved("2024-01-02 10:00:00", ""),
        ]

        assert collect_cells(problems, max_of(problem_rating)) == {"2024-01-01": 2100}

    @pytest.mark.parametrize(
        "difficulty, expected",
        [
            ("1500", 1500),
            ("1500.0", 1500),
            ("1500 ", 1500),
            (" 1500", 1500),
            ("1800 (est.)", 1800),
            ("", None),
            ("hard", None),
            ("~1500", None),
        ],
    )
    def test_problem_rating_reads_leading_integer(self, difficulty, expected):
        """Test that the rating is the leading integer of the difficulty text."""
        assert problem_rating(solved("2024-01-01 08:00:00", difficulty)) == expected

    def test_max_mode_counts_decimal_difficulty(self):
        """Test that decimal and padded difficulties still count in max mode."""
        problems = [
            solved("2024-01-01 08:00:00", "1500.0"),
            solved("2024-01-01 09:00:00", "1200 "),
        ]

        assert collect_cells(problems, max_of(problem_rating)) == {"2024-01-01": 1500}

    def test_records_without_date_are_ignored(self):
        """Test that records without a solve date are skipped."""
        assert collect_cells([solved("")]) == {}

    def test_to_heatmap_cells_sorted_with_meta(self):
        """Test that cells come out sorted by date with their meta attached."""
        cells = to_heatmap_cells({"2024-01-02": 1, "2024-01-01": 3}, meta={"2024-01-01": {"rating": 1900}})

        assert cells == [
            HeatmapCell(date="2024-01-01", value=3, meta={"rating": 1900}),
            HeatmapCell(date="2024-01-02", value=1, meta=None),
        ]


class TestCalendar:
    """Week grid and month labels."""

    @pytest.mark.parametrize(
        "day, expected",
        [
            (date(2024, 1, 3), date(2023, 12, 31)),  # Wednesday
            (date(2023, 12, 31), date(2023, 12, 31)),  # Sunday
            (date(2024, 1, 6), date(2023, 12, 31)),  # Saturday
        ],
    )
    def test_week_start_is_sunday(self, day, expected):
        """Test that weeks start on the Sunday on or before the day."""
        assert week_start(day) == expected

    def test_build_weeks_covers_window(self):
        """Test that the weeks cover the whole window in 7-day rows."""
        weeks = build_weeks(date(2024, 1, 1), date(2024, 1, 31))

        assert len(weeks) == 5
        assert weeks[0][0] == date(2023, 12, 31)
        assert weeks[-1][0] == date(2024, 1, 28)
        assert all(len(week) == 7 for week in weeks)

    def test_month_labels(self):
        """Test that a label is placed on each week where a new month starts."""
        start, end = date(2024, 1, 15), date(2024, 3, 10)
        weeks = build_weeks(start, end)

        assert len(weeks) == 9
        assert month_labels(weeks, start, end) == [
            MonthLabel(label="Jan", week_index=0),
            MonthLabel(label="Feb", week_index=3),
            MonthLabel(label="Mar", week_index=7),
        ]

    def test_first_week_always_labelled(self):
        """Test that the first week carries the label of the starting month."""
        start, end = date(2024, 5, 29), date(2024, 6, 20)
        labels = month_labels(build_weeks(start, end), start, end)

        assert labels[0] == MonthLabel(label="May", week_index=0)

    def test_default_window(self):
        """Test that the default window starts on the first of the month eleven months back."""
        assert default_window(date(2024, 10, 18)) == (date(2023, 11, 1), date(2024, 10, 18))
        assert default_window(date(2024, 12, 31)) == (date(2024, 1, 1), date(2024, 12, 31))


class TestColorIndex:
    @pytest.mark.parametrize(
        "value, max_value, expected",
        [
            (0, 5, None),
            (1, 4, 1),
            (2, 4, 2),
            (4, 4, 3),
            (3, 0, 0),
        ],
    )
    def test_default_color_index(self, value, max_value, expected):
        """Test the proportional color index and its clamping."""
        assert default_color_index(value, max_value, 4) == expected


class TestAggregate:
    def test_grid_values_and_colors(self):
        """Test that in-range days get their value and color."""
        problems = [
            solved("2024-01-01 08:00:00"),
            solved("2024-01-01 12:00:00"),
            solved("2024-01-02 12:00:00"),
        ]

        grid = aggregate(problems, date(2024, 1, 1), date(2024, 1, 6), count_solved)
        week = grid.weeks[0]

        assert grid.max_value == 2
        assert grid.total == 3
        assert week[1].date == date(2024, 1, 1)
        assert week[1].value == 2
        assert week[1].color == COUNT_COLORS[-1]
        assert week[2].value == 1
        assert week[2].color == COUNT_COLORS[2]
        assert week[3].value == 0
        assert week[3].color == EMPTY_COLOR

    def test_days_outside_window_have_no_value(self):
        """Test that padding days outside the window carry no value or color."""
        grid = aggregate([solved("2023-12-31 10:00:00")], date(2024, 1, 1), date(2024, 1, 2))
        first = grid.weeks[0][0]

        assert first.date == date(2023, 12, 31)
        assert first.in_range is False
        assert first.value is None
        assert first.color is None
        assert grid.total == 0

    def test_custom_color_index(self):
        """Test that a custom color index is clamped to the last color."""
        grid = build_grid(
            {"2024-01-01": 3},
            date(2024, 1, 1),
            date(2024, 1, 1),
            colors=["a", "b", "c"],
            color_index=lambda value, _max: value + 10,
        )

        assert grid.weeks[0][1].color == "c"

    def test_negative_custom_index_is_empty(self):
        """Test that a negative custom index falls back to the empty color."""
        grid = build_grid(
            {"2024-01-01": 3},
            date(2024, 1, 1),
            date(2024, 1, 1),
            colors=["a"],
            empty_color="empty",
            color_index=lambda value, _max: -1,
        )

        assert grid.weeks[0][1].color == "empty"

    def test_aggregate_is_idempotent(self):
        """Test that aggregating the same problems twice gives the same grid."""
        problems = [solved(f"2024-02-{day:02d} 10:00:00") for day in (1, 1, 3, 9, 9, 9)]

        first = aggregate(problems, date(2024, 1, 20), date(2024, 3, 1))
        second = aggregate(problems, date(2024, 1, 20), date(2024, 3, 1))

        assert first == second
