"""Tests for plan segmentation, day headers and difficulty estimation."""
import pytest

from gymnotes_parser.models import ParsedEntry, PlanDay
from gymnotes_parser.parsers import plan_parser as plan_parser_module
from gymnotes_parser.parsers.plan_parser import (
    DEFAULT_DAY_NAME,
    DEFAULT_PLAN_DESCRIPTION,
    DEFAULT_PLAN_NAME,
    clean_day_name,
    estimate_difficulty,
    generate_plan_parsing_suggestions,
    is_day_header,
    looks_like_exercise,
)


def _day(name, *entries):
    return PlanDay(
        name=name,
        exercises=[ParsedEntry(exercise=exercise, sets=sets, reps=reps) for exercise, sets, reps in entries],
    )


class TestParsePlan:
    """End-to-end segmentation of pasted plans."""

    def test_two_day_plan(self, plan_parser, two_day_plan_text):
        plan = plan_parser.parse_plan(two_day_plan_text)

        assert plan.name == "Push Pull Program"
        assert plan.description == DEFAULT_PLAN_DESCRIPTION
        assert [day.name for day in plan.days] == ["Push", "Pull"]
        assert [len(day.exercises) for day in plan.days] == [3, 2]
        assert [e.exercise for e in plan.days[0].exercises] == [
            "Bench Press", "Overhead Press", "Tricep Pushdown",
        ]
        assert plan.exercise_count == 5
        assert plan.estimated_difficulty == "advanced"

    def test_first_line_header_is_title_and_day(self, plan_parser):
        plan = plan_parser.parse_plan("Day 1: Push\n3x10 bench press\nDay 2: Pull\n3x5 deadlift")

        assert plan.name == "Day 1: Push"
        assert [day.name for day in plan.days] == ["Push", "Pull"]

    def test_first_line_weekday_opens_day(self, plan_parser):
        plan = plan_parser.parse_plan("Monday\n3x10 squat")

        assert plan.name == "Monday"
        assert plan.days[0].name == "Monday"

    def test_no_headers_synthesizes_day_one(self, plan_parser):
        plan = plan_parser.parse_plan("3x10 squat\n3x8 bench press @60kg")

        assert plan.name == DEFAULT_PLAN_NAME
        assert len(plan.days) == 1
        assert plan.days[0].name == "Day 1"
        assert len(plan.days[0].exercises) == 2

    def test_exercises_before_first_header(self, plan_parser):
        plan = plan_parser.parse_plan("My Plan\n3x10 squat\nDay 2: Pull\n3x5 deadlift @140kg")

        assert [day.name for day in plan.days] == ["Day 1", "Pull"]

    def test_markdown_lists_and_caps_headers(self, plan_parser):
        text = """# Strength Block
## Upper
- Bench press 3x8 @70kg
- Barbell row 3x8 @60kg
LOWER BODY
1. Squat 5x5 @100kg
2. Romanian deadlift 3x10 @80kg
"""
        plan = plan_parser.parse_plan(text)

        assert plan.name == "Strength Block"
        assert [day.name for day in plan.days] == ["Upper", "LOWER BODY"]
        assert [e.exercise for e in plan.days[0].exercises] == ["Bench Press", "Barbell Row"]
        assert [e.exercise for e in plan.days[1].exercises] == ["Squat", "Romanian Deadlift"]

    def test_empty_days_are_dropped(self, plan_parser):
        plan = plan_parser.parse_plan("Plan\nDay 1\nDay 2: Legs\n5x5 squat")

        assert [day.name for day in plan.days] == ["Legs"]

    def test_noise_lines_are_dropped(self, plan_parser):
        plan = plan_parser.parse_plan(
            "Plan\nDay 1: Legs\nRest 2 minutes between sets\n5x5 squat @100kg\nstay hydrated"
        )

        assert len(plan.days) == 1
        assert [e.exercise for e in plan.days[0].exercises] == ["Squat"]

    def test_blank_lines_and_indentation(self, plan_parser):
        plan = plan_parser.parse_plan("\n\n  Plan  \n\n   Monday\n\n   3x10 squat   \n\n")

        assert plan.name == "Plan"
        assert plan.days[0].name == "Monday"

    def test_first_line_exercise_is_not_title(self, plan_parser):
        plan = plan_parser.parse_plan("3x10 squat\nDay 2\n3x10 bench press")

        assert plan.name == DEFAULT_PLAN_NAME
        assert plan.days[0].name == "Day 1"
        assert plan.days[1].name == DEFAULT_DAY_NAME

    def test_header_line_with_numbers_is_an_exercise(self, plan_parser):
        plan = plan_parser.parse_plan("Program\nPUSH 3x10")

        assert plan.days[0].name == "Day 1"
        assert plan.days[0].exercises[0].exercise == "Push"

    @pytest.mark.parametrize("text", [
        "",
        "\n\n  \n",
        "Just some notes\nnothing to see here",
        "Day 1: Push\nDay 2: Pull",
    ])
    def test_no_exercises_returns_none(self, plan_parser, text):
        assert plan_parser.parse_plan(text) is None

    def test_overlong_plan(self, plan_parser):
        assert plan_parser.parse_plan("3x10 squat\n" * 10000) is None

    def test_module_level_parse_plan(self, two_day_plan_text):
        plan = plan_parser_module.parse_plan(two_day_plan_text)
        assert len(plan.days) == 2


class TestParsePlanText:

    def test_success(self, plan_parser, two_day_plan_text):
        result = plan_parser.parse_plan_text(two_day_plan_text)
        assert result.success
        assert result.errors == []
        assert result.suggestions == []

    def test_validation_errors_are_attached(self, plan_parser):
        result = plan_parser.parse_plan_text("Plan\nDay 1: Legs\n3x0 squat")
        assert result.success
        assert result.errors == ["Legs, exercise 1 (Squat): Reps must be between 1 and 1000"]

    def test_failure_has_suggestions(self, plan_parser):
        result = plan_parser.parse_plan_text("Just some notes\nnothing here")
        assert not result.success
        assert result.plan is None
        assert "Add exercise details with sets and reps" in result.suggestions


class TestLineClassification:

    @pytest.mark.parametrize("line", [
        "Day 1", "Day 3: Legs", "Monday", "Tue - upper", "Workout A", "Full Body",
        "Push Day", "BACK AND BICEPS", "## Upper", "Beginner", "- Warmup",
    ])
    def test_day_headers(self, line):
        assert is_day_header(line)

    @pytest.mark.parametrize("line", [
        "Bench press 3x10", "Push 3x10 @60kg", "felt good today", "3 sets of 10 pushups",
        "Squat 100kg",
    ])
    def test_not_day_headers(self, line):
        assert not is_day_header(line)

    @pytest.mark.parametrize("line, expected", [
        ("3x10 bench", True),
        ("squat 5 sets", True),
        ("deadlift @ 100", True),
        ("squat 100 lbs", True),
        ("deadlift 100kgx5", True),
        ("Day 1: Push", False),
        ("warm up first", False),
    ])
    def test_looks_like_exercise(self, line, expected):
        assert looks_like_exercise(line) is expected

    @pytest.mark.parametrize("line, expected", [
        ("Day 1: Push", "Push"),
        ("Day 2", DEFAULT_DAY_NAME),
        ("## Leg Day:", "Leg Day"),
        ("1) Upper A", "Upper A"),
        ("- Monday:", "Monday"),
        ("  Pull  ", "Pull"),
    ])
    def test_clean_day_name(self, line, expected):
        assert clean_day_name(line) == expected


class TestEstimateDifficulty:
    """Per-exercise averages of volume and complexity, plus day count."""

    def test_beginner(self, catalog):
        assert estimate_difficulty([_day("A", ("Plank", 3, 5))], catalog) == "beginner"

    def test_empty(self, catalog):
        assert estimate_difficulty([], catalog) == "beginner"

    def test_intermediate_by_volume(self, catalog):
        assert estimate_difficulty([_day("A", ("Plank", 3, 10))], catalog) == "intermediate"

    def test_advanced_by_volume(self, catalog):
        assert estimate_difficulty([_day("A", ("Plank", 5, 10))], catalog) == "advanced"

    def test_intermediate_by_complexity(self, catalog):
        # barbell equipment only, no compound keyword
        assert estimate_difficulty([_day("A", ("Barbell Curl", 1, 5))], catalog) == "intermediate"

    def test_advanced_by_complexity(self, catalog):
        # barbell plus compound bonus
        assert estimate_difficulty([_day("A", ("Squat", 1, 5))], catalog) == "advanced"

    def test_compound_keyword_applies_to_unknown_names(self, catalog):
        assert estimate_difficulty([_day("A", ("Cable Press", 1, 5))], catalog) == "intermediate"
        assert estimate_difficulty([_day("A", ("Mystery Move", 1, 5))], catalog) == "beginner"

    def test_day_count_thresholds(self, catalog):
        three = [_day(f"D{i}", ("Plank", 1, 5)) for i in range(3)]
        five = [_day(f"D{i}", ("Plank", 1, 5)) for i in range(5)]
        assert estimate_difficulty(three, catalog) == "intermediate"
        assert estimate_difficulty(five, catalog) == "advanced"

    def test_thresholds_are_strict(self, catalog):
        # average volume exactly 20 and exactly 40
        assert estimate_difficulty([_day("A", ("Plank", 4, 5))], catalog) == "beginner"
        assert estimate_difficulty([_day("A", ("Plank", 4, 10))], catalog) == "intermediate"


class TestPlanSuggestions:

    def test_empty(self):
        assert generate_plan_parsing_suggestions("") == ["Paste your workout plan text, one exercise per line"]

    def test_no_exercise_lines(self):
        suggestions = generate_plan_parsing_suggestions("Chest day\nthen some cardio")
        assert suggestions[0] == "Add exercise details with sets and reps"

    def test_long_plan_without_headers(self):
        text = "\n".join(["My plan", "bench", "squat", "deadlift", "curls", "rows", "dips"])
        assert 'Consider adding day headers like "Day 1" or "Push Day"' in generate_plan_parsing_suggestions(text)
