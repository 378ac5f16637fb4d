"""Tests for the pydantic models."""
from gymnotes_parser.models import ParsedEntry, ParsedPlan, PlanDay


class TestParsedEntry:

    def test_defaults(self):
        entry = ParsedEntry(exercise="Squat")
        assert (entry.sets, entry.reps, entry.unit) == (1, 1, "kg")
        assert entry.weight is None
        assert entry.strategy is None

    def test_out_of_range_values_are_accepted(self):
        entry = ParsedEntry(exercise="Squat", sets=0, reps=5000, rpe=20)
        assert entry.reps == 5000


class TestParsedPlan:

    def test_defaults(self):
        plan = ParsedPlan()
        assert plan.name == "My Workout Plan"
        assert plan.days == []
        assert plan.estimated_difficulty == "beginner"

    def test_exercise_count(self):
        plan = ParsedPlan(days=[
            PlanDay(name="A", exercises=[ParsedEntry(exercise="Squat"), ParsedEntry(exercise="Plank")]),
            PlanDay(name="B", exercises=[ParsedEntry(exercise="Deadlift")]),
        ])
        assert plan.exercise_count == 3

    def test_days_do_not_share_exercise_lists(self):
        first, second = PlanDay(name="A"), PlanDay(name="B")
        first.exercises.append(ParsedEntry(exercise="Squat"))
        assert second.exercises == []
