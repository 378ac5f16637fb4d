"""Range and shape checks for parsed entries and plans.

Failures come back as human-readable messages so a plan import can report
every violation at once; nothing here raises.
"""
from typing import List

from gymnotes_parser.models import ParsedEntry, ParsedPlan, ValidationResult

MAX_SETS = 50
MAX_REPS = 1000
MAX_WEIGHT = 1000
MAX_REST_SECONDS = 3600


def _entry_errors(entry: ParsedEntry) -> List[str]:
    errors: List[str] = []

    if not (entry.exercise or "").strip():
        errors.append("Exercise name is required")

    if entry.sets is None or not 1 <= entry.sets <= MAX_SETS:
        errors.append(f"Sets must be between 1 and {MAX_SETS}")

    if entry.reps is None or not 1 <= entry.reps <= MAX_REPS:
        errors.append(f"Reps must be between 1 and {MAX_REPS}")

    if entry.weight is not None and not 0 <= entry.weight <= MAX_WEIGHT:
        errors.append(f"Weight must be between 0 and {MAX_WEIGHT}")

    if entry.rpe is not None and not 1 <= entry.rpe <= 10:
        errors.append("RPE must be between 1 and 10")

    if entry.rest_seconds is not None and not 0 <= entry.rest_seconds <= MAX_REST_SECONDS:
        errors.append(f"Rest time must be between 0 and {MAX_REST_SECONDS} seconds")

    return errors


def validate_entry(entry: ParsedEntry) -> ValidationResult:
    errors = _entry_errors(entry)
    return ValidationResult(ok=not errors, errors=errors)


def validate_plan(plan: ParsedPlan) -> ValidationResult:
    """Check the plan shape and every exercise in every day."""
    errors: List[str] = []

    if not (plan.name or "").strip():
        errors.append("Plan name is required")

    if not plan.days:
        errors.append("Plan must have at least one day")

    for day_index, day in enumerate(plan.days, start=1):
        label = day.name.strip() if day.name and day.name.strip() else f"Day {day_index}"

        if not (day.name or "").strip():
            errors.append(f"Day {day_index}: day name is required")

        if not day.exercises:
            errors.append(f"{label}: at least one exercise is required")

        for position, entry in enumerate(day.exercises, start=1):
            for message in _entry_errors(entry):
                name = entry.exercise or "unnamed exercise"
                errors.append(f"{label}, exercise {position} ({name}): {message}")

    return ValidationResult(ok=not errors, errors=errors)
