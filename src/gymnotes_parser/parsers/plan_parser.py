"""
Plan Parser

Segments a pasted multi-line workout plan into days and exercises:

- the first line is the plan title unless it already looks like an exercise;
  a title that is also a day header ("Monday") opens that day too
- day headers ("Day 1: Push", "Monday", "## Upper", "LEGS") open a new day
- every other line goes through the line parser; lines that parse as
  neither header nor exercise are dropped as noise
- exercises before any header land in a synthesized "Day 1"

Lines are processed in document order because the open day carries forward.
"""

import re
import logging
from typing import List, Optional

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.config import settings
from gymnotes_parser.models import (
    Difficulty,
    ParsedEntry,
    ParsedPlan,
    PlanDay,
    PlanParseResult,
)
from gymnotes_parser.validator import validate_plan

from .line_parser import LineParser, get_default_parser

logger = logging.getLogger(__name__)

DEFAULT_PLAN_NAME = "My Workout Plan"
DEFAULT_PLAN_DESCRIPTION = "Imported workout plan"
DEFAULT_DAY_NAME = "Workout Day"

# A line with any of these is an exercise line, never a header
EXERCISE_LINE_PATTERN = re.compile(
    r"\d+\s*[x×]\s*\d+"
    r"|\d+\s*(?:sets?|reps?)\b"
    r"|@\s*\d"
    r"|\d+\s*(?:kgs?|kilos?|lbs?|pounds?)(?![a-wyz0-9])",
    re.IGNORECASE,
)

DAY_HEADER_PATTERNS = [
    re.compile(r"^day\s*\d+\b", re.IGNORECASE),
    re.compile(r"^workout\s+[a-z]\b", re.IGNORECASE),
    re.compile(r"\b(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b", re.IGNORECASE),
    re.compile(r"^(?:mon|tue|tues|wed|thu|thur|thurs|fri|sat|sun)\b", re.IGNORECASE),
    re.compile(r"\b(?:push|pull|legs?|upper|lower|full\s*body|chest|back|shoulders|arms)\b", re.IGNORECASE),
    re.compile(r"\b(?:beginner|intermediate|advanced)\b", re.IGNORECASE),
    re.compile(r"^(?:\d+[.)]|[-*•])\s"),
    re.compile(r"^#{1,6}\s*\S"),
]

LIST_MARKER_PATTERN = re.compile(r"^(?:\d+[.)]|[-*•])\s*")
_HEADING_MARKER = re.compile(r"^#+\s*")
_DAY_NUMBER_PREFIX = re.compile(r"^day\s*\d+\s*[:.\-–]?\s*", re.IGNORECASE)

# Difficulty estimation
EQUIPMENT_COMPLEXITY = {"barbell": 2.0, "dumbbell": 1.0, "bodyweight": 0.5}
COMPOUND_KEYWORDS = ("deadlift", "squat", "press", "row")
COMPOUND_BONUS = 2.0


def looks_like_exercise(line: str) -> bool:
    return bool(EXERCISE_LINE_PATTERN.search(line))


def _is_all_caps(line: str) -> bool:
    letters = [c for c in line if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


def is_day_header(line: str) -> bool:
    """True for header-looking lines that do not also look like exercises."""
    if looks_like_exercise(line):
        return False
    if _is_all_caps(line):
        return True
    return any(pattern.search(line) for pattern in DAY_HEADER_PATTERNS)


def clean_day_name(line: str) -> str:
    """Strip heading/list markers, a "Day N:" prefix and a trailing colon."""
    name = _HEADING_MARKER.sub("", line.strip())
    name = LIST_MARKER_PATTERN.sub("", name)
    name = _DAY_NUMBER_PREFIX.sub("", name)
    name = name.strip().rstrip(":").strip()
    return name or DEFAULT_DAY_NAME


def estimate_difficulty(days: List[PlanDay], catalog: Optional[ExerciseCatalog] = None) -> Difficulty:
    """
    Classify a plan from per-exercise averages of volume and complexity.

    volume is sets * reps; complexity is barbell +2, dumbbell +1,
    bodyweight +0.5, plus 2 for compound lifts (deadlift/squat/press/row).
    """
    catalog = catalog or ExerciseCatalog.load_default()
    exercises = [entry for day in days for entry in day.exercises]
    if not exercises:
        return "beginner"

    total_volume = 0.0
    total_complexity = 0.0

    for entry in exercises:
        total_volume += entry.sets * entry.reps

        definition = catalog.find_by_name(entry.exercise) or catalog.lookup(entry.exercise)
        if definition and definition.equipment:
            total_complexity += EQUIPMENT_COMPLEXITY.get(definition.equipment, 0.0)

        name = entry.exercise.lower()
        if any(keyword in name for keyword in COMPOUND_KEYWORDS):
            total_complexity += COMPOUND_BONUS

    avg_volume = total_volume / len(exercises)
    avg_complexity = total_complexity / len(exercises)
    day_count = len(days)

    if avg_volume > 40 or avg_complexity > 2 or day_count > 4:
        return "advanced"
    if avg_volume > 20 or avg_complexity > 1 or day_count > 2:
        return "intermediate"
    return "beginner"


def generate_plan_parsing_suggestions(text: str) -> List[str]:
    """Input-derived hints for a plan that produced no days."""
    lines = [line.strip() for line in (text or "").splitlines() if line.strip()]

    if not lines:
        return ["Paste your workout plan text, one exercise per line"]

    suggestions: List[str] = []

    if not any(looks_like_exercise(line) for line in lines):
        suggestions.append("Add exercise details with sets and reps")
        suggestions.append('Example: "3x10 Bench Press" or "Squat 3x8 @60kg"')

    header_count = sum(1 for line in lines[1:] if is_day_header(line))
    if len(lines) > 5 and header_count == 0:
        suggestions.append('Consider adding day headers like "Day 1" or "Push Day"')

    suggestions.append('Format: "3x10 Exercise @60kg" or "Exercise 3x10"')
    return suggestions


class PlanParser:
    """Document-level segmentation built on the line parser."""

    def __init__(self, line_parser: Optional[LineParser] = None):
        self.line_parser = line_parser or get_default_parser()

    def parse_plan(self, text: str) -> Optional[ParsedPlan]:
        """Parse a pasted plan, or return None when no day has any exercise."""
        if not text:
            return None
        if len(text) > settings.MAX_PLAN_LENGTH:
            logger.warning(f"Plan of {len(text)} chars exceeds MAX_PLAN_LENGTH, skipping")
            return None

        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            return None

        name = DEFAULT_PLAN_NAME
        days: List[PlanDay] = []
        current: Optional[PlanDay] = None

        if not looks_like_exercise(lines[0]):
            name = _HEADING_MARKER.sub("", lines[0]).strip() or DEFAULT_PLAN_NAME
            # "Day 1: Push" on the first line is the title and also opens that day
            if is_day_header(lines[0]):
                current = PlanDay(name=clean_day_name(lines[0]))
            lines = lines[1:]

        for line in lines:
            if is_day_header(line):
                if current is not None and current.exercises:
                    days.append(current)
                current = PlanDay(name=clean_day_name(line))
                continue

            entry = self._parse_exercise_line(line)
            if entry is None:
                logger.debug(f"Dropping unrecognized plan line: {line!r}")
                continue

            if current is None:
                current = PlanDay(name=f"Day {len(days) + 1}")
            current.exercises.append(entry)

        if current is not None and current.exercises:
            days.append(current)

        if not days:
            logger.info("Plan text produced no days with exercises")
            return None

        return ParsedPlan(
            name=name,
            description=DEFAULT_PLAN_DESCRIPTION,
            days=days,
            estimated_difficulty=estimate_difficulty(days, self.line_parser.catalog),
        )

    def parse_plan_text(self, text: str) -> PlanParseResult:
        """parse_plan plus validation messages and, on failure, suggestions."""
        plan = self.parse_plan(text)
        if plan is None:
            return PlanParseResult(
                success=False,
                suggestions=generate_plan_parsing_suggestions(text),
            )

        validation = validate_plan(plan)
        return PlanParseResult(success=True, plan=plan, errors=validation.errors)

    def _parse_exercise_line(self, line: str) -> Optional[ParsedEntry]:
        candidate = LIST_MARKER_PATTERN.sub("", line)
        return self.line_parser.parse_line(candidate)


_default_plan_parser: Optional[PlanParser] = None


def parse_plan(text: str) -> Optional[ParsedPlan]:
    global _default_plan_parser
    if _default_plan_parser is None:
        _default_plan_parser = PlanParser()
    return _default_plan_parser.parse_plan(text)
