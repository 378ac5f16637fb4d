"""Rule-based parser for free-text workout entries and pasted workout plans."""
from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.models import (
    ExerciseDefinition,
    LineParseResult,
    ParsedEntry,
    ParsedPlan,
    PlanDay,
    PlanParseResult,
    ValidationResult,
)
from gymnotes_parser.normalizer import ExerciseNormalizer
from gymnotes_parser.parsers import (
    LineParser,
    PlanParser,
    generate_parsing_suggestions,
    generate_plan_parsing_suggestions,
    parse_line,
    parse_plan,
    parse_with_context,
)
from gymnotes_parser.validator import validate_entry, validate_plan

__all__ = [
    "ExerciseCatalog",
    "ExerciseDefinition",
    "ExerciseNormalizer",
    "LineParseResult",
    "LineParser",
    "ParsedEntry",
    "ParsedPlan",
    "PlanDay",
    "PlanParseResult",
    "PlanParser",
    "ValidationResult",
    "generate_parsing_suggestions",
    "generate_plan_parsing_suggestions",
    "parse_line",
    "parse_plan",
    "parse_with_context",
    "validate_entry",
    "validate_plan",
]
