"""Grammar-based parsers for single workout lines and pasted plans."""
from .base import GrammarStrategy
from .line_parser import (
    FallbackStrategy,
    LineParser,
    generate_parsing_suggestions,
    get_default_parser,
    parse_line,
    parse_with_context,
)
from .plan_parser import (
    PlanParser,
    estimate_difficulty,
    generate_plan_parsing_suggestions,
    parse_plan,
)
from .strategies import (
    DEFAULT_STRATEGIES,
    CompactStrategy,
    ContextStrategy,
    DetailedStrategy,
    FlexibleStrategy,
    NaturalLanguageStrategy,
    StandardStrategy,
)

__all__ = [
    "CompactStrategy",
    "ContextStrategy",
    "DEFAULT_STRATEGIES",
    "DetailedStrategy",
    "FallbackStrategy",
    "FlexibleStrategy",
    "GrammarStrategy",
    "LineParser",
    "NaturalLanguageStrategy",
    "PlanParser",
    "StandardStrategy",
    "estimate_difficulty",
    "generate_parsing_suggestions",
    "generate_plan_parsing_suggestions",
    "get_default_parser",
    "parse_line",
    "parse_plan",
    "parse_with_context",
]
