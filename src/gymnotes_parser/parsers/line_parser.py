"""
Line Parser

Turns one loosely structured line ("3x10 bench press @60kg rpe 8 felt easy")
into a ParsedEntry by trying the grammar strategies strictly in order. The
first grammar that matches the whole line wins; its exercise token is then
normalized against the catalog.

A line no grammar accepts is not an error: parse_line returns None and
parse_entry attaches suggestions the caller can show to the user.
"""

import re
import logging
from typing import List, Optional, Protocol, Sequence

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.config import settings
from gymnotes_parser.models import LineParseResult, ParsedEntry
from gymnotes_parser.normalizer import ExerciseNormalizer
from gymnotes_parser.utils import collapse_whitespace, lower_aligned
from gymnotes_parser.validator import validate_entry

from .base import GrammarStrategy
from .strategies import DEFAULT_STRATEGIES, ContextStrategy

logger = logging.getLogger(__name__)

EXAMPLE_FORMATS = 'Examples: "3x10 bench press @60kg", "squat 100x5", "deadlift 3x5 @120kg"'

_HAS_DIGIT = re.compile(r"\d")
_EXERCISE_WORDS = re.compile(r"bench|squat|deadlift|press|curl|row|pull|push|dip|lunge", re.IGNORECASE)


class FallbackStrategy(Protocol):
    """Optional last-resort parser (e.g. an AI completion service)."""

    def try_parse(self, text: str) -> Optional[ParsedEntry]:
        ...


def generate_parsing_suggestions(text: str) -> List[str]:
    """Input-derived hints for a line no grammar accepted."""
    suggestions: List[str] = []
    stripped = (text or "").strip()

    if not stripped:
        suggestions.append('Type your workout like "3x10 bench press @60kg"')
        return suggestions

    has_numbers = bool(_HAS_DIGIT.search(stripped))
    has_exercise_words = bool(_EXERCISE_WORDS.search(stripped))

    if not has_numbers:
        suggestions.append('Add sets and reps like "3x10"')
        suggestions.append(f'Try: "3x10 {stripped}"')

    if not has_exercise_words:
        suggestions.append('Include exercise name like "bench press" or "squat"')

    if has_numbers and has_exercise_words:
        suggestions.append('Try: "3x10 exercise name @weight"')
        suggestions.append('Or: "exercise name 3x10 60kg"')

    suggestions.append(EXAMPLE_FORMATS)
    return suggestions


class LineParser:
    """Ordered grammar dispatch for single workout entries."""

    def __init__(
        self,
        catalog: Optional[ExerciseCatalog] = None,
        strategies: Optional[Sequence[GrammarStrategy]] = None,
        fallback: Optional[FallbackStrategy] = None,
    ):
        self.catalog = catalog or ExerciseCatalog.load_default()
        self.normalizer = ExerciseNormalizer(self.catalog)
        self.strategies: List[GrammarStrategy] = list(
            strategies if strategies is not None else DEFAULT_STRATEGIES
        )
        self.fallback = fallback
        self._context_strategy = ContextStrategy()

    def parse_line(self, text: str) -> Optional[ParsedEntry]:
        """Parse one line, or return None when no grammar fits all of it."""
        prepared = self._prepare(text)
        if prepared is None:
            return None
        original, line = prepared

        for strategy in self.strategies:
            entry = strategy.match(line, original)
            if entry is not None:
                return entry.model_copy(
                    update={"exercise": self.normalizer.normalize(entry.exercise)}
                )

        logger.debug(f"No grammar matched: {line!r}")
        return None

    def parse_with_context(self, text: str, previous_exercise: Optional[str]) -> Optional[ParsedEntry]:
        """
        Parse a line, treating bare "3x8 @60kg" as another set of the previous exercise.

        Args:
            text: The line to parse
            previous_exercise: Name of the last logged exercise, if any

        Returns:
            ParsedEntry or None
        """
        entry = self.parse_line(text)
        if entry is not None or not previous_exercise or not previous_exercise.strip():
            return entry

        prepared = self._prepare(text)
        if prepared is None:
            return None
        original, line = prepared

        entry = self._context_strategy.match(line, original)
        if entry is None:
            return None
        return entry.model_copy(update={"exercise": previous_exercise.strip()})

    def parse_entry(self, text: str, previous_exercise: Optional[str] = None) -> LineParseResult:
        """Full single-entry path: grammars, optional fallback, validation, suggestions.

        ``success`` means the line was understood; range problems are reported
        in ``errors`` for the caller to block on or merely display.
        """
        entry = self.parse_with_context(text, previous_exercise)

        if entry is None and self.fallback is not None and (text or "").strip():
            entry = self._try_fallback(text)

        if entry is None:
            return LineParseResult(success=False, suggestions=generate_parsing_suggestions(text))

        validation = validate_entry(entry)
        return LineParseResult(success=True, entry=entry, errors=validation.errors)

    def _try_fallback(self, text: str) -> Optional[ParsedEntry]:
        try:
            entry = self.fallback.try_parse(text)
        except Exception as e:
            logger.warning(f"Fallback parser failed, treating as no match: {e}")
            return None

        if entry is None:
            return None
        return entry.model_copy(
            update={"exercise": self.normalizer.normalize(entry.exercise), "strategy": "ai"}
        )

    @staticmethod
    def _prepare(text: str) -> Optional[tuple]:
        original = collapse_whitespace(text or "")
        if not original:
            return None
        if len(original) > settings.MAX_LINE_LENGTH:
            logger.warning(f"Line of {len(original)} chars exceeds MAX_LINE_LENGTH, skipping")
            return None
        return original, lower_aligned(original)


_default_parser: Optional[LineParser] = None


def get_default_parser() -> LineParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = LineParser()
    return _default_parser


def parse_line(text: str) -> Optional[ParsedEntry]:
    return get_default_parser().parse_line(text)


def parse_with_context(text: str, previous_exercise: Optional[str]) -> Optional[ParsedEntry]:
    return get_default_parser().parse_with_context(text, previous_exercise)
