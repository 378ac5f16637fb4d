"""
Line grammars

The five grammars tried by the line parser, in precedence order, plus the
bare sets-x-reps shape used for "same exercise, new set" shorthand.

    detailed          3x10 bench press @60kg rpe 8 rest 90s tempo 3-1-1 felt good
    standard          3x10 bench press @60kg rpe 8 / bench press 3x10 60kg
    flexible          squat 5 sets 8 reps 120kg / deadlift: 5 reps x 3 sets @ 150kg
                      bench 60kg x 8 x 3
    compact           deadlift 100x5 rpe 8 / 100kg x 5 squat
    natural_language  did 3 sets of 10 reps on bench press with 70kg
"""

from typing import List

from .base import (
    BARE_WEIGHT,
    COLON,
    EXERCISE,
    NOTES,
    REST,
    RPE,
    SETS_X_REPS,
    TEMPO,
    TIGHT_SETS_X_REPS,
    WEIGHT,
    WITH_WEIGHT,
    GrammarStrategy,
    compile_grammar,
)

_SETS = r"(?P<sets>\d+) ?sets?\b"
_REPS = r"(?P<reps>\d+) ?reps?\b"
_X = r" ?[x×] ?"


class DetailedStrategy(GrammarStrategy):
    """Sets-first line with every optional field."""
    name = "detailed"
    patterns = [
        compile_grammar(
            SETS_X_REPS, " ", EXERCISE, WEIGHT, "?", RPE, "?", REST, "?", TEMPO, "?", NOTES
        ),
    ]


class StandardStrategy(GrammarStrategy):
    """sets x reps next to the exercise, in either order."""
    name = "standard"
    patterns = [
        compile_grammar(SETS_X_REPS, " ", EXERCISE, WEIGHT, "?", RPE, "?", NOTES),
        compile_grammar(EXERCISE, COLON, " ", TIGHT_SETS_X_REPS, WEIGHT, "?", RPE, "?", NOTES),
    ]


class FlexibleStrategy(GrammarStrategy):
    """Spelled-out separators: "5 sets 8 reps", "5 reps x 3 sets", "60kg x 8 x 3"."""
    name = "flexible"
    patterns = [
        compile_grammar(
            EXERCISE, COLON, " ", _SETS, "(?: of)? ", _REPS, WEIGHT, "?", RPE, "?", NOTES
        ),
        compile_grammar(EXERCISE, COLON, " ", _REPS, _X, _SETS, WEIGHT, "?", RPE, "?", NOTES),
        # Trailing sets count is required; the single-set shape belongs to compact
        compile_grammar(
            EXERCISE, COLON, " ", BARE_WEIGHT, _X, r"(?P<reps>\d+)", _X, r"(?P<sets>\d+)",
            RPE, "?", NOTES
        ),
    ]


class CompactStrategy(GrammarStrategy):
    """Single set written as weight x reps."""
    name = "compact"
    default_sets = 1
    patterns = [
        compile_grammar(EXERCISE, COLON, " ", BARE_WEIGHT, _X, r"(?P<reps>\d+)", RPE, "?", NOTES),
        compile_grammar(BARE_WEIGHT, _X, r"(?P<reps>\d+) ", EXERCISE, RPE, "?", NOTES),
    ]


class NaturalLanguageStrategy(GrammarStrategy):
    """Conversational phrasing built around "N sets of M reps"."""
    name = "natural_language"
    patterns = [
        compile_grammar(
            "did ", _SETS, " of ", _REPS, "(?: (?:on|of))? ", EXERCISE,
            WITH_WEIGHT, "?", RPE, "?", NOTES
        ),
        compile_grammar(
            EXERCISE, " for ", _SETS, " of ", _REPS, WITH_WEIGHT, "?", RPE, "?", NOTES
        ),
        compile_grammar(
            _SETS, " of ", _REPS, "(?: (?:on|of))? ", EXERCISE, WITH_WEIGHT, "?", RPE, "?", NOTES
        ),
    ]


class ContextStrategy(GrammarStrategy):
    """Bare "3x8 @60kg" with no exercise; the caller supplies the name."""
    name = "context"
    patterns = [
        compile_grammar(SETS_X_REPS, WEIGHT, "?", RPE, "?", NOTES),
    ]


DEFAULT_STRATEGIES: List[GrammarStrategy] = [
    DetailedStrategy(),
    StandardStrategy(),
    FlexibleStrategy(),
    CompactStrategy(),
    NaturalLanguageStrategy(),
]
