"""
Grammar strategy base

Shared regex fragments and the abstract base class for the line grammars.
Patterns run against a lower-cased line whose whitespace has been collapsed
to single spaces, and must match the whole line.
"""

import re
import logging
from abc import ABC
from typing import ClassVar, List, Optional, Pattern

from gymnotes_parser.models import ParsedEntry, StrategyName, WeightUnit
from gymnotes_parser.utils import to_float, to_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regex fragments
# ---------------------------------------------------------------------------

NUM = r"\d+(?:\.\d+)?"
# A unit may run straight into the "x" of "100kgx5"
UNIT = r"(?:kgs?|kilos?|kilograms?|lbs?|pounds?)(?![a-wyz0-9])"

# Words that delimit fields and so can never be part of an exercise name
RESERVED = r"(?:rpe|rest|tempo|with|for|at|did|sets?|reps?|x)\b"
WORD = rf"(?!{RESERVED})[a-z][a-z'\-]*"
# Each extra word starts with a space, so the split points are unambiguous
EXERCISE = rf"(?P<exercise>{WORD}(?: {WORD})*)"

# Sets are one or two digits: "100x5" is weight x reps, not 100 sets
SETS_X_REPS = r"(?P<sets>\d{1,2}) ?[x×] ?(?P<reps>\d+)"
# Exercise-first lines need the unspaced form; "curl 20 x 10" is weight x reps
TIGHT_SETS_X_REPS = r"(?P<sets>\d{1,2})[x×](?P<reps>\d+)"
WEIGHT = rf"(?:(?: ?@ ?| at ?| )(?P<weight>{NUM}) ?(?P<unit>{UNIT})?)"
WITH_WEIGHT = rf"(?: (?:with|at|@) ?(?P<weight>{NUM}) ?(?P<unit>{UNIT})?)"
BARE_WEIGHT = rf"(?P<weight>{NUM}) ?(?P<unit>{UNIT})?"
RPE = r"(?: @? ?rpe ?(?P<rpe>\d+))"
REST = r"(?: rest ?(?P<rest>\d+) ?(?P<rest_unit>s|secs?|seconds?|m|mins?|minutes?)?\b)"
TEMPO = r"(?: tempo ?(?P<tempo>\d+(?:-\d+)*))"
# A comma or semicolon may separate the notes from the rest of the line
NOTES = r"(?:(?:[,;]? |[,;] ?)(?P<notes>.+))?"
COLON = r":?"

_UNIT_AFTER_WEIGHT = re.compile(rf"^ ?({UNIT})")


def compile_grammar(*parts: str) -> Pattern:
    """Join fragments into one anchored pattern."""
    return re.compile("^" + "".join(parts) + "$")


def detect_unit(text_after_weight: str) -> WeightUnit:
    """Unit named right after a weight token; kg when there is none."""
    match = _UNIT_AFTER_WEIGHT.match(text_after_weight or "")
    if match and match.group(1).startswith(("lb", "pound")):
        return "lbs"
    return "kg"


def rest_to_seconds(value: Optional[str], unit: Optional[str]) -> Optional[int]:
    seconds = to_int(value)
    if seconds is None:
        return None
    if unit and unit.startswith("m"):
        return seconds * 60
    return seconds


class GrammarStrategy(ABC):
    """One named grammar: an ordered list of whole-line patterns.

    Subclasses declare ``name`` and ``patterns`` using the named groups
    ``exercise``, ``sets``, ``reps``, ``weight``, ``unit``, ``rpe``, ``rest``,
    ``rest_unit``, ``tempo`` and ``notes``. Groups a pattern does not declare
    fall back to defaults (``sets`` to ``default_sets``).
    """

    name: ClassVar[StrategyName]
    patterns: ClassVar[List[Pattern]] = []
    default_sets: ClassVar[int] = 1

    def match(self, line: str, original: Optional[str] = None) -> Optional[ParsedEntry]:
        """
        Try each pattern against the whole line.

        Args:
            line: Lower-cased, whitespace-collapsed input
            original: The same text with its original casing, used for notes

        Returns:
            ParsedEntry with the raw (un-normalized) exercise token, or None
        """
        for pattern in self.patterns:
            m = pattern.fullmatch(line)
            if m:
                logger.debug(f"{self.name} grammar matched: {line!r}")
                return self.extract(m, line, original)
        return None

    def extract(self, m: "re.Match", line: str, original: Optional[str] = None) -> ParsedEntry:
        groups = m.groupdict()

        sets = to_int(groups.get("sets"))
        weight = to_float(groups.get("weight"))
        unit = detect_unit(line[m.end("weight"):]) if weight is not None else "kg"

        return ParsedEntry(
            exercise=(groups.get("exercise") or "").strip(),
            sets=self.default_sets if sets is None else sets,
            reps=to_int(groups.get("reps")) or 0,
            weight=weight,
            unit=unit,
            rpe=to_int(groups.get("rpe")),
            rest_seconds=rest_to_seconds(groups.get("rest"), groups.get("rest_unit")),
            tempo=groups.get("tempo"),
            notes=self._notes(m, line, original),
            strategy=self.name,
        )

    @staticmethod
    def _notes(m: "re.Match", line: str, original: Optional[str]) -> Optional[str]:
        if "notes" not in m.re.groupindex or m.group("notes") is None:
            return None
        notes = m.group("notes")
        # Recover the user's casing when lower-casing kept offsets aligned
        if original is not None and len(original) == len(line):
            notes = original[m.start("notes"):m.end("notes")]
        return notes.strip() or None
