"""Exercise catalog.

Read-only reference data mapping canonical exercises to their category,
equipment, aliases and display glyph. The built-in catalog ships as package
data and is loaded once per process; custom catalogs can be built from any
iterable of definitions and injected into the normalizer and parsers.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

from gymnotes_parser.models import ExerciseDefinition

logger = logging.getLogger(__name__)

DEFAULT_GLYPH = "🏃‍♂️"

# Keyword fallbacks for names that are not in the catalog, checked in order
_GLYPH_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("bench", "press"), "🏋️‍♂️"),
    (("squat",), "🦵"),
    (("deadlift",), "💪"),
    (("pull",), "🤲"),
    (("row",), "🚣‍♂️"),
    (("curl", "dip", "push"), "💪"),
)


class ExerciseCatalog:
    """Immutable lookup tables over a fixed set of exercise definitions."""

    _default_cache: Optional["ExerciseCatalog"] = None

    def __init__(self, definitions: Iterable[ExerciseDefinition]):
        self._definitions: Tuple[ExerciseDefinition, ...] = tuple(definitions)
        self._by_name: Dict[str, ExerciseDefinition] = {}
        self._alias_index: Dict[str, ExerciseDefinition] = {}
        self._alias_pairs: List[Tuple[str, ExerciseDefinition]] = []

        for definition in self._definitions:
            self._by_name.setdefault(definition.name.lower(), definition)
            # Canonical names are self-aliases so normalization is idempotent
            for alias in (definition.name.lower(), *definition.aliases):
                alias = alias.strip().lower()
                if not alias:
                    continue
                # First inserted definition wins on overlapping aliases
                if alias not in self._alias_index:
                    self._alias_index[alias] = definition
                self._alias_pairs.append((alias, definition))

    @classmethod
    def load_default(cls) -> "ExerciseCatalog":
        """Load the built-in catalog from package data (cached per process)."""
        if cls._default_cache is not None:
            return cls._default_cache

        catalog_path = Path(__file__).parent / "data" / "exercise_catalog.json"

        try:
            with open(catalog_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            definitions = [ExerciseDefinition(**item) for item in data.get("exercises", [])]
        except Exception as e:
            logger.error(f"Failed to load exercise catalog: {e}")
            definitions = []

        cls._default_cache = cls(definitions)
        logger.debug(f"Loaded exercise catalog with {len(definitions)} exercises")
        return cls._default_cache

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions)

    def lookup(self, token: str) -> Optional[ExerciseDefinition]:
        """Exact, case-insensitive alias lookup."""
        if not token:
            return None
        return self._alias_index.get(" ".join(token.split()).lower())

    def all_aliases(self) -> List[Tuple[str, ExerciseDefinition]]:
        """Every (alias, definition) pair in catalog insertion order."""
        return list(self._alias_pairs)

    def by_category(self, category: str) -> List[str]:
        category = category.strip().lower()
        return [d.name for d in self._definitions if d.category == category]

    def categories(self) -> Set[str]:
        return {d.category for d in self._definitions}

    def all_exercises(self) -> List[str]:
        return [d.name for d in self._definitions]

    def find_by_name(self, name: str) -> Optional[ExerciseDefinition]:
        """Definition for a canonical name, or None."""
        return self._by_name.get(name.strip().lower()) if name else None

    def glyph_for(self, name: str) -> str:
        """Display glyph for an exercise, falling back to keyword matching."""
        definition = self.find_by_name(name) or self.lookup(name)
        if definition and definition.glyph:
            return definition.glyph

        lowered = (name or "").lower()
        for keywords, glyph in _GLYPH_KEYWORDS:
            if any(keyword in lowered for keyword in keywords):
                return glyph
        return DEFAULT_GLYPH
