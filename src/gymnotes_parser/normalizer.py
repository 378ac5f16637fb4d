"""Exercise name normalization.

Resolves a free-text exercise token to a canonical catalog name by exact
alias lookup, then a simple containment/word-overlap similarity score, then
a title-cased fallback. The scoring formula and threshold are tuned together;
swapping in another metric changes match outcomes.
"""
import logging
from typing import Optional

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.utils import collapse_whitespace, title_case

logger = logging.getLogger(__name__)

FUZZY_THRESHOLD = 0.6
CONTAINMENT_WEIGHT = 0.8


def similarity(a: str, b: str) -> float:
    """Score two lower-cased names in [0, 1].

    Containment (either string inside the other) scores the length ratio
    scaled by 0.8; otherwise the score is the share of common words over the
    larger word count.
    """
    if not a or not b:
        return 0.0

    if a in b or b in a:
        shorter, longer = sorted((a, b), key=len)
        return len(shorter) / len(longer) * CONTAINMENT_WEIGHT

    words_a = a.split()
    words_b = b.split()
    common = set(words_a) & set(words_b)
    return len(common) / max(len(words_a), len(words_b))


class ExerciseNormalizer:
    """Maps raw exercise tokens onto canonical catalog names."""

    def __init__(self, catalog: Optional[ExerciseCatalog] = None):
        self.catalog = catalog or ExerciseCatalog.load_default()

    def normalize(self, raw_token: str) -> str:
        key = collapse_whitespace(raw_token or "").lower()
        if not key:
            return ""

        definition = self.catalog.lookup(key)
        if definition:
            return definition.name

        match = self.fuzzy_match(key)
        if match:
            return match

        return title_case(key)

    def fuzzy_match(self, key: str) -> Optional[str]:
        """Canonical name of the best alias scoring above the threshold."""
        best_score = FUZZY_THRESHOLD
        best_name = None

        for alias, definition in self.catalog.all_aliases():
            score = similarity(key, alias)
            # Strict comparison keeps the first inserted alias on ties
            if score > best_score:
                best_score = score
                best_name = definition.name

        if best_name:
            logger.debug(f"Fuzzy matched '{key}' -> '{best_name}' ({best_score:.2f})")
        return best_name
