"""
Ingredient Matching Service

Functions for normalizing ingredient names, scoring them against nutrition
reference names, and picking the best reference row for a recipe ingredient.

Matching runs in two passes:
1. Synonym pass - known recipe phrases are searched by curated reference fragments
2. Fuzzy pass - the raw ingredient name is searched directly (only when the
   synonym pass found nothing convincing)
"""

import logging
import re
from dataclasses import dataclass, field

from constants import (
    INGREDIENT_SYNONYMS, IMPORTANT_WORDS, IMPORTANT_WORD_BONUS, WRONG_TYPE_RULES,
    MIN_WORD_LENGTH, SYNONYM_SEARCH_LIMIT, FUZZY_SEARCH_LIMIT, SYNONYM_CONFIDENCE,
    MIN_CANDIDATE_SIMILARITY,
)
from .types import MatchCandidate

logger = logging.getLogger(__name__)


@dataclass
class MatchingConfig:
    """Synonym table, keyword rules and thresholds used by IngredientMatcher."""
    synonyms: dict = field(default_factory=lambda: dict(INGREDIENT_SYNONYMS))
    important_words: tuple = IMPORTANT_WORDS
    important_word_bonus: float = IMPORTANT_WORD_BONUS
    min_word_length: int = MIN_WORD_LENGTH
    wrong_type_rules: list = field(default_factory=lambda: list(WRONG_TYPE_RULES))
    synonym_limit: int = SYNONYM_SEARCH_LIMIT
    fuzzy_limit: int = FUZZY_SEARCH_LIMIT
    synonym_confidence: float = SYNONYM_CONFIDENCE
    min_similarity: float = MIN_CANDIDATE_SIMILARITY


DEFAULT_CONFIG = MatchingConfig()


def normalize_name(name):
    """Lowercase, replace non-letters with spaces and collapse whitespace."""
    normalized = (name or '').lower()
    normalized = re.sub(r'[^a-z\s]', ' ', normalized)
    normalized = re.sub(r'\s+', ' ', normalized)
    return normalized.strip()


def _word_set(normalized, min_length):
    return {w for w in normalized.split(' ') if len(w) >= min_length}


def score_similarity(input_name, candidate_name, config=DEFAULT_CONFIG):
    """
    Score how well a reference name matches an ingredient name.

    Scoring:
    - 1.0 for an exact match after normalization
    - 0.95 if the candidate contains the input, 0.9 if the input contains the candidate
    - Otherwise Jaccard word overlap, +0.1 when both mention an important
      keyword (chicken, oil, ...), minus a penalty when the candidate is a
      known wrong type for the input (e.g. "oil" vs "sardine")

    Returns a score clamped to [0, 1].
    """
    normalized_input = normalize_name(input_name)
    normalized_candidate = normalize_name(candidate_name)

    if normalized_input == normalized_candidate:
        return 1.0
    if normalized_input in normalized_candidate:
        return 0.95
    if normalized_candidate in normalized_input:
        return 0.9

    input_words = _word_set(normalized_input, config.min_word_length)
    candidate_words = _word_set(normalized_candidate, config.min_word_length)
    if not input_words or not candidate_words:
        return 0.0

    score = len(input_words & candidate_words) / len(input_words | candidate_words)

    if any(word in normalized_input and word in normalized_candidate
           for word in config.important_words):
        score += config.important_word_bonus

    # Only the first rule that fires applies
    for input_terms, wrong_terms, penalty in config.wrong_type_rules:
        if any(term in normalized_input for term in input_terms):
            if any(term in normalized_candidate for term in wrong_terms):
                score -= penalty
                break

    return max(0.0, min(1.0, score))


class IngredientMatcher:
    """
    Resolves ingredient names to nutrition reference rows.

    Args:
        repository: ReferenceRepository used for substring searches
        config: MatchingConfig with synonyms, keyword rules and thresholds
    """

    def __init__(self, repository, config=None):
        self.repository = repository
        self.config = config or MatchingConfig()

    def _search(self, fragment, limit, score_against, match_type):
        """Query the repository and score each complete row. Repository errors yield no candidates."""
        try:
            rows = self.repository.search(fragment, limit)
        except Exception:
            logger.warning('Reference search failed for %r (%s pass)', fragment, match_type, exc_info=True)
            return []

        candidates = []
        for row in rows or []:
            if not row.has_complete_macros():
                continue
            candidates.append(MatchCandidate(
                reference_name=row.name,
                macros_per_100g=row.macros(),
                match_type=match_type,
                similarity=score_similarity(score_against, row.name, self.config),
            ))
        return candidates

    def search_candidates(self, ingredient_name):
        """Run the synonym pass and, if needed, the fuzzy pass. Returns unfiltered candidates."""
        candidates = []

        for fragment in self.config.synonyms.get(ingredient_name.lower().strip(), []):
            candidates.extend(
                self._search(fragment, self.config.synonym_limit, fragment, 'synonym')
            )

        if not any(c.similarity >= self.config.synonym_confidence for c in candidates):
            candidates.extend(
                self._search(ingredient_name, self.config.fuzzy_limit, ingredient_name, 'fuzzy')
            )

        return candidates

    def find_match(self, ingredient_name):
        """
        Find the best reference row for an ingredient name.

        Returns the highest scoring MatchCandidate at or above the minimum
        similarity, or None if nothing qualifies.
        """
        logger.debug('Matching ingredient %r', ingredient_name)
        candidates = [
            c for c in self.search_candidates(ingredient_name)
            if c.similarity >= self.config.min_similarity
        ]
        candidates.sort(key=lambda c: c.similarity, reverse=True)

        if not candidates:
            logger.info('No match found for %r', ingredient_name)
            return None

        best = candidates[0]
        logger.info('Matched %r -> %r (%d%%, %s)', ingredient_name, best.reference_name,
                    round(best.similarity * 100), best.match_type)
        return best
