"""
Tests for ingredient name scoring and the two-pass matcher.
"""

import logging

import pytest

from services import (
    IngredientMatcher,
    InMemoryReferenceRepository,
    MatchingConfig,
    ReferenceIngredient,
    ReferenceRepository,
    normalize_name,
    score_similarity,
)


def make_row(name, calories=100.0):
    return ReferenceIngredient(
        name=name,
        calories_per_100g=calories,
        protein_g_per_100g=1.0,
        carbs_g_per_100g=1.0,
        fat_g_per_100g=1.0,
        sodium_mg_per_100g=1.0,
    )


class RecordingRepository(ReferenceRepository):
    """Wraps a repository and remembers every (fragment, limit) query."""

    def __init__(self, inner):
        self.inner = inner
        self.queries = []

    def search(self, fragment, limit):
        self.queries.append((fragment, limit))
        return self.inner.search(fragment, limit)


class FailingRepository(ReferenceRepository):
    """Raises for the given fragments, delegates everything else."""

    def __init__(self, inner=None, failing=None):
        self.inner = inner or InMemoryReferenceRepository()
        self.failing = failing

    def search(self, fragment, limit):
        if self.failing is None or fragment in self.failing:
            raise RuntimeError('database unavailable')
        return self.inner.search(fragment, limit)


class UnfilteredRepository(ReferenceRepository):
    """Returns every row, complete or not."""

    def __init__(self, rows):
        self.rows = rows

    def search(self, fragment, limit):
        return self.rows[:limit]


class MappingRepository(ReferenceRepository):
    """Canned rows per fragment, regardless of substring rules."""

    def __init__(self, results):
        self.results = results

    def search(self, fragment, limit):
        return self.results.get(fragment, [])[:limit]


# ---------------------------------------------
# normalize_name
# ---------------------------------------------

def test_normalize_name():
    assert normalize_name('Chicken, Breast (raw) 2%') == 'chicken breast raw'
    assert normalize_name('  OLIVE   oil ') == 'olive oil'
    assert normalize_name('') == ''
    assert normalize_name(None) == ''


# ---------------------------------------------
# score_similarity
# ---------------------------------------------

def test_exact_match_scores_one():
    assert score_similarity('Olive Oil', 'olive oil') == 1.0
    assert score_similarity('chicken, breast', 'Chicken Breast') == 1.0


def test_containment_scores():
    assert score_similarity('tomato', 'Tomatoes, red, ripe') == 0.95
    assert score_similarity('chicken breast fillet', 'Chicken breast') == 0.9


def test_word_overlap():
    # {red, bell, pepper} vs {pepper, sweet, red, raw}
    assert score_similarity('red bell pepper', 'Pepper, sweet, red, raw') == pytest.approx(0.4)


def test_short_words_are_ignored():
    assert score_similarity('ab', 'xy z') == 0.0


def test_important_word_bonus():
    # 2/5 overlap plus the bonus for "chicken"
    assert score_similarity('grilled chicken thigh', 'Chicken, thigh, meat only') == pytest.approx(0.5)


def test_wrong_type_penalty():
    # 3/4 overlap + 0.1 bonus - 0.6 penalty for fish
    assert score_similarity('cod liver oil', 'Fish oil, cod liver') == pytest.approx(0.25)


def test_score_is_clamped_at_zero():
    assert score_similarity('salted butter', 'Butterbur, raw') == 0.0


def test_only_first_wrong_type_rule_applies():
    config = MatchingConfig(
        important_words=(),
        wrong_type_rules=[
            (('oil',), ('sardine',), 0.1),
            (('salt',), ('meat',), 0.2),
        ],
    )
    # 1/5 overlap, first rule fires, second is skipped
    assert score_similarity('oil salt mix', 'sardine meat mix', config) == pytest.approx(0.1)


@pytest.mark.parametrize('input_name,candidate', [
    ('olive oil', 'Sardines, canned in oil'),
    ('sea salt', 'Nuts, mixed, salted'),
    ('unsalted butter', 'Butterbur, canned'),
    ('red wine vinegar', 'Wine, table, red'),
    ('avocado', 'Guacamole'),
])
def test_score_in_unit_interval(input_name, candidate):
    score = score_similarity(input_name, candidate)
    assert 0.0 <= score <= 1.0


# ---------------------------------------------
# IngredientMatcher
# ---------------------------------------------

def test_synonym_pass_skips_fuzzy_on_strong_hit(repository):
    recording = RecordingRepository(repository)
    match = IngredientMatcher(recording).find_match('ripe tomatoes')

    assert match.reference_name == 'Tomatoes, red, ripe, raw'
    assert match.match_type == 'synonym'
    assert match.similarity == 0.95
    assert recording.queries == [
        ('Tomatoes, red, ripe', 5),
        ('tomatoes raw', 5),
        ('tomato raw', 5),
    ]


def test_synonym_lookup_is_case_insensitive(repository):
    match = IngredientMatcher(repository).find_match('  Olive Oil ')
    assert match.reference_name == 'Olive oil, extra virgin'
    assert match.match_type == 'synonym'


def test_fuzzy_pass_uses_raw_name(repository):
    recording = RecordingRepository(repository)
    match = IngredientMatcher(recording).find_match('Apple')

    assert recording.queries == [('Apple', 15)]
    assert match.reference_name == 'Apples, raw, with skin'
    assert match.match_type == 'fuzzy'
    assert match.similarity == 0.95


def test_weak_synonym_hit_falls_through_to_fuzzy():
    repo = RecordingRepository(MappingRepository({
        'SALT': [make_row('Nuts, mixed')],
        'salt': [make_row('Salt, table')],
    }))
    match = IngredientMatcher(repo).find_match('salt')

    assert repo.queries == [('SALT', 5), ('salt', 15)]
    assert match.reference_name == 'Salt, table'
    assert match.match_type == 'fuzzy'
    assert match.similarity == 0.95


def test_best_candidate_wins():
    repo = InMemoryReferenceRepository([
        make_row('Ground beef, 80% lean'),
        make_row('Ground beef'),
        make_row('Sauce, ground beef and tomato'),
    ])
    match = IngredientMatcher(repo).find_match('ground beef')
    assert match.reference_name == 'Ground beef'
    assert match.similarity == 1.0


def test_ties_keep_repository_order():
    repo = InMemoryReferenceRepository([
        make_row('Pasta, dry, enriched', calories=371),
        make_row('Pasta, fresh-made', calories=288),
    ])
    match = IngredientMatcher(repo).find_match('pasta')
    assert match.similarity == 0.95
    assert match.reference_name == 'Pasta, dry, enriched'


def test_incomplete_rows_are_never_candidates():
    incomplete = make_row('Quinoa, cooked')
    incomplete.protein_g_per_100g = None
    nameless = make_row(None)
    matcher = IngredientMatcher(UnfilteredRepository([incomplete, nameless]))

    assert matcher.search_candidates('quinoa') == []
    assert matcher.find_match('quinoa') is None


def test_in_memory_repository_skips_incomplete_rows(repository):
    assert repository.search('quinoa', 15) == []
    assert IngredientMatcher(repository).find_match('quinoa') is None


def test_candidates_below_floor_are_dropped():
    matcher = IngredientMatcher(UnfilteredRepository([make_row('Pepper, sweet, red, raw')]))

    candidates = matcher.search_candidates('red bell pepper')
    assert [c.similarity for c in candidates] == [pytest.approx(0.4)]
    assert matcher.find_match('red bell pepper') is None


def test_empty_repository_returns_none():
    assert IngredientMatcher(InMemoryReferenceRepository()).find_match('chicken breast') is None


def test_repository_error_yields_no_match(caplog):
    matcher = IngredientMatcher(FailingRepository())

    with caplog.at_level(logging.WARNING, logger='services.matching'):
        assert matcher.find_match('chicken breast') is None

    assert 'Reference search failed' in caplog.text


def test_repository_error_in_synonym_pass_still_runs_fuzzy():
    inner = InMemoryReferenceRepository([
        make_row('Chicken, breast, meat only'),
        make_row('Chicken breast, grilled'),
    ])
    assert IngredientMatcher(inner).find_match('chicken breast').match_type == 'synonym'

    failing = FailingRepository(inner, failing={'Chicken, breast, meat only', 'chicken, broilers'})
    match = IngredientMatcher(failing).find_match('chicken breast')

    assert match.match_type == 'fuzzy'
    assert match.reference_name == 'Chicken breast, grilled'


def test_matcher_is_repeatable(repository):
    matcher = IngredientMatcher(repository)
    first = matcher.find_match('olive oil')
    second = matcher.find_match('olive oil')
    assert first == second


def test_keyword_bonus_comes_from_config():
    config = MatchingConfig(important_word_bonus=0.3)
    # 2/5 overlap plus the configured bonus
    assert score_similarity('grilled chicken thigh', 'Chicken, thigh, meat only', config) == pytest.approx(0.7)


def test_min_word_length_comes_from_config():
    assert score_similarity('ab cd', 'ab ef') == 0.0
    config = MatchingConfig(min_word_length=2)
    assert score_similarity('ab cd', 'ab ef', config) == pytest.approx(1 / 3)
