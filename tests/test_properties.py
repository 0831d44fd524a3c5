"""Property-based tests for strmetric using Hypothesis."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from hypothesis import given
from hypothesis import strategies as st

from strmetric.distance import Levenshtein, LevenshteinMetric, NGramMetric

sizes = st.integers(min_value=1, max_value=4)
short_text = st.text(max_size=12)

# ---------------------------------------------------------------------------
# Levenshtein
# ---------------------------------------------------------------------------

@given(short_text)
def test_levenshtein_reflexive(s: str) -> None:
    assert LevenshteinMetric().similarity(s, s) == 1.0
    assert LevenshteinMetric().similarity(s, list(s)) == 1.0


@given(short_text, short_text)
def test_levenshtein_bounds(s1: str, s2: str) -> None:
    assert 0.0 <= LevenshteinMetric().similarity(s1, s2) <= 1.0


@given(short_text, short_text)
def test_levenshtein_symmetry(s1: str, s2: str) -> None:
    """Classic edit distance is symmetric."""
    metric = LevenshteinMetric()
    assert metric.similarity(s1, s2) == metric.similarity(s2, s1)
    assert Levenshtein.distance(s1, s2) == Levenshtein.distance(s2, s1)


@given(short_text, short_text, short_text)
def test_levenshtein_triangle_inequality(s1: str, s2: str, s3: str) -> None:
    d12 = Levenshtein.distance(s1, s2)
    d23 = Levenshtein.distance(s2, s3)
    d13 = Levenshtein.distance(s1, s3)
    assert d13 <= d12 + d23


@given(short_text, short_text)
def test_levenshtein_distance_bounded_by_longer(s1: str, s2: str) -> None:
    dist = Levenshtein.distance(s1, s2)
    assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))


# ---------------------------------------------------------------------------
# N-gram
# ---------------------------------------------------------------------------

@given(
    st.text(alphabet="abcx\x00", max_size=10),
    st.text(alphabet="abcx\x00", max_size=10),
    sizes,
)
def test_ngram_symmetry(s1: str, s2: str, n: int) -> None:
    """Padding s1 up front and s2 per column still yields a symmetric score."""
    metric = NGramMetric(n)
    assert metric.similarity(s1, s2) == metric.similarity(s2, s1)


@given(short_text, sizes)
def test_ngram_reflexive(s: str, n: int) -> None:
    metric = NGramMetric(n)
    assert metric.similarity(s, s) == 1.0
    # a list forces the full computation instead of the equality shortcut
    assert metric.similarity(s, list(s)) == 1.0


@given(short_text, short_text, sizes)
def test_ngram_bounds(s1: str, s2: str, n: int) -> None:
    assert 0.0 <= NGramMetric(n).similarity(s1, s2) <= 1.0


@given(short_text, short_text)
def test_unigram_equals_levenshtein(s1: str, s2: str) -> None:
    assert NGramMetric(1).similarity(s1, s2) == LevenshteinMetric().similarity(s1, s2)


@given(
    st.text(alphabet="ab", min_size=2, max_size=8),
    st.text(alphabet="xy", min_size=2, max_size=8),
)
def test_ngram_disjoint_alphabets_score_zero(s1: str, s2: str) -> None:
    assert NGramMetric(2).similarity(s1, s2) == 0.0


# ---------------------------------------------------------------------------
# Absence
# ---------------------------------------------------------------------------

@given(short_text, sizes)
def test_absent_scores_zero(s: str, n: int) -> None:
    for metric in (LevenshteinMetric(), NGramMetric(n)):
        assert metric.similarity(None, s) == 0.0
        assert metric.similarity(s, None) == 0.0


# ---------------------------------------------------------------------------
# Shared instances
# ---------------------------------------------------------------------------

def test_shared_instance_across_threads() -> None:
    metric = NGramMetric(3)
    pairs = [("night", "nacht"), ("kitten", "sitting"), ("abc", "abd")] * 50
    expected = [metric.similarity(a, b) for a, b in pairs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda p: metric.similarity(*p), pairs))
    assert results == expected
