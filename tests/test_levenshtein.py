from __future__ import annotations

import pytest

from strmetric.distance import Levenshtein, LevenshteinMetric


def test_kitten_sitting():
    # 3 edits over a maximum length of 7
    assert LevenshteinMetric().similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    assert Levenshtein.distance("kitten", "sitting") == 3


def test_known_distances():
    assert Levenshtein.distance("", "abc") == 3
    assert Levenshtein.distance("abc", "abc") == 0
    assert Levenshtein.distance("flaw", "lawn") == 2
    assert Levenshtein.distance("abc", "abd") == 1
    assert Levenshtein.distance("abc", "cba") == 2


def test_single_substitution():
    assert LevenshteinMetric().similarity("abc", "abd") == pytest.approx(2 / 3)


def test_no_common_characters():
    assert LevenshteinMetric().similarity("aaaa", "bbbb") == 0.0


def test_length_difference():
    # "ab" -> "abcd": 2 insertions over length 4
    assert LevenshteinMetric().similarity("ab", "abcd") == 0.5
    assert LevenshteinMetric().similarity("abcd", "ab") == 0.5


def test_distance_none_is_empty():
    assert Levenshtein.distance(None, "abc") == 3
    assert Levenshtein.distance(None, None) == 0


def test_distance_score_cutoff():
    assert Levenshtein.distance("kitten", "sitting", score_cutoff=3) == 3
    assert Levenshtein.distance("kitten", "sitting", score_cutoff=2) == 3
    assert Levenshtein.distance("kitten", "sitting", score_cutoff=1) == 2


def test_normalized():
    ns = Levenshtein.normalized_similarity("kitten", "sitting")
    nd = Levenshtein.normalized_distance("kitten", "sitting")
    assert ns == pytest.approx(4 / 7)
    assert nd == pytest.approx(3 / 7)
    assert abs(nd + ns - 1.0) < 1e-9


def test_normalized_score_cutoff():
    assert Levenshtein.normalized_similarity("kitten", "sitting", score_cutoff=0.5) > 0.5
    assert Levenshtein.normalized_similarity("kitten", "sitting", score_cutoff=0.6) == 0.0
    assert Levenshtein.normalized_distance("kitten", "sitting", score_cutoff=0.4) == 1.0
    assert Levenshtein.normalized_distance("kitten", "sitting", score_cutoff=0.5) < 0.5


def test_processor():
    assert Levenshtein.distance("HELLO", "hello", processor=str.lower) == 0
    assert Levenshtein.normalized_similarity("HELLO", "hello", processor=str.lower) == 1.0


def test_processor_skips_none():
    assert Levenshtein.normalized_similarity(None, "x", processor=str.lower) == 0.0
    assert Levenshtein.normalized_similarity(None, None, processor=str.lower) == 1.0


def test_non_string_sequences():
    assert Levenshtein.distance([1, 2, 3], [1, 3]) == 1
    assert LevenshteinMetric().similarity(["the", "cat"], ["the", "dog"]) == 0.5
