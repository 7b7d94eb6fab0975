from __future__ import annotations

import pytest

from verbi.app.filters import find_verbs
from verbi.app.models import VerbRecord


def test_empty_query_returns_everything_in_order(sample_verbs) -> None:
    matches, found = find_verbs(sample_verbs, "")
    assert matches == sample_verbs
    assert found is True


def test_none_query_is_empty_query(sample_verbs) -> None:
    assert find_verbs(sample_verbs, None) == (sample_verbs, True)


@pytest.mark.parametrize("query", ["ESSERE", "essere", "EsSeRe"])
def test_match_ignores_case(query: str) -> None:
    verbs = [VerbRecord(verb="essere"), VerbRecord(verb="avere")]
    matches, found = find_verbs(verbs, query)
    assert matches == [verbs[0]]
    assert found is True


def test_match_is_exact_not_substring() -> None:
    verbs = [VerbRecord(verb="essere")]
    assert find_verbs(verbs, "esser") == ([], False)
    assert find_verbs(verbs, "esseree") == ([], False)


def test_duplicates_are_all_returned(sample_verbs) -> None:
    matches, found = find_verbs(sample_verbs, "essere")
    assert [m.italian_forms for m in matches] == [["io sono", "tu sei"], ["io sono (bis)"]]
    assert found is True


def test_unknown_verb_not_found(sample_verbs) -> None:
    assert find_verbs(sample_verbs, "cantare") == ([], False)


@pytest.mark.parametrize("query", ["", "essere"])
def test_empty_dataset_never_found(query: str) -> None:
    assert find_verbs([], query) == ([], False)
