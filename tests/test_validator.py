"""Tests for rights_atlas/orchestrator/validator.py."""

from __future__ import annotations

import pytest

from rights_atlas.models.citation import Candidate, CitationDraft
from rights_atlas.orchestrator.validator import ResultValidator, coerce_index

CANDIDATES = [
    Candidate(title="ICCPR", uri="https://ohchr.org/iccpr"),
    Candidate(title="UDHR", uri="https://www.un.org/udhr"),
]


@pytest.fixture
def validator():
    return ResultValidator()


class TestCoerceIndex:
    @pytest.mark.parametrize("value, expected", [(0, 0), (3, 3), (2.0, 2), (-1, -1)])
    def test_integral_values(self, value, expected):
        assert coerce_index(value) == expected

    @pytest.mark.parametrize("value", [None, "1", 1.5, True, False, [0], {"i": 0}])
    def test_non_integral_values(self, value):
        assert coerce_index(value) is None


class TestValidate:
    def test_maps_index_to_candidate_uri(self, validator):
        result = validator.validate(
            [CitationDraft(url_index=0, title="ICCPR (1966)", year="1966", reference="Art. 19")],
            CANDIDATES,
        )
        assert len(result.citations) == 1
        citation = result.citations[0]
        assert citation.uri == "https://ohchr.org/iccpr"
        assert citation.title == "ICCPR (1966)"
        assert citation.date == "1966"
        assert citation.reference == "Art. 19"

    def test_out_of_range_index_dropped(self, validator):
        drafts = [
            CitationDraft(url_index=0),
            CitationDraft(url_index=5),
            CitationDraft(url_index=1),
        ]
        result = validator.validate(drafts, CANDIDATES)
        assert [c.uri for c in result.citations] == [
            "https://ohchr.org/iccpr",
            "https://www.un.org/udhr",
        ]
        assert result.rejected == 1

    @pytest.mark.parametrize("index", [-1, 2, 100, None, "0", 0.5, True])
    def test_invalid_indices_never_produce_citations(self, validator, index):
        result = validator.validate([CitationDraft(url_index=index)], CANDIDATES)
        assert result.citations == []
        assert result.rejected == 1

    def test_uris_always_come_from_candidates(self, validator):
        drafts = [CitationDraft(url_index=i % 4, title="https://fabricated.example/") for i in range(8)]
        result = validator.validate(drafts, CANDIDATES)
        allowed = {c.uri for c in CANDIDATES}
        assert all(c.uri in allowed for c in result.citations)

    def test_dedup_keeps_first_occurrence(self, validator):
        drafts = [
            CitationDraft(url_index=1, title="First", reference="first"),
            CitationDraft(url_index=1, title="Second", reference="second"),
        ]
        result = validator.validate(drafts, CANDIDATES)
        assert len(result.citations) == 1
        assert result.citations[0].reference == "first"
        assert result.duplicates == 1

    def test_missing_title_falls_back_to_candidate(self, validator):
        result = validator.validate([CitationDraft(url_index=1, year="")], CANDIDATES)
        assert result.citations[0].title == "UDHR"
        assert result.citations[0].date == "N/A"

    def test_empty_candidates_rejects_everything(self, validator):
        result = validator.validate([CitationDraft(url_index=0)], [])
        assert result.citations == []
        assert result.rejected == 1
