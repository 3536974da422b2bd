"""
Tests for guest search
"""

import pytest

from app.models import Guest
from app.services.search_service import SearchService
from app.utils.text import collation_key, normalize

@pytest.fixture
def guests():
    """Guest list with accents, shared tables and similar names"""
    return [
        Guest(name="Sofía Pérez", table="4"),
        Guest(name="Carolina Barrios", table="1"),
        Guest(name="Luis Rodríguez", table="1"),
        Guest(name="Rafael Rodríguez", table="2"),
        Guest(name="Ana Lucía", table="3"),
        Guest(name="Mariana Torres", table="5"),
    ]

def test_empty_query_returns_nothing(guests):
    """An empty query means no search is active"""
    assert SearchService.search(guests, "") == []
    assert SearchService.search([], "") == []

def test_search_is_accent_and_case_insensitive(guests):
    """Query 'RODRIGUEZ' finds both accented Rodríguez guests"""
    results = SearchService.search(guests, "RODRIGUEZ")
    assert [g.name for g in results] == ["Luis Rodríguez", "Rafael Rodríguez"]

def test_search_matches_anywhere_in_name(guests):
    """Matches are substrings, not prefixes"""
    results = SearchService.search(guests, "ana")
    assert [g.name for g in results] == ["Ana Lucía", "Mariana Torres"]

def test_search_no_match(guests):
    """Unmatched query gives an empty result"""
    assert SearchService.search(guests, "Wong") == []

def test_search_completeness_and_soundness(guests):
    """Results are exactly the guests whose normalized name contains the query"""
    for query in ["a", "ía", "  luis ", "r", "xyz"]:
        results = SearchService.search(guests, query)
        expected = {g for g in guests if normalize(query) in normalize(g.name)}
        assert set(results) == expected
        assert len(results) == len(expected)

def test_search_results_sorted_by_name(guests):
    """Adjacent results are in ascending name order"""
    results = SearchService.search(guests, "a")
    keys = [collation_key(g.name) for g in results]
    assert keys == sorted(keys)

def test_search_duplicate_names_pinned_order():
    """Unaccented lowercase 'ana perez' sorts before 'Ana Pérez'"""
    guests = [
        Guest(name="Ana Pérez", table="2"),
        Guest(name="ana perez", table="2"),
    ]
    results = SearchService.search(guests, "perez")
    assert [g.name for g in results] == ["ana perez", "Ana Pérez"]

def test_search_returns_full_match_set():
    """Search itself never truncates"""
    guests = [Guest(name=f"Invitado {i}", table=str(i % 5)) for i in range(40)]
    assert len(SearchService.search(guests, "invitado")) == 40

def test_copy_text():
    """Copy label names the guest and the table"""
    assert SearchService.copy_text(Guest(name="Ana Díaz", table="8")) == "Ana Díaz — Mesa 8"
