"""
Tests for the in-memory guest list repository
"""

import pytest
import pandas as pd

from app.core.defaults import DEFAULT_GUESTS
from app.models import Guest
from app.services.repositories import GuestListRepo

@pytest.fixture
def repo():
    """Fresh repository holding the default list"""
    return GuestListRepo(DEFAULT_GUESTS)

def test_starts_with_defaults(repo):
    """Repository starts with the shipped list"""
    assert repo.all() == DEFAULT_GUESTS
    assert repo.count() == 12

def test_all_returns_copy(repo):
    """Callers cannot mutate the stored list"""
    guests = repo.all()
    guests.clear()
    assert repo.count() == 12

def test_replace_from_text(repo):
    """A valid import replaces the whole list"""
    count = repo.replace_from_text("nombre,mesa\nJuan Pérez,12\nAna Díaz,8\n")
    assert count == 2
    assert repo.all() == [
        Guest(name="Juan Pérez", table="12"),
        Guest(name="Ana Díaz", table="8"),
    ]

@pytest.mark.parametrize("text", [
    "nombre,mesa\n",
    "a,b\nfoo,1\n",
    "nombre,mesa\n,1\n",
    "",
])
def test_failed_import_keeps_list(repo, text):
    """A no-op import keeps the previous list"""
    assert repo.replace_from_text(text) is None
    assert repo.all() == DEFAULT_GUESTS

def test_replace_from_dataframe(repo):
    """A spreadsheet import replaces the whole list"""
    df = pd.DataFrame({'Guest': ['John Doe'], 'Table': ['3']})
    assert repo.replace_from_dataframe(df) == 1
    assert repo.all() == [Guest(name="John Doe", table="3")]

def test_reset(repo):
    """Reset restores the shipped list"""
    repo.replace_from_text("nombre,mesa\nJuan,1\n")
    assert repo.reset() == 12
    assert repo.all() == DEFAULT_GUESTS
