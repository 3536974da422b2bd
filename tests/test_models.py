"""
Tests for the guest model
"""

import pytest

from app.models import Guest
from app.services.list_service import ListService

@pytest.mark.parametrize("name, table", [
    (" Ana", "1"),
    ("Ana ", "1"),
    ("", "1"),
    ("Ana", ""),
    ("Ana", " 1"),
    ("Ana", "1\n"),
])
def test_guest_rejects_untrimmed_or_empty_fields(name, table):
    """Guests hold trimmed, non-empty fields only"""
    with pytest.raises(ValueError):
        Guest(name=name, table=table)

def test_guest_keeps_inner_whitespace():
    """Whitespace inside a name is part of the name"""
    guest = Guest(name="Ana  Lucía", table="3")
    assert ListService.parse_list(ListService.serialize_list([guest])) == [guest]
