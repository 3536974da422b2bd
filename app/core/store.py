"""
Process-wide guest list store
"""

from app.core.defaults import DEFAULT_GUESTS
from app.services.repositories import GuestListRepo

guest_list_repo = GuestListRepo(DEFAULT_GUESTS)

def get_guest_repo() -> GuestListRepo:
    """Dependency for getting the guest list repository"""
    return guest_list_repo
