"""
Guest name search service
"""

from typing import List, Sequence

from app.models import Guest
from app.utils.text import collation_key, normalize

class SearchService:
    """Service for finding a guest's table by name"""
    
    @staticmethod
    def search(guests: Sequence[Guest], query: str) -> List[Guest]:
        """Return every guest whose name contains the query, ordered by name.

        An empty query means no search is active and yields no results; it
        does not match everything. Matching ignores accents and case and is
        not anchored to the start of the name. The full match set is
        returned; callers decide how much of it to display.
        """
        if not query:
            return []
        
        needle = normalize(query)
        matches = [guest for guest in guests if needle in normalize(guest.name)]
        return sorted(matches, key=lambda guest: collation_key(guest.name))
    
    @staticmethod
    def copy_text(guest: Guest) -> str:
        """Label offered to the guest for copying their assignment"""
        return f"{guest.name} — Mesa {guest.table}"
