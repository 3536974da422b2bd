"""
Guest-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel

class GuestResponse(BaseModel):
    """Guest response schema"""
    name: str
    table: str
    copy_text: str

class SearchResults(BaseModel):
    """Search results for a query, possibly truncated for display"""
    query: str
    total: int
    truncated: bool
    results: List[GuestResponse]

class ImportRequest(BaseModel):
    """Pasted guest list text"""
    text: str
