"""
Seating chart Pydantic schemas
"""

from typing import List
from pydantic import BaseModel

class TableGroupResponse(BaseModel):
    """One table of the seating chart"""
    table: str
    copy_text: str
    guests: List[str]
