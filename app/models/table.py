"""
Table group model
"""

from dataclasses import dataclass, field
from typing import List

from app.models.guest import Guest


@dataclass
class TableGroup:
    """Guests sharing one table identifier, in display order."""

    table: str
    guests: List[Guest] = field(default_factory=list)
