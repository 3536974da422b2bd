"""
Seating chart grouping service
"""

import math
import re
from typing import Dict, List, Optional, Sequence, Tuple

from app.models import Guest, TableGroup
from app.utils.text import collation_key

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def table_number(table: str) -> Optional[float]:
    """Numeric value of a table identifier, or None when it is not a number"""
    text = table.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def table_sort_key(table: str) -> Tuple:
    # Numeric identifiers first in numeric order, the rest after them by name.
    number = table_number(table)
    if number is None:
        return (1, 0.0, collation_key(table))
    return (0, number, collation_key(table))


class SeatingService:
    """Service for seating chart operations"""
    
    @staticmethod
    def group_by_table(guests: Sequence[Guest]) -> List[TableGroup]:
        """Partition guests by table, tables in numeric order, names sorted"""
        tables_map: Dict[str, List[Guest]] = {}
        for guest in guests:
            tables_map.setdefault(guest.table, []).append(guest)
        
        return [
            TableGroup(
                table=table,
                guests=sorted(tables_map[table], key=lambda g: collation_key(g.name)),
            )
            for table in sorted(tables_map, key=table_sort_key)
        ]
    
    @staticmethod
    def get_seating_summary(guests: Sequence[Guest]) -> Dict:
        """Get seating summary with per-table counts and names"""
        groups = SeatingService.group_by_table(guests)
        
        tables = [
            {
                "table": group.table,
                "total_guests": len(group.guests),
                "guests": [guest.name for guest in group.guests],
            }
            for group in groups
        ]
        
        return {
            "total_guests": len(guests),
            "total_tables": len(tables),
            "tables": tables,
        }
    
    @staticmethod
    def copy_text(table: str) -> str:
        """Label offered for copying a whole table"""
        return f"Mesa {table}"
