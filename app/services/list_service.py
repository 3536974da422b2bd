"""
Guest list import/export service for pasted CSV text and Excel workbooks
"""

import io
import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from app.core.config import settings
from app.models import Guest
from app.utils.text import normalize

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")

class ListService:
    """Service for converting between guest lists and their text/Excel forms"""
    
    @staticmethod
    def resolve_columns(headers: Sequence[str]) -> Tuple[int, int]:
        """Locate the name and table columns by header synonyms.

        Returns ``(name_idx, table_idx)``; an index is -1 when no header
        matches. Headers are compared normalized, by substring, and the
        first matching column wins.
        """
        normalized = [normalize(header) for header in headers]
        name_synonyms = [normalize(s) for s in settings.NAME_HEADER_SYNONYMS]
        table_synonyms = [normalize(s) for s in settings.TABLE_HEADER_SYNONYMS]
        
        name_idx = next(
            (i for i, h in enumerate(normalized) if any(s in h for s in name_synonyms)),
            -1,
        )
        table_idx = next(
            (i for i, h in enumerate(normalized) if any(s in h for s in table_synonyms)),
            -1,
        )
        return name_idx, table_idx
    
    @staticmethod
    def parse_rows(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> Optional[List[Guest]]:
        """Build a guest list from a header row and data rows.

        Returns None when a required column is missing or no row is usable,
        meaning the current list should be kept.
        """
        name_idx, table_idx = ListService.resolve_columns(headers)
        if name_idx == -1 or table_idx == -1:
            logger.info("Guest list headers not recognized: %s", list(headers))
            return None
        
        parsed: List[Guest] = []
        skipped = 0
        for cols in rows:
            if name_idx >= len(cols) or table_idx >= len(cols):
                skipped += 1
                continue
            name = str(cols[name_idx]).strip()
            table = str(cols[table_idx]).strip()
            if not name or not table:
                skipped += 1
                continue
            parsed.append(Guest(name=name, table=table))
        
        if skipped:
            logger.info("Skipped %d incomplete guest rows", skipped)
        if not parsed:
            return None
        return parsed
    
    @staticmethod
    def parse_list(raw_text: str) -> Optional[List[Guest]]:
        """Parse pasted ``nombre,mesa`` text into a guest list.

        Empty lines are ignored, the first remaining line is the header and
        fields are split on every comma. Quoted fields are not supported.
        """
        lines = [line for line in _LINE_SPLIT_RE.split(raw_text or "") if line]
        if len(lines) <= 1:
            return None
        
        headers = lines[0].split(",")
        rows = (line.split(",") for line in lines[1:])
        return ListService.parse_rows(headers, rows)
    
    @staticmethod
    def parse_dataframe(df: pd.DataFrame) -> Optional[List[Guest]]:
        """Parse a guest list read from a spreadsheet with the same rules"""
        if df.empty:
            return None
        
        headers = [str(col) for col in df.columns]
        cells = df.fillna("").astype(str)
        rows = (list(values) for values in cells.itertuples(index=False, name=None))
        return ListService.parse_rows(headers, rows)
    
    @staticmethod
    def read_excel(file_content: bytes) -> pd.DataFrame:
        """Read the first sheet of an uploaded workbook, every cell as text"""
        return pd.read_excel(io.BytesIO(file_content), dtype=str, keep_default_na=False)
    
    @staticmethod
    def serialize_list(guests: Sequence[Guest]) -> str:
        """Serialize the guest list to ``nombre,mesa`` text in its current order.

        Fields are written as-is; names or tables containing a comma or a
        newline will not parse back to the same list.
        """
        header = f"{settings.EXPORT_NAME_HEADER},{settings.EXPORT_TABLE_HEADER}\n"
        rows = "\n".join(f"{guest.name},{guest.table}" for guest in guests)
        return header + rows
    
    @staticmethod
    def export_excel(guests: Sequence[Guest]) -> bytes:
        """Export the guest list to an Excel workbook"""
        df = pd.DataFrame(
            [[guest.name, guest.table] for guest in guests],
            columns=[settings.EXPORT_NAME_HEADER, settings.EXPORT_TABLE_HEADER],
        )
        
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name='Invitados')
        
        return buffer.getvalue()
