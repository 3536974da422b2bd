"""
In-memory guest list repository, the single owner of the current list.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pandas as pd

from app.models import Guest
from app.services.list_service import ListService

logger = logging.getLogger(__name__)


class GuestListRepo:
    def __init__(self, default_guests: Sequence[Guest]):
        self._default = list(default_guests)
        self._guests: List[Guest] = list(default_guests)

    def all(self) -> List[Guest]:
        return list(self._guests)

    def count(self) -> int:
        return len(self._guests)

    def replace(self, guests: Optional[List[Guest]]) -> Optional[int]:
        """Swap in a new list; ``None`` keeps the current one."""
        if not guests:
            logger.info("Guest list left unchanged (%d guests)", len(self._guests))
            return None
        self._guests = list(guests)
        logger.info("Guest list replaced with %d guests", len(self._guests))
        return len(self._guests)

    def replace_from_text(self, raw_text: str) -> Optional[int]:
        return self.replace(ListService.parse_list(raw_text))

    def replace_from_dataframe(self, df: pd.DataFrame) -> Optional[int]:
        return self.replace(ListService.parse_dataframe(df))

    def reset(self) -> int:
        self._guests = list(self._default)
        logger.info("Guest list reset to %d default guests", len(self._guests))
        return len(self._guests)
