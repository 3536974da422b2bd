"""
Pydantic schemas package
"""

from .common import *
from .guest import *
from .seating import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "GuestResponse",
    "SearchResults",
    "ImportRequest",
    "TableGroupResponse"
]
