"""
Domain models package
"""

from .guest import Guest
from .table import TableGroup

__all__ = ["Guest", "TableGroup"]
