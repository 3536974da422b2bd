"""
Guest model
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Guest:
    """One seat assignment: a display name and the table it belongs to.

    Both fields must be non-empty and already trimmed, which is the form the
    guest list text import produces.
    """

    name: str
    table: str

    def __post_init__(self):
        for field_name in ("name", "table"):
            value = getattr(self, field_name)
            if not value or value != value.strip():
                raise ValueError(f"Guest {field_name} must be non-empty and trimmed: {value!r}")
