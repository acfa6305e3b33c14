"""
Editor data models
"""

from dataclasses import dataclass


@dataclass
class InsertResult:
    """
    Result of inserting toolbar markup around an editor selection

    Attributes:
        text: Full editor text after the insertion
        cursor: Cursor position to restore (just past the wrapped selection)
    """
    text: str
    cursor: int
