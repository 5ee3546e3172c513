"""
Puzzle input loading package.
"""

from .loader import InputLoader

__all__ = [
    "InputLoader",
]
