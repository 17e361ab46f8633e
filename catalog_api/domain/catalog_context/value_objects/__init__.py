"""
Catalog Context Value Objects.
"""

from .money import Money

__all__ = [
    "Money",
]
