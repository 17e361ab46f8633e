"""
Catalog Bounded Context.

Товары, категории, деньги и их события.
"""

from .entities import Category, Product
from .value_objects import Money

__all__ = [
    "Category",
    "Product",
    "Money",
]
