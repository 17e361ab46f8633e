"""
Catalog API.

Product and category management built on a mediator pipeline,
a unit of work and domain events.
"""

__version__ = "0.1.0"
