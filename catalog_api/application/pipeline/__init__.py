"""
Pipeline запросов: медиатор и behaviors.
"""

from .behaviors import (
    NextHandler,
    PipelineBehavior,
    ValidationBehavior,
    TransactionBehavior,
)
from .mediator import Mediator

__all__ = [
    "NextHandler",
    "PipelineBehavior",
    "ValidationBehavior",
    "TransactionBehavior",
    "Mediator",
]
