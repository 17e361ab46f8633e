"""
Общие типы прикладного слоя.
"""

from .messages import MessageConstants
from .result import Result
from .request import Request, RequestHandler

__all__ = [
    "MessageConstants",
    "Result",
    "Request",
    "RequestHandler",
]
