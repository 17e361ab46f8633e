"""
Subscribers of catalog domain events.
"""

from .audit_logger import AuditLogger

__all__ = ["AuditLogger"]
