"""
Audit stamping for persisted entities.

A ``before_flush`` listener attached to one session writes creation and
modification timestamps and actors onto audited models. Handlers and
repositories never set these fields themselves.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from .models import AuditMixin

logger = logging.getLogger("catalog-api.infrastructure.persistence.audit")


class AuditListener:
    """
    Session-scoped audit listener.

    New audited rows get ``created_at``/``created_by``; modified rows get
    ``updated_at``/``updated_by``. Soft deletes are modifications.

    Usage:
        >>> listener = AuditListener(actor="System")
        >>> listener.attach(session)
        >>> ...
        >>> listener.detach()
    """

    def __init__(
        self,
        actor: str,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            actor: Name written to created_by / updated_by
            clock: Source of current time (UTC by default)
        """
        self._actor = actor
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._target: Optional[Session] = None

    @property
    def actor(self) -> str:
        return self._actor

    def attach(self, session: AsyncSession) -> None:
        """Start stamping flushes of the given session."""
        self._target = session.sync_session
        event.listen(self._target, "before_flush", self._before_flush)

    def detach(self) -> None:
        """Stop stamping; safe to call more than once."""
        if self._target is not None:
            event.remove(self._target, "before_flush", self._before_flush)
            self._target = None

    def _before_flush(self, session: Session, flush_context: Any, instances: Any) -> None:
        now = self._clock()

        for obj in session.new:
            if isinstance(obj, AuditMixin):
                obj.created_at = now
                obj.created_by = self._actor

        for obj in session.dirty:
            if isinstance(obj, AuditMixin) and session.is_modified(obj, include_collections=False):
                obj.updated_at = now
                obj.updated_by = self._actor

        logger.debug(
            f"Audit stamped {len(session.new)} new and {len(session.dirty)} dirty objects"
        )
