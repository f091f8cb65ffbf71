from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlmodel import Session

from ..core.db import ledger_lock
from ..models import DomainEvent
from .repository import CustodyRepository
from .sinks import (
    Clock,
    EventSink,
    FundsTransfer,
    LoggingEventSink,
    LoggingFundsTransfer,
    utc_now,
)


logger = logging.getLogger(__name__)


class CustodyService:
    """Shared plumbing: one session, one repository and the collaborators."""

    def __init__(
        self,
        session: Session,
        repository: Optional[CustodyRepository] = None,
        *,
        events: Optional[EventSink] = None,
        transfers: Optional[FundsTransfer] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.session = session
        self.repository = repository or CustodyRepository(session)
        self.events = events or LoggingEventSink()
        self.transfers = transfers or LoggingFundsTransfer()
        self.clock = clock

    @contextmanager
    def _atomic(self) -> Iterator[None]:
        """Run a write as one serialised transaction; roll back on any error."""
        with ledger_lock:
            # Other sessions may have committed since this one last read.
            self.session.expire_all()
            try:
                yield
                self.session.commit()
            except BaseException:
                self.session.rollback()
                raise

    def _publish(self, event: DomainEvent) -> None:
        try:
            self.events.publish(event)
        except Exception:
            logger.exception("event.publish_failed", extra={"event_name": event.name})
