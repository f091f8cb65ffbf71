"""Collaborators the ledger hands work to: clock, event sink, funds transfer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from ..models import DomainEvent


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class EventSink(Protocol):
    def publish(self, event: DomainEvent) -> None: ...


class FundsTransfer(Protocol):
    def transfer(self, destination: str, amount: int) -> bool:
        """Move ``amount`` out of custody to ``destination``; report success."""
        ...


class LoggingEventSink:
    def publish(self, event: DomainEvent) -> None:
        logger.info(f"event.{event.name}", extra={"event": event.model_dump(mode="json")})


class InMemoryEventSink:
    """Keeps published events in order for in-process subscribers."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]


class LoggingFundsTransfer:
    def transfer(self, destination: str, amount: int) -> bool:
        logger.info(
            "funds.transfer",
            extra={"destination": destination, "amount": amount},
        )
        return True
