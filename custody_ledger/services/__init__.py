from .base import CustodyService
from .registry import AccountRegistry
from .repository import CustodyRepository
from .sinks import (
    EventSink,
    FundsTransfer,
    InMemoryEventSink,
    LoggingEventSink,
    LoggingFundsTransfer,
    utc_now,
)
from .withdrawals import WithdrawalEngine

__all__ = [
    "AccountRegistry",
    "CustodyRepository",
    "CustodyService",
    "EventSink",
    "FundsTransfer",
    "InMemoryEventSink",
    "LoggingEventSink",
    "LoggingFundsTransfer",
    "WithdrawalEngine",
    "utc_now",
]
