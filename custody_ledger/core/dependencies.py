from functools import lru_cache

from fastapi import Depends, Header
from sqlmodel import Session

from ..services import (
    AccountRegistry,
    EventSink,
    FundsTransfer,
    LoggingEventSink,
    LoggingFundsTransfer,
    WithdrawalEngine,
)
from .config import get_settings
from .db import get_session

@lru_cache(maxsize=1)
def get_event_sink() -> EventSink:
    return LoggingEventSink()

@lru_cache(maxsize=1)
def get_funds_transfer() -> FundsTransfer:
    return LoggingFundsTransfer()

def get_caller(party_id: str = Header(..., alias="X-Party-Id", min_length=1)) -> str:
    return party_id

def get_account_registry(
    session: Session = Depends(get_session),
    events: EventSink = Depends(get_event_sink),
) -> AccountRegistry:
    return AccountRegistry(
        session,
        max_accounts_per_party=get_settings().max_accounts_per_party,
        events=events,
    )

def get_withdrawal_engine(
    session: Session = Depends(get_session),
    events: EventSink = Depends(get_event_sink),
    transfers: FundsTransfer = Depends(get_funds_transfer),
) -> WithdrawalEngine:
    return WithdrawalEngine(session, events=events, transfers=transfers)
