from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from ..core import db as core_db
from ..core.db import create_engine_for_url, get_session, set_engine
from ..core.dependencies import get_event_sink, get_funds_transfer
from ..main import app
from ..services import AccountRegistry, InMemoryEventSink, WithdrawalEngine

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class FakeTransfer:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []
        self.succeed = True
        self.error: Exception | None = None

    def transfer(self, destination: str, amount: int) -> bool:
        if self.error is not None:
            raise self.error
        if self.succeed:
            self.calls.append((destination, amount))
        return self.succeed


@pytest.fixture
def db_engine(tmp_path):
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def events() -> InMemoryEventSink:
    return InMemoryEventSink()


@pytest.fixture
def transfers() -> FakeTransfer:
    return FakeTransfer()


@pytest.fixture
def registry(session, events) -> AccountRegistry:
    return AccountRegistry(
        session, max_accounts_per_party=3, events=events, clock=lambda: FIXED_NOW
    )


@pytest.fixture
def withdrawals(session, events, transfers) -> WithdrawalEngine:
    return WithdrawalEngine(
        session, events=events, transfers=transfers, clock=lambda: FIXED_NOW
    )


@pytest.fixture
def client(db_engine, events, transfers) -> TestClient:
    original_engine = core_db.engine
    set_engine(db_engine)

    def _get_session_override():
        with Session(db_engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    app.dependency_overrides[get_event_sink] = lambda: events
    app.dependency_overrides[get_funds_transfer] = lambda: transfers

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    set_engine(original_engine)
