from __future__ import annotations
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel

class Account(SQLModel, table=True):
    id: int = Field(primary_key=True, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    balance: int = Field(default=0, ge=0)

class AccountOwner(SQLModel, table=True):
    account_id: int = Field(foreign_key="account.id", primary_key=True)
    position: int = Field(primary_key=True)
    party: str = Field(index=True)

class PartyAccount(SQLModel, table=True):
    party: str = Field(primary_key=True)
    position: int = Field(primary_key=True)
    account_id: int = Field(foreign_key="account.id", index=True)

class WithdrawalRequest(SQLModel, table=True):
    # NOTE: ids come from the shared "withdrawal_request" sequence, not autoincrement
    id: int = Field(primary_key=True, index=True)
    account_id: int = Field(foreign_key="account.id", index=True)
    requester: str
    amount: int = Field(ge=0)
    approvals: int = Field(default=0, ge=0)
    approved: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

class Approval(SQLModel, table=True):
    request_id: int = Field(foreign_key="withdrawalrequest.id", primary_key=True)
    party: str = Field(primary_key=True)

class IdSequence(SQLModel, table=True):
    name: str = Field(primary_key=True)
    next_value: int = Field(default=1, ge=1)
