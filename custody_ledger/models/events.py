"""Domain events handed to the event sink after a ledger write commits."""

from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel

class AccountCreated(BaseModel):
    name: Literal["AccountCreated"] = "AccountCreated"
    owners: list[str]
    account_id: int
    timestamp: datetime

class DepositAmount(BaseModel):
    name: Literal["DepositAmount"] = "DepositAmount"
    depositor: str
    account_id: int
    amount: int

class WithdrawRequested(BaseModel):
    name: Literal["WithdrawRequested"] = "WithdrawRequested"
    requester: str
    amount: int
    account_id: int
    request_id: int
    timestamp: datetime

class WithdrawCompleted(BaseModel):
    name: Literal["WithdrawCompleted"] = "WithdrawCompleted"
    request_id: int
    account_id: int
    timestamp: datetime

DomainEvent = Union[AccountCreated, DepositAmount, WithdrawRequested, WithdrawCompleted]
