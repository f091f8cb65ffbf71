from datetime import datetime

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    other_owners: list[str] = Field(
        default_factory=list,
        description="Co-owners besides the caller, who is appended as the last owner",
    )

class AccountResponse(BaseModel):
    id: int
    owners: list[str]
    balance: int = Field(..., ge=0, description="Balance in minor units (e.g. cents)")

class BalanceResponse(BaseModel):
    account_id: int
    balance: int = Field(..., ge=0)

class AmountRequest(BaseModel):
    amount: int = Field(..., ge=0, description="Amount in minor units")

class WithdrawalRequestResponse(BaseModel):
    id: int
    account_id: int
    requester: str
    amount: int
    approvals: int
    approved: bool
    created_at: datetime

class WithdrawalReceipt(BaseModel):
    request_id: int
    account_id: int
    recipient: str
    amount: int
    balance: int = Field(..., ge=0, description="Account balance after settlement")
