from .db import Account as AccountModel
from .db import AccountOwner as AccountOwnerModel
from .db import Approval as ApprovalModel
from .db import IdSequence as IdSequenceModel
from .db import PartyAccount as PartyAccountModel
from .db import WithdrawalRequest as WithdrawalRequestModel
from .events import (
    AccountCreated,
    DepositAmount,
    DomainEvent,
    WithdrawCompleted,
    WithdrawRequested,
)
from .schemas import (
    AccountCreate,
    AccountResponse,
    AmountRequest,
    BalanceResponse,
    WithdrawalReceipt,
    WithdrawalRequestResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AmountRequest",
    "BalanceResponse",
    "WithdrawalReceipt",
    "WithdrawalRequestResponse",
    "AccountCreated",
    "DepositAmount",
    "DomainEvent",
    "WithdrawCompleted",
    "WithdrawRequested",
    "AccountModel",
    "AccountOwnerModel",
    "ApprovalModel",
    "IdSequenceModel",
    "PartyAccountModel",
    "WithdrawalRequestModel",
]
