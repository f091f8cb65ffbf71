"""Preconditions shared by the registry and the withdrawal engine.

Guards only read; they run before any write of an operation so a failure
leaves the ledger untouched.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import (
    AlreadyApprovedError,
    AlreadyFullyApprovedError,
    InsufficientBalanceError,
    InvalidRequestError,
    NotOwnerError,
    NotYetApprovedError,
    SelfApprovalError,
    WrongRequesterError,
)
from ..models import AccountModel, WithdrawalRequestModel
from .repository import CustodyRepository


def require_owner(repository: CustodyRepository, caller: str, account_id: int) -> None:
    if not repository.is_linked(caller, account_id):
        raise NotOwnerError(f"{caller} is not an owner of account {account_id}")


def require_balance(account: Optional[AccountModel], account_id: int, amount: int) -> None:
    balance = account.balance if account is not None else 0
    if balance < amount:
        raise InsufficientBalanceError(
            f"Account {account_id} balance {balance} is below {amount}"
        )


def require_valid_approver(
    repository: CustodyRepository,
    caller: str,
    account_id: int,
    request_id: int,
) -> WithdrawalRequestModel:
    require_owner(repository, caller, account_id)
    if repository.has_approved(account_id, request_id, caller):
        raise AlreadyApprovedError(f"{caller} already approved request {request_id}")
    request = repository.get_request(account_id, request_id)
    if request is None:
        raise InvalidRequestError(
            f"Request {request_id} does not exist for account {account_id}"
        )
    if request.requester == caller:
        raise SelfApprovalError(f"{caller} cannot approve their own request")
    if request.approved:
        raise AlreadyFullyApprovedError(f"Request {request_id} is already approved")
    return request


def require_can_withdraw(
    repository: CustodyRepository,
    caller: str,
    account_id: int,
    request_id: int,
) -> WithdrawalRequestModel:
    request = repository.get_request(account_id, request_id)
    if request is None:
        raise InvalidRequestError(
            f"Request {request_id} does not exist for account {account_id}"
        )
    if not request.approved:
        raise NotYetApprovedError(f"Request {request_id} has not reached quorum")
    if request.requester != caller:
        raise WrongRequesterError(f"Only {request.requester} may execute request {request_id}")
    return request
