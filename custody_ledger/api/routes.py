from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_account_registry, get_caller, get_withdrawal_engine
from ..models import (
    AccountCreate,
    AccountResponse,
    AmountRequest,
    BalanceResponse,
    WithdrawalReceipt,
    WithdrawalRequestResponse,
)
from ..services import AccountRegistry, WithdrawalEngine


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    caller: str = Depends(get_caller),
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    return registry.create_account(caller, payload.other_owners)

@router.get("", response_model=list[int])
def list_accounts(
    caller: str = Depends(get_caller),
    registry: AccountRegistry = Depends(get_account_registry),
) -> list[int]:
    return registry.get_accounts(caller)

@router.get("/{account_id}/owners", response_model=list[str])
def get_owners(
    account_id: int,
    registry: AccountRegistry = Depends(get_account_registry),
) -> list[str]:
    return registry.get_owners(account_id)

@router.get("/{account_id}/balance", response_model=BalanceResponse)
def get_balance(
    account_id: int,
    registry: AccountRegistry = Depends(get_account_registry),
) -> BalanceResponse:
    return BalanceResponse(account_id=account_id, balance=registry.get_balance(account_id))

@router.post("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: int,
    payload: AmountRequest,
    caller: str = Depends(get_caller),
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    return registry.deposit(caller, account_id, payload.amount)

withdrawal_router = APIRouter(prefix="/accounts/{account_id}/withdrawals", tags=["withdrawals"])

@withdrawal_router.post(
    "", response_model=WithdrawalRequestResponse, status_code=status.HTTP_201_CREATED
)
def request_withdrawal(
    account_id: int,
    payload: AmountRequest,
    caller: str = Depends(get_caller),
    engine: WithdrawalEngine = Depends(get_withdrawal_engine),
) -> WithdrawalRequestResponse:
    return engine.request_withdrawal(caller, account_id, payload.amount)

@withdrawal_router.get("/{request_id}", response_model=WithdrawalRequestResponse)
def get_withdrawal(
    account_id: int,
    request_id: int,
    engine: WithdrawalEngine = Depends(get_withdrawal_engine),
) -> WithdrawalRequestResponse:
    return engine.get_request(account_id, request_id)

@withdrawal_router.post("/{request_id}/approve", response_model=WithdrawalRequestResponse)
def approve_withdrawal(
    account_id: int,
    request_id: int,
    caller: str = Depends(get_caller),
    engine: WithdrawalEngine = Depends(get_withdrawal_engine),
) -> WithdrawalRequestResponse:
    return engine.approve_withdrawal(caller, account_id, request_id)

@withdrawal_router.post("/{request_id}/withdraw", response_model=WithdrawalReceipt)
def withdraw(
    account_id: int,
    request_id: int,
    caller: str = Depends(get_caller),
    engine: WithdrawalEngine = Depends(get_withdrawal_engine),
) -> WithdrawalReceipt:
    return engine.withdraw(caller, account_id, request_id)

__all__ = ["router", "withdrawal_router"]
