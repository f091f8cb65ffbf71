from __future__ import annotations

import logging

from ..core.errors import InvalidRequestError, TransferFailedError
from ..models import (
    WithdrawalReceipt,
    WithdrawalRequestModel,
    WithdrawalRequestResponse,
    WithdrawCompleted,
    WithdrawRequested,
)
from . import guards
from .base import CustodyService


logger = logging.getLogger(__name__)

REQUEST_SEQUENCE = "withdrawal_request"


class WithdrawalEngine(CustodyService):
    """Withdrawal requests: creation, approval voting and settlement.

    A request moves ``requested -> approved -> executed``. Quorum is every
    owner except the requester; settlement deletes the request so it cannot
    be replayed.
    """

    def _request_to_response(self, request: WithdrawalRequestModel) -> WithdrawalRequestResponse:
        return WithdrawalRequestResponse(
            id=request.id,
            account_id=request.account_id,
            requester=request.requester,
            amount=request.amount,
            approvals=request.approvals,
            approved=request.approved,
            created_at=request.created_at,
        )

    def request_withdrawal(
        self, caller: str, account_id: int, amount: int
    ) -> WithdrawalRequestResponse:
        if amount < 0:
            raise ValueError("Withdrawal amount must be non-negative")

        with self._atomic():
            guards.require_owner(self.repository, caller, account_id)
            guards.require_balance(self.repository.get_account(account_id), account_id, amount)
            request_id = self.repository.next_id(REQUEST_SEQUENCE)
            request = self.repository.add_request(
                request_id=request_id,
                account_id=account_id,
                requester=caller,
                amount=amount,
            )
            response = self._request_to_response(request)

        logger.info(
            "withdrawal.requested",
            extra={"account_id": account_id, "request_id": request_id, "amount": amount},
        )
        self._publish(
            WithdrawRequested(
                requester=caller,
                amount=amount,
                account_id=account_id,
                request_id=request_id,
                timestamp=self.clock(),
            )
        )
        return response

    def approve_withdrawal(
        self, caller: str, account_id: int, request_id: int
    ) -> WithdrawalRequestResponse:
        with self._atomic():
            request = guards.require_valid_approver(
                self.repository, caller, account_id, request_id
            )
            self.repository.add_approval(request_id, caller)
            request.approvals += 1
            quorum = len(self.repository.list_owners(account_id)) - 1
            if request.approvals == quorum:
                request.approved = True
            self.session.add(request)
            self.session.flush()
            response = self._request_to_response(request)

        logger.info(
            "withdrawal.approved",
            extra={
                "account_id": account_id,
                "request_id": request_id,
                "approver": caller,
                "approvals": response.approvals,
            },
        )
        if response.approved:
            logger.debug("withdrawal.quorum_reached", extra={"request_id": request_id})
        return response

    def withdraw(self, caller: str, account_id: int, request_id: int) -> WithdrawalReceipt:
        with self._atomic():
            request = guards.require_can_withdraw(
                self.repository, caller, account_id, request_id
            )
            account = self.repository.get_account(account_id)
            # Balance may have moved since the request was made.
            guards.require_balance(account, account_id, request.amount)

            amount = request.amount
            account.balance -= amount
            self.session.add(account)
            self.repository.delete_request(request)

            try:
                transferred = self.transfers.transfer(caller, amount)
            except Exception as exc:
                raise TransferFailedError(
                    f"Transfer of {amount} to {caller} failed: {exc}"
                ) from exc
            if not transferred:
                raise TransferFailedError(f"Transfer of {amount} to {caller} was rejected")

            receipt = WithdrawalReceipt(
                request_id=request_id,
                account_id=account_id,
                recipient=caller,
                amount=amount,
                balance=account.balance,
            )

        logger.info(
            "withdrawal.completed",
            extra={
                "account_id": account_id,
                "request_id": request_id,
                "amount": amount,
                "balance": receipt.balance,
            },
        )
        self._publish(
            WithdrawCompleted(request_id=request_id, account_id=account_id, timestamp=self.clock())
        )
        return receipt

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_request(self, account_id: int, request_id: int) -> WithdrawalRequestResponse:
        request = self.repository.get_request(account_id, request_id)
        if request is None:
            raise InvalidRequestError(
                f"Request {request_id} does not exist for account {account_id}"
            )
        return self._request_to_response(request)

    def get_approvals(self, account_id: int, request_id: int) -> int:
        request = self.repository.get_request(account_id, request_id)
        return request.approvals if request is not None else 0
