from __future__ import annotations

import logging
from collections import Counter
from typing import Optional, Sequence

from sqlmodel import Session

from ..core.config import get_settings
from ..core.errors import MembershipCapExceededError
from ..models import AccountCreated, AccountModel, AccountResponse, DepositAmount
from . import guards
from .base import CustodyService
from .repository import CustodyRepository


logger = logging.getLogger(__name__)

ACCOUNT_SEQUENCE = "account"


class AccountRegistry(CustodyService):
    """Accounts, their owners and balances, and the party-to-account index."""

    def __init__(
        self,
        session: Session,
        repository: Optional[CustodyRepository] = None,
        *,
        max_accounts_per_party: Optional[int] = None,
        **collaborators,
    ) -> None:
        super().__init__(session, repository, **collaborators)
        if max_accounts_per_party is None:
            max_accounts_per_party = get_settings().max_accounts_per_party
        self.max_accounts_per_party = max_accounts_per_party

    def _account_to_response(self, account: AccountModel) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            owners=self.repository.list_owners(account.id),
            balance=account.balance,
        )

    def _check_membership_caps(self, other_owners: Sequence[str]) -> None:
        # Repeated co-owners count once per occurrence, like successive appends.
        pending: Counter[str] = Counter()
        for party in other_owners:
            linked = self.repository.count_memberships(party) + pending[party]
            if linked >= self.max_accounts_per_party:
                raise MembershipCapExceededError(
                    f"{party} already belongs to {linked} accounts"
                )
            pending[party] += 1

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def create_account(self, creator: str, other_owners: Sequence[str]) -> AccountResponse:
        owners = [*other_owners, creator]
        with self._atomic():
            self._check_membership_caps(other_owners)
            account_id = self.repository.next_id(ACCOUNT_SEQUENCE)
            account = self.repository.add_account(account_id, owners)
            for party in owners:
                self.repository.link_party(party, account_id)
            response = self._account_to_response(account)

        logger.info(
            "account.created",
            extra={"account_id": account_id, "owners": owners},
        )
        self._publish(
            AccountCreated(owners=owners, account_id=account_id, timestamp=self.clock())
        )
        return response

    def deposit(self, caller: str, account_id: int, amount: int) -> AccountResponse:
        if amount < 0:
            raise ValueError("Deposit amount must be non-negative")

        with self._atomic():
            guards.require_owner(self.repository, caller, account_id)
            account = self.repository.get_account(account_id)
            account.balance += amount
            self.session.add(account)
            self.session.flush()
            response = self._account_to_response(account)

        logger.info(
            "account.deposit",
            extra={"account_id": account_id, "amount": amount, "balance": response.balance},
        )
        self._publish(DepositAmount(depositor=caller, account_id=account_id, amount=amount))
        return response

    # ------------------------------------------------------------------
    # Queries: unknown ids yield empty defaults rather than errors
    # ------------------------------------------------------------------
    def get_accounts(self, party: str) -> list[int]:
        return self.repository.list_party_accounts(party)

    def get_owners(self, account_id: int) -> list[str]:
        return self.repository.list_owners(account_id)

    def get_balance(self, account_id: int) -> int:
        account = self.repository.get_account(account_id)
        return account.balance if account is not None else 0
