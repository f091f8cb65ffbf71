from __future__ import annotations

from typing import Optional

from sqlmodel import Session, func, select

from ..models import (
    AccountModel,
    AccountOwnerModel,
    ApprovalModel,
    IdSequenceModel,
    PartyAccountModel,
    WithdrawalRequestModel,
)


class CustodyRepository:
    """Thin data access layer around the SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # Sequences ----------------------------------------------------------
    def next_id(self, name: str) -> int:
        sequence = self.session.get(IdSequenceModel, name)
        if sequence is None:
            sequence = IdSequenceModel(name=name)
        value = sequence.next_value
        sequence.next_value = value + 1
        self.session.add(sequence)
        self.session.flush()
        return value

    # Account operations -------------------------------------------------
    def add_account(self, account_id: int, owners: list[str]) -> AccountModel:
        account = AccountModel(id=account_id)
        self.session.add(account)
        for position, party in enumerate(owners):
            self.session.add(
                AccountOwnerModel(account_id=account_id, position=position, party=party)
            )
        self.session.flush()
        self.session.refresh(account)
        return account

    def get_account(self, account_id: int) -> Optional[AccountModel]:
        return self.session.get(AccountModel, account_id)

    def list_owners(self, account_id: int) -> list[str]:
        stmt = (
            select(AccountOwnerModel.party)
            .where(AccountOwnerModel.account_id == account_id)
            .order_by(AccountOwnerModel.position)
        )
        return list(self.session.exec(stmt))

    # Party index --------------------------------------------------------
    def count_memberships(self, party: str) -> int:
        stmt = (
            select(func.count())
            .select_from(PartyAccountModel)
            .where(PartyAccountModel.party == party)
        )
        return self.session.exec(stmt).one()

    def list_party_accounts(self, party: str) -> list[int]:
        stmt = (
            select(PartyAccountModel.account_id)
            .where(PartyAccountModel.party == party)
            .order_by(PartyAccountModel.position)
        )
        return list(self.session.exec(stmt))

    def link_party(self, party: str, account_id: int) -> None:
        position = self.count_memberships(party)
        self.session.add(
            PartyAccountModel(party=party, position=position, account_id=account_id)
        )
        self.session.flush()

    def is_linked(self, party: str, account_id: int) -> bool:
        stmt = (
            select(PartyAccountModel)
            .where(PartyAccountModel.party == party)
            .where(PartyAccountModel.account_id == account_id)
        )
        return self.session.exec(stmt).first() is not None

    # Withdrawal requests ------------------------------------------------
    def add_request(
        self,
        *,
        request_id: int,
        account_id: int,
        requester: str,
        amount: int,
    ) -> WithdrawalRequestModel:
        request = WithdrawalRequestModel(
            id=request_id,
            account_id=account_id,
            requester=requester,
            amount=amount,
        )
        self.session.add(request)
        self.session.flush()
        self.session.refresh(request)
        return request

    def get_request(
        self, account_id: int, request_id: int
    ) -> Optional[WithdrawalRequestModel]:
        stmt = (
            select(WithdrawalRequestModel)
            .where(WithdrawalRequestModel.account_id == account_id)
            .where(WithdrawalRequestModel.id == request_id)
        )
        return self.session.exec(stmt).first()

    def delete_request(self, request: WithdrawalRequestModel) -> None:
        stmt = select(ApprovalModel).where(ApprovalModel.request_id == request.id)
        for approval in self.session.exec(stmt):
            self.session.delete(approval)
        self.session.delete(request)
        self.session.flush()

    # Approvals ----------------------------------------------------------
    def has_approved(self, account_id: int, request_id: int, party: str) -> bool:
        stmt = (
            select(ApprovalModel)
            .join(WithdrawalRequestModel, WithdrawalRequestModel.id == ApprovalModel.request_id)
            .where(WithdrawalRequestModel.account_id == account_id)
            .where(ApprovalModel.request_id == request_id)
            .where(ApprovalModel.party == party)
        )
        return self.session.exec(stmt).first() is not None

    def add_approval(self, request_id: int, party: str) -> None:
        self.session.add(ApprovalModel(request_id=request_id, party=party))
        self.session.flush()
