"""Domain errors raised by the custody services.

Each failure mode has its own class so callers can tell "already approved"
apart from "not your request" without parsing messages. ``code`` is a stable
machine-readable identifier surfaced by the HTTP layer.
"""


class CustodyError(Exception):
    code = "custody_error"


class NotOwnerError(CustodyError):
    """Raised when the caller is not an owner of the account."""

    code = "not_owner"


class InsufficientBalanceError(CustodyError):
    """Raised when an amount exceeds the account balance."""

    code = "insufficient_balance"


class MembershipCapExceededError(CustodyError):
    """Raised when a co-owner already belongs to the maximum number of accounts."""

    code = "membership_cap_exceeded"


class AlreadyApprovedError(CustodyError):
    """Raised when an owner votes twice on the same request."""

    code = "already_approved"


class InvalidRequestError(CustodyError):
    """Raised when a withdrawal request does not exist for the account."""

    code = "invalid_request"


class SelfApprovalError(CustodyError):
    """Raised when the requester tries to approve their own request."""

    code = "self_approval"


class AlreadyFullyApprovedError(CustodyError):
    """Raised when a request has already reached quorum."""

    code = "already_fully_approved"


class NotYetApprovedError(CustodyError):
    """Raised when a request is executed before reaching quorum."""

    code = "not_yet_approved"


class WrongRequesterError(CustodyError):
    """Raised when someone other than the requester executes a request."""

    code = "wrong_requester"


class TransferFailedError(CustodyError):
    """Raised when the funds transfer sink rejects a settlement."""

    code = "transfer_failed"
