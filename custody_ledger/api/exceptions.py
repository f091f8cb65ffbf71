from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    AlreadyApprovedError,
    AlreadyFullyApprovedError,
    CustodyError,
    InsufficientBalanceError,
    InvalidRequestError,
    MembershipCapExceededError,
    NotOwnerError,
    NotYetApprovedError,
    SelfApprovalError,
    TransferFailedError,
    WrongRequesterError,
)

STATUS_CODES: dict[type[CustodyError], int] = {
    NotOwnerError: 403,
    SelfApprovalError: 403,
    WrongRequesterError: 403,
    InvalidRequestError: 404,
    InsufficientBalanceError: 409,
    MembershipCapExceededError: 409,
    AlreadyApprovedError: 409,
    AlreadyFullyApprovedError: 409,
    NotYetApprovedError: 409,
    TransferFailedError: 502,
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustodyError)
    async def custody_error_handler(request: Request, exc: CustodyError) -> JSONResponse:
        return JSONResponse(
            status_code=STATUS_CODES.get(type(exc), 400),
            content={"detail": str(exc), "code": exc.code},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})
