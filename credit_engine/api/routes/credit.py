"""GET /credit/{debtId} - Simulated credit limit endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from credit_engine.api.routes.schemas import CreditCheckResponse, ErrorResponse
from credit_engine.api.dependencies import get_request_id
from credit_engine.domain.credit_limit import verify_credit_limit
from credit_engine.domain.exceptions import InvalidDebtIdError
from credit_engine.infrastructure.observability.metrics import (
    record_credit_check,
    record_rejected_check,
    record_failed_check,
)
from credit_engine.infrastructure.observability.logging import log_credit_check

router = APIRouter()


def require_debt_id(debt_id: str) -> str:
    """Reject empty debt identifiers before evaluation"""
    if not debt_id:
        raise InvalidDebtIdError()
    return debt_id


def reject_invalid_debt_id(exc: InvalidDebtIdError, request_id: str) -> HTTPException:
    record_rejected_check()
    logging.warning(f"Invalid debt id: {exc}", extra={"request_id": request_id})
    return HTTPException(status_code=400, detail=exc.message)


@router.get(
    "/credit/{debt_id}",
    response_model=CreditCheckResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def check_credit(debt_id: str, request: Request):
    """
    Simulate a discounted payment plan for a debt.

    Also serves /credit and /credit/, where the path carries no identifier
    and validation rejects it with a 400.

    Flow:
    1. Validate the debt identifier
    2. Compute payment value, installments and debt value
    3. Format amounts with two decimals and return
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        require_debt_id(debt_id)
        result = verify_credit_limit(debt_id)
        response = CreditCheckResponse.from_result(debt_id, result)

    except InvalidDebtIdError as e:
        raise reject_invalid_debt_id(e, request_id)

    except Exception as e:
        record_failed_check()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_credit_check(result.installments)
    log_credit_check(request_id, debt_id, result.installments, duration_ms)

    return response


@router.get("/credit", include_in_schema=False)
@router.get("/credit/", include_in_schema=False)
def check_credit_missing_id(request: Request):
    """Route matched without a debt identifier; rejected by check_credit's validation"""
    return check_credit("", request)
