"""Pydantic schemas for API responses"""

from pydantic import BaseModel, ConfigDict, Field

from credit_engine.domain.models import CreditLimitResult


class StatusResponse(BaseModel):
    """Response for GET /status"""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field("OK", alias="Status")


class CreditCheckResponse(BaseModel):
    """Response for GET /credit/{debtId}"""

    model_config = ConfigDict(populate_by_name=True)

    debt_id: str = Field(..., alias="DebtID", description="Debt identifier, echoed verbatim")
    payment_value: str = Field(..., alias="PaymentValue", description="Discounted amount, two decimals")
    installments: int = Field(..., alias="Installments", ge=1, le=12)
    debt_value: str = Field(..., alias="DebtValue", description="Nominal debt amount, two decimals")

    @classmethod
    def from_result(cls, debt_id: str, result: CreditLimitResult) -> "CreditCheckResponse":
        """Build the wire response, formatting amounts with two decimal places"""
        return cls(
            debt_id=debt_id,
            payment_value=f"{result.payment_value:.2f}",
            installments=result.installments,
            debt_value=f"{result.debt_value:.2f}",
        )


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses"""

    detail: str
