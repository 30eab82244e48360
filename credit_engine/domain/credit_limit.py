"""Credit limit evaluation - simulated discounted payment plan for a debt"""

import random
import time
from typing import Optional

from credit_engine.domain.models import CreditLimitResult

DEBT_VALUE_PER_BYTE = 200.0

MIN_DISCOUNT_RATE = 0.05
MAX_DISCOUNT_RATE = 0.20
FALLBACK_PAYMENT_RATIO = 0.95

INSTALLMENT_UNIT_VALUE = 1000
MIN_INSTALLMENTS = 1
MAX_INSTALLMENTS = 12


def new_rng() -> random.Random:
    """Fresh generator seeded from the wall clock (nanoseconds), one per evaluation"""
    return random.Random(time.time_ns())


def calculate_debt_value(debt_id: str) -> float:
    """Nominal debt value: $200 per UTF-8 byte of the identifier"""
    return float(len(debt_id.encode("utf-8"))) * DEBT_VALUE_PER_BYTE


def draw_discount_rate(rng: random.Random) -> float:
    """Uniform discount rate in [0.05, 0.20)"""
    return MIN_DISCOUNT_RATE + rng.random() * (MAX_DISCOUNT_RATE - MIN_DISCOUNT_RATE)


def calculate_installments(value_to_pay: float) -> int:
    """
    One installment per $1000 payable, truncated toward zero.

    Always at least 1 installment and never more than 12.
    """
    installments = int(value_to_pay / INSTALLMENT_UNIT_VALUE)
    if installments < MIN_INSTALLMENTS:
        installments = MIN_INSTALLMENTS
    if installments > MAX_INSTALLMENTS:
        installments = MAX_INSTALLMENTS
    return installments


def verify_credit_limit(debt_id: str, rng: Optional[random.Random] = None) -> CreditLimitResult:
    """
    Main entry point: compute the discounted payment plan for a debt.

    Steps:
    1. Debt value from identifier length
    2. Random discount rate applied to the debt value
    3. Installment count from the discounted value

    The caller is responsible for rejecting empty identifiers.

    Args:
        debt_id: Debt identifier (only its length is used)
        rng: Random source; a new clock-seeded generator is used when omitted

    Returns:
        CreditLimitResult with payment value, installments and debt value
    """
    if rng is None:
        rng = new_rng()

    debt_value = calculate_debt_value(debt_id)

    discount_rate = draw_discount_rate(rng)
    new_value_to_pay = debt_value * (1 - discount_rate)

    # Payable amount must stay below the nominal debt
    if new_value_to_pay >= debt_value:
        new_value_to_pay = debt_value * FALLBACK_PAYMENT_RATIO

    return CreditLimitResult(
        payment_value=new_value_to_pay,
        installments=calculate_installments(new_value_to_pay),
        debt_value=debt_value,
    )
