"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass


@dataclass
class CreditLimitResult:
    """Discounted payment plan offered for a debt"""

    payment_value: float
    installments: int
    debt_value: float
