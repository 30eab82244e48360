"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDebtIdError(DomainException):
    """Debt identifier is missing or empty"""

    def __init__(self, message: str = "debtId is required"):
        super().__init__(message)
        self.message = message
