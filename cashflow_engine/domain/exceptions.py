"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInstallmentInputError(DomainException):
    """Installment count or purchase amount is out of range"""

    pass
