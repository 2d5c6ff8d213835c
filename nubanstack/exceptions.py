"""
Error Types

Every failure raised by the package derives from NubanstackError. Input
validation failures are also ValueErrors so callers can treat them like any
other bad argument.
"""

from typing import Optional


class NubanstackError(Exception):
    """Base class for all nubanstack errors"""


class NubanValidationError(NubanstackError, ValueError):
    """Input could not be validated. Never transient, never worth retrying."""


class InvalidAccountNumber(NubanValidationError):
    """Account number is not exactly 10 decimal digits"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid account number, account number must be 10 digits long. "
            f"Got {value!r}"
        )


class InvalidBankCode(NubanValidationError):
    """Bank code does not reduce to 3, 5 or 6 digits"""

    def __init__(self, code: str, length: Optional[int] = None):
        self.code = code
        self.length = len(code) if length is None else length
        super().__init__(
            f"Invalid bank code, bank code must be 3, 5 or 6 digits long. "
            f"{code!r} is {self.length} digits long"
        )


class InvalidDigit(NubanValidationError):
    """A character expected to be a decimal digit is not"""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid digit {character!r} at position {position}")


class InvalidInputLength(NubanValidationError):
    """Digit string and weight vector lengths differ (caller bug)"""

    def __init__(self, digits_length: int, weights_length: int):
        self.digits_length = digits_length
        self.weights_length = weights_length
        super().__init__(
            f"Value and weights must have the same length "
            f"({digits_length} != {weights_length})"
        )


class BankDirectoryError(NubanstackError):
    """The online bank directory could not be reached or returned an error"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
