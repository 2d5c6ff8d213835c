"""
NUBAN Checksum Module

Weighted digit sums and check digit arithmetic as defined by the CBN NUBAN
specification. All functions are pure; the weight tables are immutable.
"""

from typing import Sequence, Tuple

from .exceptions import InvalidDigit, InvalidInputLength

# Weights applied to the 6 digit (normalized) bank code
BANK_CODE_WEIGHTS: Tuple[int, ...] = (3, 7, 3, 3, 7, 3)

# Weights applied to the 9 digit serial number
SERIAL_NUMBER_WEIGHTS: Tuple[int, ...] = (3, 7, 3, 3, 7, 3, 3, 7, 3)

DIGITS = "0123456789"


def compute_weighted_sum(digits: str, weights: Sequence[int]) -> int:
    """
    Multiply each digit by the weight at the same position and sum the results.

    Args:
        digits: String of ASCII decimal digits
        weights: Weight vector of the same length as digits

    Returns:
        The weighted sum

    Raises:
        InvalidInputLength: If digits and weights differ in length
        InvalidDigit: If a character of digits is not 0-9
    """
    if len(digits) != len(weights):
        raise InvalidInputLength(len(digits), len(weights))

    total = 0
    for position, (char, weight) in enumerate(zip(digits, weights)):
        if char not in DIGITS:
            raise InvalidDigit(char, position)
        total += int(char) * weight

    return total


def compute_check_digit(bank_code: str, serial_number: str) -> int:
    """
    Compute the NUBAN check digit for a normalized bank code and serial.

    The digit is chosen so the complete weighted sum is a multiple of 10.

    Args:
        bank_code: 6 digit normalized bank code
        serial_number: 9 digit serial number

    Returns:
        Check digit in the range 0-9
    """
    total = (compute_weighted_sum(bank_code, BANK_CODE_WEIGHTS) +
             compute_weighted_sum(serial_number, SERIAL_NUMBER_WEIGHTS))

    check_digit = 10 - (total % 10)
    return 0 if check_digit == 10 else check_digit
