"""
Bank Code Normalization

CBN bank codes exist in three encodings: 3 digit legacy codes, 5 digit codes
issued to fintechs and microfinance banks, and the canonical 6 digit form.
The checksum only understands the 6 digit form.
"""

import re
from typing import Optional

from .exceptions import InvalidBankCode

NON_DIGITS = re.compile(r"[^0-9]")

CANONICAL_LENGTH = 6

# Prefix that brings each accepted length up to the canonical one
PADDING = {
    3: "000",
    5: "9",
    6: "",
}


def strip_bank_code(raw_code: str) -> str:
    """Remove every character that is not an ASCII digit"""
    return NON_DIGITS.sub("", raw_code)


def pad_bank_code(raw_code: str) -> Optional[str]:
    """Return the 6 digit form of raw_code, or None if it cannot be padded"""
    digits = strip_bank_code(raw_code)
    prefix = PADDING.get(len(digits))
    if prefix is None:
        return None
    return prefix + digits


def normalize_bank_code(raw_code: str) -> str:
    """
    Normalize a bank code to its canonical 6 digit form.

    Args:
        raw_code: 3, 5 or 6 digit bank code, possibly with separators

    Returns:
        The 6 digit bank code

    Raises:
        InvalidBankCode: If the stripped code is not 3, 5 or 6 digits long
    """
    padded = pad_bank_code(raw_code)
    if padded is None:
        digits = strip_bank_code(raw_code)
        raise InvalidBankCode(digits, len(digits))
    return padded
