"""
Nubanstack

Offline validation of Nigerian bank account numbers using the CBN NUBAN
check digit algorithm, plus a thin client for online bank directories.
"""

from .exceptions import (
    NubanstackError, NubanValidationError, InvalidAccountNumber,
    InvalidBankCode, InvalidDigit, InvalidInputLength, BankDirectoryError
)
from .checksum import (
    BANK_CODE_WEIGHTS, SERIAL_NUMBER_WEIGHTS,
    compute_weighted_sum, compute_check_digit
)
from .bank_codes import normalize_bank_code
from .registry import BankEntry, BANKS, list_banks, find_bank_by_code, find_banks_by_name
from .validator import (
    ensure_account_number, is_valid, validate, predict_banks,
    check_digit_for, generate_account_number
)
from .directory_client import BankDirectoryClient, BankRecord

__version__ = "1.0.0"

__all__ = [
    "NubanstackError",
    "NubanValidationError",
    "InvalidAccountNumber",
    "InvalidBankCode",
    "InvalidDigit",
    "InvalidInputLength",
    "BankDirectoryError",
    "BANK_CODE_WEIGHTS",
    "SERIAL_NUMBER_WEIGHTS",
    "compute_weighted_sum",
    "compute_check_digit",
    "normalize_bank_code",
    "BankEntry",
    "BANKS",
    "list_banks",
    "find_bank_by_code",
    "find_banks_by_name",
    "ensure_account_number",
    "is_valid",
    "validate",
    "predict_banks",
    "check_digit_for",
    "generate_account_number",
    "BankDirectoryClient",
    "BankRecord",
]
