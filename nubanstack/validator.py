"""
NUBAN Validation Module

Validates account numbers against bank codes and predicts which banks an
account number could belong to.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from .bank_codes import normalize_bank_code, pad_bank_code
from .checksum import compute_check_digit
from .exceptions import InvalidAccountNumber
from .registry import BANKS, BankEntry

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_PATTERN = re.compile(r"[0-9]{10}")

# BankEntry, a {name, code} mapping, or any object with to_entry() or name/code attributes
RegistryItem = Any


def ensure_account_number(account_number: str) -> str:
    """
    Check that account_number is exactly 10 ASCII digits.

    Returns:
        The account number, unchanged

    Raises:
        InvalidAccountNumber: If it is not
    """
    if not isinstance(account_number, str) or not ACCOUNT_NUMBER_PATTERN.fullmatch(account_number):
        raise InvalidAccountNumber(account_number)
    return account_number


def _matches(account_number: str, bank_code: str) -> bool:
    expected = compute_check_digit(bank_code, account_number[:9])
    return expected == int(account_number[9])


def is_valid(account_number: str, bank_code: str) -> bool:
    """
    Validate a Nigerian bank account number using the NUBAN algorithm.

    Args:
        account_number: The 10 digit account number
        bank_code: The bank code (3, 5 or 6 digits)

    Returns:
        True if the check digit matches the bank code and serial

    Raises:
        InvalidAccountNumber: If the account number is not 10 digits
        InvalidBankCode: If the bank code cannot be normalized
    """
    ensure_account_number(account_number)
    return _matches(account_number, normalize_bank_code(bank_code))


validate = is_valid


def check_digit_for(serial_number: str, bank_code: str) -> int:
    """Compute the check digit a 9 digit serial number needs at the given bank"""
    return compute_check_digit(normalize_bank_code(bank_code), serial_number)


def generate_account_number(serial_number: str, bank_code: str) -> str:
    """Build the full NUBAN for a 9 digit serial number at the given bank"""
    return f"{serial_number}{check_digit_for(serial_number, bank_code)}"


def _as_entry(item: RegistryItem) -> Optional[BankEntry]:
    if isinstance(item, BankEntry):
        return item
    if hasattr(item, "to_entry"):
        return item.to_entry()
    if isinstance(item, Mapping):
        if "name" in item and "code" in item:
            return BankEntry.from_dict(item)
        return None
    if hasattr(item, "name") and hasattr(item, "code"):
        return BankEntry(name=str(item.name), code=str(item.code))
    return None


def predict_banks(account_number: str,
                  registry: Optional[Iterable[RegistryItem]] = None) -> List[BankEntry]:
    """
    Predict the banks an account number could belong to.

    Every bank in the registry whose code produces the account's check digit
    is returned, in registry order. Entries with malformed codes are skipped.

    Args:
        account_number: The 10 digit account number
        registry: Banks to scan: BankEntry objects, {name, code} mappings or
            directory records. Defaults to the built-in list.

    Returns:
        Matching banks, possibly empty

    Raises:
        InvalidAccountNumber: If the account number is not 10 digits
    """
    ensure_account_number(account_number)

    possible_banks = []
    for item in BANKS if registry is None else registry:
        entry = _as_entry(item)
        if entry is None:
            logger.debug(f"Skipping registry entry without name and code: {item!r}")
            continue

        bank_code = pad_bank_code(entry.code)
        if bank_code is None:
            logger.debug(f"Skipping {entry.name}: invalid bank code {entry.code!r}")
            continue

        if _matches(account_number, bank_code):
            possible_banks.append(entry)

    return possible_banks
