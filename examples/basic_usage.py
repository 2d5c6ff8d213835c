#!/usr/bin/env python3
"""
Example: Offline NUBAN validation and bank prediction

Validates account numbers against bank codes, predicts candidate banks, and,
when a directory API key is configured, repeats the prediction against the
online bank list.
"""

import os
import sys

# Add the package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from nubanstack import (
    BankDirectoryClient, BankDirectoryError, NubanValidationError,
    find_bank_by_code, generate_account_number, is_valid, normalize_bank_code,
    predict_banks
)
from nubanstack.config import get_config
from nubanstack.logging_config import setup_logging_from_config


def main():
    config = get_config()
    setup_logging_from_config(config)

    print("🏦 Nubanstack - NUBAN Validation Example")
    print("=" * 60)

    # 1. Bank code normalization
    print("\n1. 🔢 Bank Code Normalization")
    for code in ["057", "51310", "999992"]:
        print(f"   {code:>6} -> {normalize_bank_code(code)}")

    # 2. Offline validation
    print("\n2. ✅ Offline Validation")
    zenith = find_bank_by_code("057")
    account_number = generate_account_number("012345678", zenith.code)
    print(f"   {account_number} at {zenith.name}: {is_valid(account_number, zenith.code)}")
    print(f"   0123456789 at {zenith.name}: {is_valid('0123456789', zenith.code)}")

    try:
        is_valid("12345", zenith.code)
    except NubanValidationError as e:
        print(f"   Rejected: {e}")

    # 3. Bank prediction
    print("\n3. 🔍 Possible Banks (built-in list)")
    for bank in predict_banks("0123456789"):
        print(f"   • {bank.name} (Code: {bank.code})")

    # 4. Online directory
    print("\n4. 🌐 Possible Banks (online directory)")
    if not config.directory_api_key:
        print("   Skipped: set NUBANSTACK_DIRECTORY_API_KEY or PAYSTACK_SECRET_KEY")
        return

    with BankDirectoryClient.from_config(config) as client:
        try:
            for bank in client.predict_banks("0123456789", country="nigeria"):
                print(f"   • {bank.name} (Code: {bank.code})")
        except BankDirectoryError as e:
            print(f"   ❌ Directory unavailable: {e}")


if __name__ == "__main__":
    main()
