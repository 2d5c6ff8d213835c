"""
Test suite for NUBAN validation and bank prediction
"""

import logging
from types import SimpleNamespace

import pytest

from nubanstack.directory_client import BankRecord
from nubanstack.exceptions import InvalidAccountNumber, InvalidBankCode
from nubanstack.registry import BANKS, BankEntry
from nubanstack.validator import (
    ensure_account_number, is_valid, validate, predict_banks,
    check_digit_for, generate_account_number
)


class TestEnsureAccountNumber:
    """Test account number precondition"""

    def test_valid(self):
        assert ensure_account_number("0123456789") == "0123456789"

    @pytest.mark.parametrize("value", ["12345", "01234567890", "", "012345678a", " 123456789"])
    def test_invalid(self, value):
        with pytest.raises(InvalidAccountNumber) as exc_info:
            ensure_account_number(value)
        assert exc_info.value.value == value


class TestIsValid:
    """Test is_valid"""

    def test_zenith_account(self):
        """Test a constructed Zenith Bank account number"""
        # 000057 weighs 56, serial 012345678 weighs 156, check digit 8
        assert is_valid("0123456788", "057")

    def test_every_other_check_digit_fails(self):
        """Test that only one final digit is valid for a serial and bank"""
        for digit in "012345679":
            assert not is_valid(f"012345678{digit}", "057")

    def test_bank_code_forms_agree(self):
        """Test that 3 digit and padded 6 digit codes validate the same"""
        assert is_valid("0123456788", "000057")
        assert is_valid("0000000009", "51310") == is_valid("0000000009", "951310")

    def test_validate_alias(self):
        assert validate is is_valid

    def test_wrong_length_account(self):
        with pytest.raises(InvalidAccountNumber):
            is_valid("12345", "057")

    def test_bad_bank_code(self):
        """Test that normalization errors propagate"""
        with pytest.raises(InvalidBankCode) as exc_info:
            is_valid("1234567890", "abc")
        assert exc_info.value.length == 0

    def test_account_checked_before_bank_code(self):
        with pytest.raises(InvalidAccountNumber):
            is_valid("123", "abc")

    def test_uniqueness_across_registry(self):
        """Test that exactly one final digit validates for every registry bank"""
        for serial in ["000000000", "012345678", "987654321", "555555555"]:
            for bank in BANKS:
                valid = [d for d in "0123456789" if is_valid(serial + d, bank.code)]
                assert len(valid) == 1


class TestGenerateAccountNumber:
    """Test building account numbers from serials"""

    def test_check_digit_for(self):
        assert check_digit_for("012345678", "057") == 8

    def test_generate(self):
        assert generate_account_number("012345678", "057") == "0123456788"

    def test_generated_numbers_validate(self):
        for bank in BANKS:
            account_number = generate_account_number("314159265", bank.code)
            assert is_valid(account_number, bank.code)

    def test_invalid_bank_code(self):
        with pytest.raises(InvalidBankCode):
            generate_account_number("012345678", "12")


class TestPredictBanks:
    """Test predict_banks"""

    def test_all_zero_account(self):
        """Test prediction for 0000000000 against the built-in list"""
        results = predict_banks("0000000000")

        assert [bank.name for bank in results] == [
            "Access Bank",
            "First Bank of Nigeria",
            "United Bank For Africa",
            "PalmPay",
        ]

    def test_results_are_exactly_the_valid_banks(self):
        """Test that results match an exhaustive is_valid scan"""
        for account_number in ["0000000000", "0123456789", "0123456788", "9876543210"]:
            results = predict_banks(account_number)
            expected = [bank for bank in BANKS if is_valid(account_number, bank.code)]
            assert results == expected

    def test_example_account(self):
        assert [bank.code for bank in predict_banks("0123456789")] == ["050", "214", "566"]

    def test_zenith_account(self):
        results = predict_banks("0123456788")
        assert [bank.name for bank in results] == [
            "Providus Bank",
            "Standard Chartered Bank",
            "Wema Bank",
            "Zenith Bank",
        ]

    def test_preserves_registry_order(self):
        registry = [BankEntry("Later", "011"), BankEntry("Earlier", "044")]
        assert [bank.name for bank in predict_banks("0000000000", registry)] == ["Later", "Earlier"]

        registry.reverse()
        assert [bank.name for bank in predict_banks("0000000000", registry)] == ["Earlier", "Later"]

    def test_duplicates_tolerated(self):
        registry = [BankEntry("Access Bank", "044"), BankEntry("Access Bank", "044")]
        assert len(predict_banks("0000000000", registry)) == 2

    def test_malformed_entries_skipped(self, caplog):
        """Test that bad registry codes are skipped rather than aborting"""
        registry = [
            BankEntry("Broken", "12"),
            BankEntry("Empty", ""),
            BankEntry("Access Bank", "044"),
        ]

        with caplog.at_level(logging.DEBUG, logger="nubanstack.validator"):
            results = predict_banks("0000000000", registry)

        assert results == [BankEntry("Access Bank", "044")]
        assert "Broken" in caplog.text

    def test_mapping_registry(self):
        """Test that {name, code} mappings are accepted as registry items"""
        registry = [
            {"name": "Access Bank", "code": "044", "slug": "access-bank"},
            {"name": "No code"},
            {"name": "Zenith Bank", "code": "057"},
        ]

        assert predict_banks("0000000000", registry) == [BankEntry("Access Bank", "044")]

    def test_directory_records_registry(self):
        """Test that records fetched from the directory are accepted as-is"""
        registry = [
            BankRecord(name="Access Bank", code="044"),
            BankRecord(name="Zenith Bank", code="057"),
            BankRecord(name="First Bank", code="011"),
        ]

        assert predict_banks("0000000000", registry) == [
            BankEntry("Access Bank", "044"),
            BankEntry("First Bank", "011"),
        ]

    def test_attribute_registry(self):
        """Test that any object with name and code attributes is accepted"""
        registry = [SimpleNamespace(name="Access Bank", code="044"), SimpleNamespace(name="Nameless")]

        assert predict_banks("0000000000", registry) == [BankEntry("Access Bank", "044")]

    def test_empty_result(self):
        assert predict_banks("0000000000", [BankEntry("Zenith Bank", "057")]) == []
        assert predict_banks("0000000000", []) == []

    def test_invalid_account_fails_before_scan(self):
        """Test fail-fast on bad account numbers"""
        def registry():
            raise AssertionError("registry should not be touched")
            yield

        with pytest.raises(InvalidAccountNumber):
            predict_banks("12345", registry())
