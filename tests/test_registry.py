"""
Tests for the built-in bank registry and lookups
"""

import dataclasses

import pytest

from nubanstack.registry import (
    BANKS, BankEntry, list_banks, find_bank_by_code, find_banks_by_name
)


class TestBankEntry:
    """Test BankEntry value type"""

    def test_to_dict(self):
        entry = BankEntry("Zenith Bank", "057")
        assert entry.to_dict() == {"name": "Zenith Bank", "code": "057"}

    def test_from_dict_ignores_extra_fields(self):
        entry = BankEntry.from_dict({"name": "Paga", "code": "100002", "slug": "paga"})
        assert entry == BankEntry("Paga", "100002")

    def test_immutable(self):
        entry = BankEntry("Zenith Bank", "057")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.code = "058"


class TestRegistry:
    """Test the built-in list"""

    def test_list_banks(self):
        banks = list_banks()
        assert len(banks) == 31
        assert banks[0] == BankEntry("Access Bank", "044")
        assert banks[-1] == BankEntry("GoMoney", "100022")

    def test_list_banks_returns_copy(self):
        banks = list_banks()
        banks.clear()
        assert len(list_banks()) == 31

    def test_code_lengths(self):
        """Test that every built-in code is 3, 5 or 6 digits"""
        for bank in BANKS:
            assert bank.code.isdigit()
            assert len(bank.code) in (3, 5, 6)


class TestFindBankByCode:
    """Test find_bank_by_code"""

    def test_found(self):
        bank = find_bank_by_code("057")
        assert bank is not None
        assert bank.name == "Zenith Bank"

    def test_five_digit_code(self):
        assert find_bank_by_code("50515").name == "Moniepoint MFB"

    def test_not_found(self):
        assert find_bank_by_code("999999") is None

    def test_exact_match_only(self):
        """Test that padded forms are not matched"""
        assert find_bank_by_code("000057") is None
        assert find_bank_by_code("57") is None

    def test_first_match_wins(self):
        banks = [BankEntry("First", "001"), BankEntry("Second", "001")]
        assert find_bank_by_code("001", banks).name == "First"


class TestFindBanksByName:
    """Test find_banks_by_name"""

    def test_case_insensitive_substring(self):
        """Test searching for 'bank' returns only matching names in order"""
        results = find_banks_by_name("bank")

        assert len(results) > 0
        for bank in results:
            assert "bank" in bank.name.lower()

        positions = [BANKS.index(bank) for bank in results]
        assert positions == sorted(positions)

        assert BankEntry("Ecobank Nigeria", "050") in results
        assert BankEntry("Carbon", "565") not in results

    def test_uppercase_query(self):
        results = find_banks_by_name("MFB")
        assert [bank.name for bank in results] == ["Rubies MFB", "Moniepoint MFB"]

    def test_no_match(self):
        assert find_banks_by_name("nonexistent") == []

    def test_custom_list(self):
        banks = [BankEntry("Alpha Bank", "001"), BankEntry("Beta", "002")]
        assert find_banks_by_name("ALPHA", banks) == [banks[0]]
