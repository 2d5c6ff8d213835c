"""
Bank Registry Module

Built-in list of Nigerian banks used for offline validation and prediction.
The list is ordered and read-only; lookups preserve its order.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional


@dataclass(frozen=True)
class BankEntry:
    """A bank as the checksum engine sees it: a name and a code"""
    name: str
    code: str  # 3, 5 or 6 digits, not normalized

    def to_dict(self) -> Dict[str, str]:
        """Convert to the {name, code} wire shape"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'BankEntry':
        """Create from any mapping carrying name and code keys"""
        return cls(name=str(data['name']), code=str(data['code']))


BANKS = (
    BankEntry('Access Bank', '044'),
    BankEntry('Access Bank (Diamond)', '063'),
    BankEntry('Carbon', '565'),
    BankEntry('Ecobank Nigeria', '050'),
    BankEntry('Fidelity Bank', '070'),
    BankEntry('First Bank of Nigeria', '011'),
    BankEntry('First City Monument Bank', '214'),
    BankEntry('Guaranty Trust Bank', '058'),
    BankEntry('Jaiz Bank', '301'),
    BankEntry('Keystone Bank', '082'),
    BankEntry('Polaris Bank', '076'),
    BankEntry('Providus Bank', '101'),
    BankEntry('Rubies MFB', '125'),
    BankEntry('Signature Bank Ltd', '106'),
    BankEntry('Stanbic IBTC Bank', '221'),
    BankEntry('Standard Chartered Bank', '068'),
    BankEntry('Sterling Bank', '232'),
    BankEntry('Titan Bank', '102'),
    BankEntry('Union Bank of Nigeria', '032'),
    BankEntry('United Bank For Africa', '033'),
    BankEntry('Unity Bank', '215'),
    BankEntry('VFD Microfinance Bank Limited', '566'),
    BankEntry('Wema Bank', '035'),
    BankEntry('Zenith Bank', '057'),
    BankEntry('OPay Digital Services Limited (OPay)', '999992'),
    BankEntry('Paga', '100002'),
    BankEntry('PalmPay', '999991'),
    BankEntry('Paystack-Titan', '100039'),
    BankEntry('Sparkle Microfinance Bank', '51310'),
    BankEntry('Moniepoint MFB', '50515'),
    BankEntry('GoMoney', '100022'),
)


def list_banks() -> List[BankEntry]:
    """Get the built-in list of Nigerian banks"""
    return list(BANKS)


def find_bank_by_code(code: str, banks: Optional[Iterable[BankEntry]] = None) -> Optional[BankEntry]:
    """
    Find the first bank whose code matches exactly.

    Codes are compared as given, so "057" and "000057" are different keys.
    """
    for bank in BANKS if banks is None else banks:
        if bank.code == code:
            return bank
    return None


def find_banks_by_name(name: str, banks: Optional[Iterable[BankEntry]] = None) -> List[BankEntry]:
    """Find banks whose name contains name, ignoring case"""
    search = name.casefold()
    return [
        bank for bank in (BANKS if banks is None else banks)
        if search in bank.name.casefold()
    ]
