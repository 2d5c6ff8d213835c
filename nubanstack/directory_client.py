"""
Bank Directory Client Module

REST client for fetching bank lists from an online directory (Paystack by
default). Fetched banks collapse to the same {name, code} entries as the
built-in registry, so online and offline lists are interchangeable inputs to
bank prediction.
"""

import httpx
import logging
import time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import NubanstackConfig
from .exceptions import BankDirectoryError
from .logging_config import log_action
from .registry import BankEntry, find_bank_by_code, find_banks_by_name, list_banks
from .validator import ensure_account_number, is_valid, predict_banks

logger = logging.getLogger("nubanstack.directory")

DEFAULT_BASE_URL = "https://api.paystack.co"


class BankRecord(BaseModel):
    """A bank as returned by the directory API"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = 0
    name: str
    slug: str = ""
    code: str
    longcode: Optional[str] = None
    gateway: Optional[str] = None
    pay_with_bank: bool = False
    supports_transfer: bool = False
    available_for_direct_debit: bool = False
    active: bool = False
    country: str = ""
    currency: str = ""
    type: str = ""
    is_deleted: bool = False
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    def to_entry(self) -> BankEntry:
        return BankEntry(name=self.name, code=self.code)


class BankDirectoryClient:
    """REST client for an online bank directory"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        api_key: Optional[str] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self._client = httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: NubanstackConfig) -> 'BankDirectoryClient':
        """Build a client from configuration"""
        return cls(
            base_url=config.directory_base_url,
            timeout=config.directory_timeout,
            api_key=config.directory_api_key or None
        )

    def set_api_key(self, api_key: Optional[str]) -> 'BankDirectoryClient':
        """Replace the API key sent with subsequent requests"""
        self.api_key = api_key
        return self

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get_banks(self, country: Optional[str] = None) -> List[BankRecord]:
        """Fetch banks from the directory

        Args:
            country: Optional country filter, e.g. "nigeria"

        Returns:
            Bank records in the order the directory returned them

        Raises:
            BankDirectoryError: On transport failure, non-200 status,
                an unsuccessful envelope or an unreadable payload.
                Individual unreadable records are skipped and logged.
        """
        params = {}
        if country:
            params["country"] = country

        start = time.time()
        try:
            response = self._client.get(
                f"{self.base_url}/bank",
                params=params,
                headers=self._headers()
            )
        except httpx.HTTPError as e:
            logger.error(f"Bank directory connection failed: {e}")
            raise BankDirectoryError(f"Error fetching banks: {e}") from e

        latency_ms = (time.time() - start) * 1000

        if response.status_code != 200:
            logger.warning(f"Bank directory returned {response.status_code}: {response.text}")
            raise BankDirectoryError(
                f"Error fetching banks: directory returned {response.status_code}",
                status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise BankDirectoryError("Error fetching banks: invalid JSON response") from e

        if not isinstance(body, dict) or not body.get("status"):
            message = body.get("message") if isinstance(body, dict) else None
            raise BankDirectoryError(message or "Failed to fetch banks")

        data = body.get("data") or []
        if not isinstance(data, list):
            raise BankDirectoryError(
                f"Error fetching banks: expected a list of banks, got {type(data).__name__}"
            )

        banks = []
        for position, item in enumerate(data):
            try:
                banks.append(BankRecord.model_validate(item))
            except ValueError as e:
                logger.warning(f"Skipping unreadable bank record at position {position}: {e}")

        log_action(
            logger, "info", f"Fetched {len(banks)} banks",
            action="list_banks", resource="/bank",
            extra={"country": country, "count": len(banks), "latency_ms": round(latency_ms, 1)}
        )
        return banks

    def get_banks_by_country(self, country: str = "nigeria") -> List[BankRecord]:
        """Fetch banks for one country"""
        return self.get_banks(country=country)

    def get_bank_entries(self, country: Optional[str] = None) -> List[BankEntry]:
        """Fetch banks as {name, code} entries, dropping deleted ones"""
        return [bank.to_entry() for bank in self.get_banks(country) if not bank.is_deleted]

    def predict_banks(self, account_number: str, country: Optional[str] = None) -> List[BankEntry]:
        """Predict possible banks for an account number using the online list"""
        ensure_account_number(account_number)
        return predict_banks(account_number, self.get_bank_entries(country))

    # Offline helpers, no network involved

    def validate_account_offline(self, account_number: str, bank_code: str) -> bool:
        return is_valid(account_number, bank_code)

    def predict_banks_offline(self, account_number: str) -> List[BankEntry]:
        return predict_banks(account_number)

    def get_offline_bank_list(self) -> List[BankEntry]:
        return list_banks()

    def find_bank_by_code(self, code: str) -> Optional[BankEntry]:
        return find_bank_by_code(code)

    def search_banks_by_name(self, name: str) -> List[BankEntry]:
        return find_banks_by_name(name)

    def close(self):
        """Close the HTTP client"""
        self._client.close()

    def __enter__(self) -> 'BankDirectoryClient':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
