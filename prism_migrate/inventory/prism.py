"""
Prism inventory client over HTTP.
"""

import logging
from typing import Any

import requests

from prism_migrate.config import InventoryConfig
from prism_migrate.exceptions import InventoryMalformedError, InventoryUnavailableError
from prism_migrate.inventory.base import InventoryClient
from prism_migrate.models.inventory import (
    VPC,
    Account,
    parse_accounts_response,
    parse_vpcs_response,
)

logger = logging.getLogger(__name__)


class PrismInventory(InventoryClient):
    """Reads accounts and VPCs from the Prism API."""

    ACCOUNTS_PATH = "/sources/accounts"
    VPCS_PATH = "/vpcs"

    def __init__(self, config: InventoryConfig, session: requests.Session | None = None):
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str, source: str) -> Any:
        """
        GET a Prism endpoint and decode its JSON body.

        Raises:
            InventoryUnavailableError: On connection errors, timeouts or a non-2xx status
            InventoryMalformedError: If the body is not JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug("GET %s (timeout %ss)", url, self.timeout)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise InventoryUnavailableError(source, str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            raise InventoryMalformedError(source, f"response is not valid JSON ({e})") from e

    def fetch_accounts(self) -> list[Account]:
        accounts = parse_accounts_response(self._get_json(self.ACCOUNTS_PATH, "accounts"))
        logger.info("Fetched %d account(s) from %s", len(accounts), self.base_url)
        return accounts

    def fetch_vpcs(self) -> list[VPC]:
        vpcs = parse_vpcs_response(self._get_json(self.VPCS_PATH, "vpcs"))
        logger.info("Fetched %d VPC(s) from %s", len(vpcs), self.base_url)
        return vpcs

    def is_available(self) -> bool:
        """Prism needs no credentials, only a base URL."""
        return bool(self.base_url)

    def describe(self) -> str:
        return f"Prism ({self.base_url})"
