"""
Fixed-data inventory (no network access).
"""

import logging
from pathlib import Path

import yaml

from prism_migrate.exceptions import InventoryMalformedError, SnapshotNotFoundError
from prism_migrate.inventory.base import InventoryClient
from prism_migrate.models.inventory import (
    VPC,
    Account,
    parse_accounts_response,
    parse_vpcs_response,
)

logger = logging.getLogger(__name__)


class StaticInventory(InventoryClient):
    """
    Inventory backed by in-memory records.

    Useful for testing and for offline runs against a saved snapshot.
    """

    def __init__(self, accounts: list[Account], vpcs: list[VPC], source: str = "static data"):
        self._accounts = list(accounts)
        self._vpcs = list(vpcs)
        self.source = source

    @classmethod
    def from_file(cls, path: Path | None) -> "StaticInventory":
        """
        Load a snapshot file.

        The file is YAML (or JSON) with the bodies of the two Prism responses
        under ``accounts`` and ``vpcs``::

            accounts:
              data:
                - accountNumber: "123456789012"
                  accountName: deploy-tools
            vpcs:
              data:
                vpcs:
                  - vpcId: vpc-1
                    accountId: "123456789012"
                    default: false
                    subnets: []

        Raises:
            SnapshotNotFoundError: If no path is given or the file does not exist
            InventoryMalformedError: If the file does not have the layout above
        """
        if path is None:
            raise SnapshotNotFoundError()

        path = Path(path)
        if not path.is_file():
            raise SnapshotNotFoundError(str(path))

        try:
            with open(path) as f:
                snapshot = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InventoryMalformedError("snapshot", f"{path} is not valid YAML/JSON: {e}") from e

        if not isinstance(snapshot, dict) or not {"accounts", "vpcs"} <= snapshot.keys():
            raise InventoryMalformedError(
                "snapshot", f"{path} must contain 'accounts' and 'vpcs' sections"
            )

        accounts = parse_accounts_response(snapshot["accounts"])
        vpcs = parse_vpcs_response(snapshot["vpcs"])
        logger.info(
            "Loaded %d account(s) and %d VPC(s) from snapshot %s", len(accounts), len(vpcs), path
        )
        return cls(accounts, vpcs, source=str(path))

    def fetch_accounts(self) -> list[Account]:
        return list(self._accounts)

    def fetch_vpcs(self) -> list[VPC]:
        return list(self._vpcs)

    def is_available(self) -> bool:
        """Static inventory is always available."""
        return True

    def describe(self) -> str:
        return f"Static inventory ({self.source})"
