"""
Abstract base class for inventory clients.
"""
from abc import ABC, abstractmethod

from prism_migrate.models.inventory import VPC, Account


class InventoryClient(ABC):
    """Read-only access to the account and VPC inventory."""

    @abstractmethod
    def fetch_accounts(self) -> list[Account]:
        """
        Fetch every account known to the inventory.

        Returns:
            Accounts in inventory order

        Raises:
            InventoryUnavailableError: If the inventory cannot be reached
            InventoryMalformedError: If the response cannot be parsed
        """
        pass

    @abstractmethod
    def fetch_vpcs(self) -> list[VPC]:
        """
        Fetch every VPC known to the inventory, across all accounts.

        Returns:
            VPCs in inventory order

        Raises:
            InventoryUnavailableError: If the inventory cannot be reached
            InventoryMalformedError: If the response cannot be parsed
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the client is properly configured.

        Returns:
            True if the client can be used, False otherwise
        """
        pass

    def describe(self) -> str:
        """Short description of the data source, for log and status output."""
        return type(self).__name__
