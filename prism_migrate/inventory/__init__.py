"""
Inventory access layer.
"""

from prism_migrate.config import MigrationConfig
from prism_migrate.inventory.base import InventoryClient
from prism_migrate.inventory.prism import PrismInventory
from prism_migrate.inventory.static import StaticInventory


def get_inventory(config: MigrationConfig) -> InventoryClient:
    """
    Factory function to get an inventory client based on config.

    Args:
        config: Run configuration

    Returns:
        InventoryClient instance

    Raises:
        ValueError: If the provider is not supported
        SnapshotNotFoundError: If the file provider has no usable snapshot
    """
    provider_name = config.inventory.provider.lower()

    if provider_name == "prism":
        return PrismInventory(config.inventory)
    if provider_name == "file":
        return StaticInventory.from_file(config.inventory.snapshot)

    raise ValueError(
        f"Unsupported inventory provider: {provider_name}. Must be one of: ['prism', 'file']"
    )


__all__ = ["InventoryClient", "PrismInventory", "StaticInventory", "get_inventory"]
