"""
Data models.

This package contains the inventory records read from Prism and the derived
per-account record used for rendering.

Modules:
- inventory: Subnet, VPC, Account, Logging, AccountInfo and response parsing
"""

from prism_migrate.models.inventory import VPC, Account, AccountInfo, Logging, Subnet

__all__ = ["Account", "AccountInfo", "Logging", "Subnet", "VPC"]
