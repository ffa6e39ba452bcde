"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from prism_migrate.inventory.static import StaticInventory
from prism_migrate.models.inventory import VPC, Account, Subnet


def make_vpc(
    vpc_id: str,
    account_id: str = "123",
    is_default: bool = False,
    public: tuple[str, ...] = (),
    private: tuple[str, ...] = (),
) -> VPC:
    """Build a VPC with public subnets first, then private ones."""
    subnets = tuple(Subnet(s, True) for s in public) + tuple(Subnet(s, False) for s in private)
    return VPC(vpc_id=vpc_id, account_id=account_id, is_default=is_default, subnets=subnets)


@pytest.fixture
def fixtures_dir():
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_file(fixtures_dir):
    """Return path to the Prism snapshot fixture."""
    return fixtures_dir / "prism-snapshot.yaml"


@pytest.fixture
def primary_vpc():
    """Non-default VPC with three public and three private subnets."""
    return make_vpc("vpc-primary", public=("a", "b", "c"), private=("x", "y", "z"))


@pytest.fixture
def default_vpc():
    """Default VPC that otherwise has the primary shape."""
    return make_vpc("vpc-default", is_default=True, public=("a", "b", "c"), private=("x", "y", "z"))


@pytest.fixture
def accounts():
    return [
        Account(account_number="123", account_name="deploy-tools"),
        Account(account_number="456", account_name="other-team"),
    ]


@pytest.fixture
def static_inventory(accounts, primary_vpc):
    """Inventory where deploy-tools has a primary VPC and other-team has a plain one."""
    other_vpc = make_vpc("vpc-other", account_id="456", public=("p",), private=("q",))
    return StaticInventory(accounts, [other_vpc, primary_vpc])


@pytest.fixture
def vpc_factory():
    """Return the make_vpc helper."""
    return make_vpc
