"""
Primary VPC selection.

Accounts are expected to have one non-default VPC spread over three
availability zones, with one public and one private subnet per zone. That VPC
is the one referenced in the generated configuration.
"""

import logging
from collections.abc import Iterable, Sequence

from prism_migrate.models.inventory import VPC, Subnet

logger = logging.getLogger(__name__)

PRIMARY_SUBNETS_PER_TIER = 3


def public_subnets(subnets: Iterable[Subnet]) -> list[Subnet]:
    """Return the public subnets, in input order."""
    return [subnet for subnet in subnets if subnet.is_public]


def private_subnets(subnets: Iterable[Subnet]) -> list[Subnet]:
    """Return the private subnets, in input order."""
    return [subnet for subnet in subnets if not subnet.is_public]


def is_primary_candidate(vpc: VPC) -> bool:
    """Check whether a VPC has the primary VPC shape."""
    if vpc.is_default:
        return False

    return (
        len(public_subnets(vpc.subnets)) == PRIMARY_SUBNETS_PER_TIER
        and len(private_subnets(vpc.subnets)) == PRIMARY_SUBNETS_PER_TIER
    )


def select_primary_vpc(vpcs: Sequence[VPC]) -> VPC | None:
    """
    Pick the primary VPC for an account.

    Args:
        vpcs: The account's VPCs, in inventory order

    Returns:
        The first non-default VPC with exactly three public and three private
        subnets, or None when no VPC matches
    """
    for vpc in vpcs:
        if is_primary_candidate(vpc):
            return vpc

    logger.debug("No primary VPC candidate among %d VPC(s)", len(vpcs))
    return None
