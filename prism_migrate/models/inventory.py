"""Inventory data model.

Accounts and VPCs are read verbatim from the Prism inventory service and never
modified afterwards. ``AccountInfo`` is the derived record handed to the
renderer, one per account being onboarded.
"""

from dataclasses import dataclass, field
from typing import Any

from prism_migrate.exceptions import InventoryMalformedError


def _require(record: Any, key: str, expected: type, source: str) -> Any:
    if not isinstance(record, dict):
        raise InventoryMalformedError(
            source, f"expected an object, got {type(record).__name__}"
        )
    if key not in record:
        raise InventoryMalformedError(source, f"missing required field '{key}'")
    value = record[key]
    if not isinstance(value, expected):
        raise InventoryMalformedError(
            source,
            f"field '{key}' should be {expected.__name__}, got {type(value).__name__}",
        )
    return value


def _optional(record: dict, key: str, expected: type, default: Any, source: str) -> Any:
    if record.get(key) is None:
        return default
    return _require(record, key, expected, source)


@dataclass(frozen=True)
class Subnet:
    """A subnet flagged public or private by the inventory."""

    subnet_id: str
    is_public: bool

    @classmethod
    def from_dict(cls, data: dict) -> "Subnet":
        return cls(
            subnet_id=_require(data, "subnetId", str, "subnet"),
            is_public=_require(data, "isPublic", bool, "subnet"),
        )


@dataclass(frozen=True)
class VPC:
    """A VPC and its subnets, in inventory order."""

    vpc_id: str
    account_id: str
    is_default: bool
    subnets: tuple[Subnet, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "VPC":
        vpc_id = _require(data, "vpcId", str, "vpc")
        account_id = _require(data, "accountId", str, "vpc")
        # Prism sends "default"; "isDefault" is also accepted. Absent or null
        # means not default, and absent or null subnets means none.
        default_key = "default" if "default" in data else "isDefault"
        is_default = _optional(data, default_key, bool, False, "vpc")
        subnets = _optional(data, "subnets", list, [], "vpc")
        return cls(
            vpc_id=vpc_id,
            account_id=account_id,
            is_default=is_default,
            subnets=tuple(Subnet.from_dict(s) for s in subnets),
        )


@dataclass(frozen=True)
class Account:
    """An AWS account known to the inventory."""

    account_number: str
    account_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Account":
        return cls(
            account_number=_require(data, "accountNumber", str, "account"),
            account_name=_require(data, "accountName", str, "account"),
        )


@dataclass(frozen=True)
class Logging:
    stream_name: str


@dataclass(frozen=True)
class AccountInfo:
    """Everything needed to render one account setup module."""

    account_number: str
    account_name: str
    stack: str
    bucket_for_artifact: str | None
    bucket_for_private_config: str | None
    logging: Logging
    vpcs: tuple[VPC, ...] = field(default_factory=tuple)


def parse_accounts_response(payload: Any) -> list[Account]:
    """
    Parse the body of ``GET /sources/accounts``.

    Expected shape: ``{"data": [{"accountNumber": ..., "accountName": ...}]}``

    Raises:
        InventoryMalformedError: If the payload does not have that shape
    """
    records = _require(payload, "data", list, "accounts")
    return [Account.from_dict(record) for record in records]


def parse_vpcs_response(payload: Any) -> list[VPC]:
    """
    Parse the body of ``GET /vpcs``.

    Expected shape: ``{"data": {"vpcs": [...]}}``

    Raises:
        InventoryMalformedError: If the payload does not have that shape
    """
    data = _require(payload, "data", dict, "vpcs")
    records = _require(data, "vpcs", list, "vpcs")
    return [VPC.from_dict(record) for record in records]
