"""
Join inventory data into per-account records and render them.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from prism_migrate.config import MigrationConfig
from prism_migrate.exceptions import OutputConflictError
from prism_migrate.generate.typescript import module_name, render_account
from prism_migrate.inventory.base import InventoryClient
from prism_migrate.models.inventory import VPC, Account, AccountInfo, Logging
from prism_migrate.select import select_primary_vpc
from prism_migrate.util.naming import hyphen_to_camel
from prism_migrate.util.templates import TemplateLoader

logger = logging.getLogger(__name__)


def group_vpcs_by_account(vpcs: Iterable[VPC]) -> dict[str, list[VPC]]:
    """Group VPCs by owning account id, keeping inventory order within each group."""
    groups: dict[str, list[VPC]] = defaultdict(list)
    for vpc in vpcs:
        groups[vpc.account_id].append(vpc)
    return dict(groups)


def filter_accounts(accounts: Iterable[Account], names: Iterable[str]) -> list[Account]:
    """Keep accounts whose name is in ``names`` (exact match), in inventory order."""
    wanted = set(names)
    return [account for account in accounts if account.account_name in wanted]


def build_account_info(
    account: Account, vpcs: Iterable[VPC], config: MigrationConfig
) -> AccountInfo:
    """Create the render record for one account."""
    placeholders = config.placeholders
    return AccountInfo(
        account_number=account.account_number,
        account_name=account.account_name,
        stack=placeholders.stack or hyphen_to_camel(account.account_name),
        bucket_for_artifact=placeholders.artifact_bucket,
        bucket_for_private_config=placeholders.private_config_bucket,
        logging=Logging(stream_name=placeholders.log_stream),
        vpcs=tuple(vpcs),
    )


def build_account_infos(
    accounts: list[Account], vpcs: list[VPC], config: MigrationConfig
) -> list[AccountInfo]:
    """
    Build render records for every allow-listed account.

    Args:
        accounts: Full account list from the inventory
        vpcs: Full VPC list from the inventory
        config: Run configuration (allow-list and placeholder values)

    Returns:
        One AccountInfo per allow-listed account, in inventory order. Accounts
        without VPCs get an empty ``vpcs`` tuple.
    """
    selected = filter_accounts(accounts, config.accounts_to_migrate)

    missing = set(config.accounts_to_migrate) - {account.account_name for account in selected}
    if missing:
        logger.warning("Account(s) not found in inventory: %s", ", ".join(sorted(missing)))

    vpcs_by_account = group_vpcs_by_account(vpcs)

    infos = []
    for account in selected:
        account_vpcs = vpcs_by_account.get(account.account_number, [])
        info = build_account_info(account, account_vpcs, config)
        if select_primary_vpc(info.vpcs) is None:
            logger.info(
                "No suitable VPC for %s (%s) among %d VPC(s)",
                account.account_name,
                account.account_number,
                len(account_vpcs),
            )
        infos.append(info)

    return infos


def generate_documents(
    inventory: InventoryClient,
    config: MigrationConfig,
    loader: TemplateLoader | None = None,
) -> list[tuple[AccountInfo, str]]:
    """
    Fetch the inventory and render a module for each allow-listed account.

    Both inventory calls complete before anything is rendered, so a failing
    fetch leaves no partial output.

    Args:
        inventory: Inventory client
        config: Run configuration
        loader: Template loader, defaults to one honouring ``config.templates_dir``

    Returns:
        List of (account info, rendered module) tuples in inventory order

    Raises:
        InventoryError: If fetching or parsing the inventory fails
    """
    accounts = inventory.fetch_accounts()
    vpcs = inventory.fetch_vpcs()

    if loader is None:
        loader = TemplateLoader(config.templates_dir)

    infos = build_account_infos(accounts, vpcs, config)
    return [(info, render_account(info, loader)) for info in infos]


def write_documents(documents: list[tuple[AccountInfo, str]], output_dir: Path) -> list[Path]:
    """
    Write rendered modules as ``<output_dir>/<Name>Account.ts``.

    Nothing is written if two accounts map to the same file name.

    Returns:
        Paths written, in the same order as ``documents``

    Raises:
        OutputConflictError: If two documents share a module name
    """
    output_dir = Path(output_dir)
    owners: dict[Path, list[str]] = defaultdict(list)
    for info, _ in documents:
        owners[output_dir / f"{module_name(info)}.ts"].append(info.account_name)

    for path, names in owners.items():
        if len(names) > 1:
            raise OutputConflictError(str(path), names)

    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for info, text in documents:
        path = output_dir / f"{module_name(info)}.ts"
        path.write_text(text)
        logger.debug("Wrote %s", path)
        paths.append(path)
    return paths
