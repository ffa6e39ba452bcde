"""
TypeScript account setup module generation.
"""

from prism_migrate.config import PLACEHOLDER
from prism_migrate.models.inventory import AccountInfo
from prism_migrate.select import private_subnets, public_subnets, select_primary_vpc
from prism_migrate.util.naming import hyphen_to_camel
from prism_migrate.util.templates import TemplateLoader

ACCOUNT_TEMPLATE = "typescript/account.ts.j2"

_default_loader: TemplateLoader | None = None


def _get_default_loader() -> TemplateLoader:
    global _default_loader
    if _default_loader is None:
        _default_loader = TemplateLoader()
    return _default_loader


def _or_placeholder(value: str | None) -> str:
    return PLACEHOLDER if value is None else value


def module_name(info: AccountInfo) -> str:
    """Exported constant name, e.g. ``DeployToolsAccount``."""
    return f"{hyphen_to_camel(info.account_name)}Account"


def create_template_context(info: AccountInfo) -> dict:
    """
    Create template rendering context for one account.

    Args:
        info: Account to render

    Returns:
        Dictionary of template variables
    """
    primary_vpc = select_primary_vpc(info.vpcs)
    subnets = primary_vpc.subnets if primary_vpc else ()

    return {
        "camel_name": hyphen_to_camel(info.account_name),
        "account_number": info.account_number,
        "account_name": info.account_name,
        "stack": info.stack,
        "bucket_for_artifacts": _or_placeholder(info.bucket_for_artifact),
        "bucket_for_private_config": _or_placeholder(info.bucket_for_private_config),
        "stream_name": info.logging.stream_name,
        "primary_vpc": primary_vpc,
        "private_subnet_ids": [s.subnet_id for s in private_subnets(subnets)],
        "public_subnet_ids": [s.subnet_id for s in public_subnets(subnets)],
    }


def render_account(info: AccountInfo, loader: TemplateLoader | None = None) -> str:
    """
    Render the ``AwsAccountSetupProps`` module for an account.

    When the account has no primary VPC the ``vpc`` block is replaced by a
    comment, so this never fails on missing network data.

    Args:
        info: Account to render
        loader: Template loader, defaults to the packaged templates

    Returns:
        TypeScript source, ending with a newline
    """
    loader = loader or _get_default_loader()
    return loader.render(ACCOUNT_TEMPLATE, create_template_context(info))
