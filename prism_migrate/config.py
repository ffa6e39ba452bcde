"""
Configuration for prism-migrate runs.

The allow-list of accounts and the placeholder values written into generated
modules are explicit configuration rather than module constants, so that a run
can target any set of accounts.
"""

import json
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from prism_migrate.exceptions import (
    ConfigAlreadyExistsError,
    ConfigNotFoundError,
    InvalidConfigError,
)

SCHEMA_FILE = Path(__file__).parent / "schema" / "config.schema.json"

DEFAULT_CONFIG_FILE = "prism-migrate.yaml"

PLACEHOLDER = "TODO"

DEFAULT_CONFIG: dict[str, Any] = {
    "accounts_to_migrate": ["deploy-tools"],
    "placeholders": {
        "stack": None,
        "artifact_bucket": PLACEHOLDER,
        "private_config_bucket": PLACEHOLDER,
        "log_stream": PLACEHOLDER,
    },
    "inventory": {
        "provider": "prism",
        "base_url": "https://prism.gutools.co.uk",
        "timeout": 30,
        "snapshot": None,
    },
    "templates_dir": None,
}


@dataclass(frozen=True)
class PlaceholderValues:
    """Values written for settings that still need to be filled in by hand.

    ``stack`` of None means the stack is named after the account.
    """

    stack: str | None = None
    artifact_bucket: str | None = PLACEHOLDER
    private_config_bucket: str | None = PLACEHOLDER
    log_stream: str = PLACEHOLDER


@dataclass(frozen=True)
class InventoryConfig:
    """Where account and VPC data is read from."""

    provider: str = "prism"  # prism | file
    base_url: str = "https://prism.gutools.co.uk"
    timeout: float = 30.0
    snapshot: Path | None = None


@dataclass(frozen=True)
class MigrationConfig:
    """Complete configuration for a generation run."""

    accounts_to_migrate: frozenset[str] = frozenset({"deploy-tools"})
    placeholders: PlaceholderValues = field(default_factory=PlaceholderValues)
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    templates_dir: Path | None = None

    def __post_init__(self):
        object.__setattr__(self, "accounts_to_migrate", frozenset(self.accounts_to_migrate))

    def with_accounts(self, accounts: list[str]) -> "MigrationConfig":
        """Return a copy targeting a different set of account names."""
        return MigrationConfig(
            accounts_to_migrate=frozenset(accounts),
            placeholders=self.placeholders,
            inventory=self.inventory,
            templates_dir=self.templates_dir,
        )


def _resolve(path: str | None, base_dir: Path) -> Path | None:
    if not path:
        return None
    p = Path(path).expanduser()
    return p if p.is_absolute() else base_dir / p


def _validate_config_schema(config: dict) -> None:
    """Validate config against JSON schema."""
    schema = json.loads(SCHEMA_FILE.read_text())
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        location = ".".join(str(p) for p in e.path) or "<root>"
        raise InvalidConfigError(f"{e.message} (at {location})") from e


def config_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> MigrationConfig:
    """
    Build a MigrationConfig from a (validated) configuration mapping.

    Missing sections and keys fall back to the defaults. Relative paths are
    resolved against ``base_dir``.
    """
    base_dir = base_dir or Path.cwd()
    placeholders = {**DEFAULT_CONFIG["placeholders"], **(data.get("placeholders") or {})}
    inventory = {**DEFAULT_CONFIG["inventory"], **(data.get("inventory") or {})}
    accounts = data.get("accounts_to_migrate", DEFAULT_CONFIG["accounts_to_migrate"])

    return MigrationConfig(
        accounts_to_migrate=frozenset(accounts),
        placeholders=PlaceholderValues(**placeholders),
        inventory=InventoryConfig(
            provider=inventory["provider"],
            base_url=inventory["base_url"].rstrip("/"),
            timeout=float(inventory["timeout"]),
            snapshot=_resolve(inventory["snapshot"], base_dir),
        ),
        templates_dir=_resolve(data.get("templates_dir"), base_dir),
    )


def load_config(path: Path | None = None) -> MigrationConfig:
    """
    Load and validate a configuration file.

    Args:
        path: YAML configuration file, or None for the built-in defaults

    Returns:
        MigrationConfig for the run

    Raises:
        ConfigNotFoundError: If the file does not exist
        InvalidConfigError: If the file is empty, not a mapping or fails validation
    """
    if path is None:
        return MigrationConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(str(path))

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{path} is not valid YAML: {e}") from e

    if data is None:
        raise InvalidConfigError(f"{path} is empty")

    if not isinstance(data, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return config_from_dict(data, base_dir=path.parent)


def write_default_config(path: Path, templates_dir: str | None = None) -> None:
    """
    Write the default configuration to a YAML file.

    Raises:
        ConfigAlreadyExistsError: If the file already exists
    """
    path = Path(path)
    if path.exists():
        raise ConfigAlreadyExistsError(str(path))

    config = deepcopy(DEFAULT_CONFIG)
    if templates_dir:
        config["templates_dir"] = templates_dir

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
