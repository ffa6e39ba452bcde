"""
Custom exceptions for prism-migrate with helpful error messages.
"""


class PrismMigrateError(Exception):
    """Base exception for prism-migrate errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class InventoryError(PrismMigrateError):
    """Errors related to the inventory service."""

    pass


class InventoryUnavailableError(InventoryError):
    """Inventory service could not be reached or returned an error status."""

    def __init__(self, source: str, error_message: str):
        message = f"Unable to fetch {source} from inventory: {error_message}"

        suggestion = (
            "This could be due to:\n"
            "  - Network connectivity issues (VPN not connected?)\n"
            "  - The inventory service being down\n"
            "  - A wrong inventory.base_url in your configuration\n\n"
            "Try:\n"
            "  1. Check that the inventory URL is reachable from this machine\n"
            "  2. Re-run once the service is available\n"
            "  3. Use a saved snapshot instead:\n"
            "     Edit prism-migrate.yaml and set:\n"
            "       inventory:\n"
            "         provider: file\n"
            "         snapshot: <path-to-snapshot.yaml>"
        )
        super().__init__(message, suggestion)


class InventoryMalformedError(InventoryError):
    """Inventory response could not be parsed into the expected shape."""

    def __init__(self, source: str, error_details: str):
        message = f"Failed to parse {source} response: {error_details}"

        suggestion = (
            "The inventory returned an unexpected format.\n"
            "Check that inventory.base_url points at the Prism API root and\n"
            "that snapshot files follow the documented accounts/vpcs layout."
        )
        super().__init__(message, suggestion)


class SnapshotNotFoundError(InventoryError):
    """Inventory snapshot file not found."""

    def __init__(self, path: str = None):
        if path:
            message = f"Inventory snapshot not found: {path}"
        else:
            message = "No inventory snapshot configured for the file provider."

        suggestion = (
            "Set inventory.snapshot in prism-migrate.yaml to an existing file, or\n"
            "switch back to the live inventory:\n"
            "  inventory:\n"
            "    provider: prism"
        )
        super().__init__(message, suggestion)


class ConfigurationError(PrismMigrateError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the prism-migrate.yaml file.\n"
            "You can regenerate the default configuration:\n"
            "  mv prism-migrate.yaml prism-migrate.yaml.backup\n"
            "  prism-migrate init\n\n"
            "Then merge your settings back from the backup."
        )
        super().__init__(message, suggestion)


class ConfigNotFoundError(ConfigurationError):
    """Configuration file not found."""

    def __init__(self, path: str):
        message = f"Configuration file not found: {path}"
        suggestion = (
            "Create a configuration file with:\n"
            f"  prism-migrate init {path}\n\n"
            "Or omit --config to use the built-in defaults."
        )
        super().__init__(message, suggestion)


class ConfigAlreadyExistsError(ConfigurationError):
    """Configuration file already exists at target location."""

    def __init__(self, path: str):
        message = f"Configuration file already exists at: {path}"
        suggestion = "Choose a different path or remove the existing file:\n" f"  rm {path}"
        super().__init__(message, suggestion)


class OutputConflictError(PrismMigrateError):
    """Several accounts would be written to the same module file."""

    def __init__(self, path: str, account_names: list[str]):
        message = f"Accounts {', '.join(account_names)} would all be written to {path}"
        suggestion = (
            "Their names map to the same module name. Generate them separately:\n"
            f"  prism-migrate generate --account {account_names[0]} --output-dir <dir>"
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, PrismMigrateError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"
