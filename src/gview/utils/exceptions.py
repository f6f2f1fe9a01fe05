"""Custom exception classes for gview."""

from typing import Any, Dict, Optional


class GviewError(Exception):
    """Base exception for gview operations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize gview error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.context = context or {}


class ConfigError(GviewError):
    """Raised when an AWS session or client cannot be configured for an account and region."""

    def __init__(self, account_name: str, region: str, reason: str):
        super().__init__(
            f"Unable to load SDK config for account {account_name}, region {region}: {reason}",
            context={"account": account_name, "region": region},
        )
        self.account_name = account_name
        self.region = region


class RemoteCallError(GviewError):
    """Raised when a describe/list call against AWS fails."""

    def __init__(
        self,
        operation: str,
        account_name: str,
        region: str,
        original_error: Optional[Exception] = None,
    ):
        """Initialize remote call error.

        Args:
            operation: Name of the AWS operation that failed
            account_name: Account the call was issued under
            region: Region the call was issued in
            original_error: The botocore exception that caused the failure
        """
        message = f"{operation} failed in account {account_name}, region {region}"
        if original_error is not None:
            message += f": {original_error}"
        super().__init__(
            message,
            context={"operation": operation, "account": account_name, "region": region},
        )
        self.operation = operation
        self.original_error = original_error


class AccountStoreError(GviewError):
    """Raised when the account configuration file cannot be read, parsed or written."""


class InvalidAccountError(AccountStoreError):
    """Raised when an account record is missing required fields."""


class DuplicateAccountError(AccountStoreError):
    """Exception raised when adding an account whose name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Account {name} already exists", context={"account": name})
        self.name = name


class AccountNotFoundError(AccountStoreError):
    """Exception raised when removing an account that is not configured."""

    def __init__(self, name: str):
        super().__init__(f"Account {name} not found", context={"account": name})
        self.name = name
