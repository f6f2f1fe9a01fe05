"""Account configuration store for gview."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .exceptions import AccountNotFoundError, AccountStoreError, DuplicateAccountError
from .models import AccountRecord

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "aws-accounts.yaml"
CONFIG_ENV_VAR = "GVIEW_CONFIG"
CONFIG_FILE_MODE = 0o600


class AccountStore:
    """
    Reads and writes the list of configured accounts.

    The file holds a single top-level ``accounts`` sequence. Every save
    rewrites the whole file through a temporary file in the same directory,
    so a failed write never leaves a partially written configuration behind.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the account store.

        Args:
            path: Path to the YAML file (defaults to aws-accounts.yaml)
        """
        self.path = Path(path or DEFAULT_CONFIG_FILE).expanduser()

    def ensure_exists(self) -> bool:
        """
        Create an empty configuration file if none exists yet.

        Returns:
            True if the file was created, False if it already existed
        """
        if self.path.exists():
            return False
        self.save([])
        logger.debug(f"Created account configuration file {self.path}")
        return True

    def load(self) -> List[AccountRecord]:
        """Load all accounts in stored order."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise AccountStoreError(f"error parsing YAML file {self.path}: {e}")
        except OSError as e:
            raise AccountStoreError(f"error reading YAML file {self.path}: {e}")

        if not isinstance(data, dict):
            raise AccountStoreError(f"error parsing YAML file {self.path}: expected a mapping")

        accounts = [AccountRecord.from_dict(entry) for entry in data.get("accounts") or []]
        logger.debug(f"Loaded {len(accounts)} accounts from {self.path}")
        return accounts

    def save(self, accounts: List[AccountRecord]) -> None:
        """Atomically replace the stored account list."""
        data = {"accounts": [account.to_dict() for account in accounts]}
        directory = self.path.parent
        tmp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(directory))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, indent=2, sort_keys=False)
            os.chmod(tmp_path, CONFIG_FILE_MODE)
            os.replace(tmp_path, self.path)
        except (OSError, yaml.YAMLError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise AccountStoreError(f"error writing YAML file {self.path}: {e}")

    def add_account(self, account: AccountRecord) -> None:
        """
        Append an account to the store.

        Raises:
            DuplicateAccountError: If an account with the same name exists
        """
        accounts = self.load()
        if any(existing.name == account.name for existing in accounts):
            raise DuplicateAccountError(account.name)
        accounts.append(account)
        self.save(accounts)
        logger.info(f"Added account {account.name} with regions {', '.join(account.regions)}")

    def remove_account(self, name: str) -> AccountRecord:
        """
        Remove an account from the store.

        Returns:
            The removed record

        Raises:
            AccountNotFoundError: If no account has that name
        """
        accounts = self.load()
        remaining = [account for account in accounts if account.name != name]
        if len(remaining) == len(accounts):
            raise AccountNotFoundError(name)
        removed = next(account for account in accounts if account.name == name)
        self.save(remaining)
        logger.info(f"Removed account {name}")
        return removed
