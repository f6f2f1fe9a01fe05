"""Utility modules for gview: configuration, models, errors and logging."""

from .config import AccountStore
from .exceptions import (
    AccountNotFoundError,
    AccountStoreError,
    ConfigError,
    DuplicateAccountError,
    GviewError,
    InvalidAccountError,
    RemoteCallError,
)
from .models import (
    AccountRecord,
    CriteriaType,
    InstanceSummary,
    PrincipalSummary,
    SearchCriteria,
    SearchOptions,
    SearchOutcome,
)

__all__ = [
    "AccountStore",
    "AccountRecord",
    "CriteriaType",
    "InstanceSummary",
    "PrincipalSummary",
    "SearchCriteria",
    "SearchOptions",
    "SearchOutcome",
    "GviewError",
    "ConfigError",
    "RemoteCallError",
    "AccountStoreError",
    "InvalidAccountError",
    "DuplicateAccountError",
    "AccountNotFoundError",
]
