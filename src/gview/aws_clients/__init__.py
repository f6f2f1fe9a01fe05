"""AWS service client management.

This package provides:
- Per-account, per-region client construction from static credentials
- Lazy page iteration over list and describe operations
"""

from .manager import AWSClientManager, default_boto_config, resolve_client_context
from .pagination import iter_items, iter_pages

__all__ = [
    "AWSClientManager",
    "default_boto_config",
    "iter_items",
    "iter_pages",
    "resolve_client_context",
]
