"""Multi-account search for EC2 instances and IAM access keys."""

from .instances import InstanceMatcher
from .orchestrator import SearchOrchestrator
from .principals import PrincipalMatcher
from .reporting import SearchReporter

__all__ = ["InstanceMatcher", "PrincipalMatcher", "SearchOrchestrator", "SearchReporter"]
