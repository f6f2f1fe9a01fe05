"""Fan-out search across every configured account and region."""

import logging
from typing import Callable, List, Optional

from ..aws_clients.manager import AWSClientManager, resolve_client_context
from ..utils.exceptions import ConfigError, RemoteCallError
from ..utils.models import AccountRecord, SearchCriteria, SearchOptions, SearchOutcome
from .instances import InstanceMatcher
from .principals import PrincipalMatcher
from .reporting import SearchReporter

logger = logging.getLogger(__name__)

Resolver = Callable[[AccountRecord, str], AWSClientManager]


class SearchOrchestrator:
    """
    Drives the instance and principal matchers over accounts x regions.

    Accounts are visited in stored order and, within each account, regions
    in stored order, one pair at a time. Each match is reported as soon as
    it is found. When the effective policy is stop-at-first-match the search
    returns right after the first reported match and marks the outcome as
    stopped early; ending the process is left to the caller.
    """

    def __init__(
        self,
        reporter: Optional[SearchReporter] = None,
        options: Optional[SearchOptions] = None,
        resolver: Resolver = resolve_client_context,
        instance_matcher: Optional[InstanceMatcher] = None,
        principal_matcher: Optional[PrincipalMatcher] = None,
    ):
        self.options = options or SearchOptions()
        self.reporter = reporter or SearchReporter()
        self.resolver = resolver
        self.instance_matcher = instance_matcher or InstanceMatcher(paginate=self.options.paginate)
        self.principal_matcher = principal_matcher or PrincipalMatcher(
            paginate=self.options.paginate
        )

    def search(self, accounts: List[AccountRecord], criteria: SearchCriteria) -> SearchOutcome:
        """Search every (account, region) pair for the criteria."""
        outcome = SearchOutcome()
        stop_at_first_match = self.options.should_stop(criteria)

        for account in accounts:
            for region in account.regions:
                outcome.pairs_visited += 1
                logger.debug(f"Searching account {account.name}, region {region}")
                try:
                    ctx = self.resolver(account, region)
                    matched = self._search_pair(ctx, criteria, outcome, stop_at_first_match)
                except ConfigError as e:
                    logger.warning(str(e))
                    outcome.pairs_skipped += 1
                    continue

                if matched and stop_at_first_match:
                    outcome.stopped_early = True
                    return outcome

        return outcome

    def _search_pair(
        self,
        ctx: AWSClientManager,
        criteria: SearchCriteria,
        outcome: SearchOutcome,
        stop_at_first_match: bool,
    ) -> bool:
        if criteria.is_principal_search():
            return self._search_principal(ctx, criteria.value, outcome)

        instances = self.instance_matcher.find_instances(ctx, criteria)
        if not instances:
            return False
        if stop_at_first_match:
            instances = instances[:1]
        self.reporter.instances_found(ctx.account_name, ctx.region, instances)
        outcome.instances.extend(instances)
        return True

    def _search_principal(
        self, ctx: AWSClientManager, access_key_id: str, outcome: SearchOutcome
    ) -> bool:
        try:
            principal = self.principal_matcher.find_principal(ctx, access_key_id)
        except RemoteCallError as e:
            logger.warning(str(e))
            return False

        if principal is None:
            self.reporter.principal_not_found(access_key_id, ctx.account_name)
            return False

        self.reporter.principal_found(access_key_id, principal)
        outcome.principals.append(principal)
        return True
