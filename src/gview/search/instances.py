"""EC2 instance lookup by instance id or IP address."""

import logging
from typing import Any, Dict, List, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from ..aws_clients.manager import AWSClientManager
from ..aws_clients.pagination import iter_items
from ..utils.models import CriteriaType, InstanceSummary, SearchCriteria

logger = logging.getLogger(__name__)

# Describe errors that only mean "not in this region"
EXPECTED_ERROR_CODES = {"InvalidInstanceID.NotFound", "InvalidInstanceID.Malformed"}

PRIVATE_IP_FILTER = "private-ip-address"
PUBLIC_IP_FILTER = "ip-address"


class InstanceMatcher:
    """
    Finds EC2 instances matching a search criteria in one account and region.

    An instance id is looked up with a single describe_instances call. An IP
    address is looked up with two independent calls, one filtering on the
    private address and one on the public address, because EC2 indexes them
    under different filter names. Results are concatenated in query order,
    then reservation order, then instance order, without de-duplication.

    A failed query is logged and contributes nothing; the other query still
    runs.
    """

    def __init__(self, paginate: bool = True):
        self.paginate = paginate

    def build_queries(self, criteria: SearchCriteria) -> List[Tuple[str, Dict[str, Any]]]:
        """Return (description, describe_instances parameters) for each query to issue."""
        if criteria.type == CriteriaType.INSTANCE_ID:
            return [("instance", {"InstanceIds": [criteria.value]})]
        if criteria.type == CriteriaType.IP_ADDRESS:
            return [
                (
                    "private IP",
                    {"Filters": [{"Name": PRIVATE_IP_FILTER, "Values": [criteria.value]}]},
                ),
                (
                    "public IP",
                    {"Filters": [{"Name": PUBLIC_IP_FILTER, "Values": [criteria.value]}]},
                ),
            ]
        raise ValueError(f"Instance search does not support criteria type {criteria.type.value}")

    def find_instances(self, ctx: AWSClientManager, criteria: SearchCriteria) -> List[InstanceSummary]:
        """
        Run every query for the criteria and merge their results.

        Raises:
            ConfigError: If the EC2 client cannot be created for the context
        """
        queries = self.build_queries(criteria)
        ec2 = ctx.get_ec2_client()

        results: List[InstanceSummary] = []
        for description, params in queries:
            results.extend(self._run_query(ec2, ctx, description, criteria.value, params))
        return results

    def _run_query(
        self,
        ec2: Any,
        ctx: AWSClientManager,
        description: str,
        value: str,
        params: Dict[str, Any],
    ) -> List[InstanceSummary]:
        found = []
        try:
            for reservation in iter_items(
                ec2, "describe_instances", "Reservations", paginate=self.paginate, **params
            ):
                for instance in reservation.get("Instances", []):
                    found.append(InstanceSummary.from_api(instance, ctx.region, ctx.account_name))
        except (ClientError, BotoCoreError) as e:
            message = (
                f"Error describing instances by {description} {value} "
                f"in account {ctx.account_name}, region {ctx.region}: {e}"
            )
            if _error_code(e) in EXPECTED_ERROR_CODES:
                logger.debug(message)
            else:
                logger.warning(message)
            return []

        logger.debug(
            f"describe_instances by {description} {value} returned {len(found)} instances "
            f"in account {ctx.account_name}, region {ctx.region}"
        )
        return found


def _error_code(error: Exception) -> str:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "")
    return ""
