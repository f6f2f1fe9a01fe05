"""IAM user lookup by access key id."""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..aws_clients.manager import AWSClientManager
from ..aws_clients.pagination import iter_items
from ..utils.exceptions import RemoteCallError
from ..utils.models import PrincipalSummary

logger = logging.getLogger(__name__)


class PrincipalMatcher:
    """
    Finds the IAM user owning an access key in one account.

    Users are scanned in list_users order and each user's keys in
    list_access_keys order. The scan stops at the first matching key, so no
    keys are listed for users after the owner.
    """

    def __init__(self, paginate: bool = True):
        self.paginate = paginate

    def find_principal(self, ctx: AWSClientManager, access_key_id: str) -> Optional[PrincipalSummary]:
        """
        Return the owner of access_key_id, or None after scanning every user.

        A failure listing one user's keys is logged and that user skipped.

        Raises:
            RemoteCallError: If listing the users fails
            ConfigError: If the IAM client cannot be created for the context
        """
        iam = ctx.get_iam_client()
        try:
            for user in iter_items(iam, "list_users", "Users", paginate=self.paginate):
                if self._user_owns_key(iam, ctx, user, access_key_id):
                    return PrincipalSummary.from_api(user, ctx.account_name)
        except (ClientError, BotoCoreError) as e:
            raise RemoteCallError("list_users", ctx.account_name, ctx.region, e) from e
        return None

    def _user_owns_key(
        self, iam: Any, ctx: AWSClientManager, user: Dict[str, Any], access_key_id: str
    ) -> bool:
        user_name = user.get("UserName", "")
        try:
            for key in iter_items(
                iam,
                "list_access_keys",
                "AccessKeyMetadata",
                paginate=self.paginate,
                UserName=user_name,
            ):
                if key.get("AccessKeyId") == access_key_id:
                    return True
        except (ClientError, BotoCoreError) as e:
            logger.warning(
                f"Error listing access keys for user {user_name} in account {ctx.account_name}: {e}"
            )
        return False
