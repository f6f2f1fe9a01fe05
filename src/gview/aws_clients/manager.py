"""AWS client utilities for gview."""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

from ..utils.exceptions import ConfigError
from ..utils.models import AccountRecord

logger = logging.getLogger(__name__)


class AWSClientManager:
    """
    Hands out AWS service clients for one account in one region.

    The session is built from the account's static access key pair, with no
    session token and no credential caching beyond this object. A manager is
    created per (account, region) pair and discarded after use.
    """

    def __init__(self, account: AccountRecord, region: str, boto_config: Optional[Any] = None):
        """
        Initialize the AWS client manager.

        Args:
            account: Account whose credentials are used
            region: AWS region every client is bound to
            boto_config: Optional botocore Config applied to created clients

        Raises:
            ConfigError: If the session cannot be constructed
        """
        self.account = account
        self.region = region
        self.boto_config = boto_config
        self.session = None
        self._clients: Dict[str, Any] = {}
        self._init_session()

    @property
    def account_name(self) -> str:
        return self.account.name

    def _init_session(self) -> None:
        """Initialize the AWS session."""
        try:
            self.session = boto3.Session(
                aws_access_key_id=self.account.access_key,
                aws_secret_access_key=self.account.secret_key,
                region_name=self.region,
            )
        except BotoCoreError as e:
            raise ConfigError(self.account.name, self.region, str(e)) from e

    def get_client(self, service_name: str) -> Any:
        """
        Get an AWS service client bound to this manager's region.

        Raises:
            ConfigError: If botocore rejects the region or client configuration
        """
        if self.session is None:
            raise RuntimeError("Session not initialized")

        if service_name not in self._clients:
            client_kwargs: Dict[str, Any] = {"region_name": self.region}
            if self.boto_config is not None:
                client_kwargs["config"] = self.boto_config
            try:
                self._clients[service_name] = self.session.client(service_name, **client_kwargs)
            except BotoCoreError as e:
                raise ConfigError(self.account.name, self.region, str(e)) from e
            logger.debug(
                f"Created {service_name} client for account {self.account.name}, region {self.region}"
            )
        return self._clients[service_name]

    def get_ec2_client(self) -> Any:
        """Get the EC2 client."""
        return self.get_client("ec2")

    def get_iam_client(self) -> Any:
        """Get the IAM client."""
        return self.get_client("iam")


def resolve_client_context(
    account: AccountRecord, region: str, boto_config: Optional[Any] = None
) -> AWSClientManager:
    """
    Build the client context for one (account, region) pair.

    Raises:
        ConfigError: If the SDK configuration cannot be constructed
    """
    if not region:
        raise ConfigError(account.name, region, "region must not be empty")
    return AWSClientManager(account, region, boto_config=boto_config)


def default_boto_config() -> BotoConfig:
    """Client configuration used by the command line."""
    return BotoConfig(user_agent_extra="gview")
