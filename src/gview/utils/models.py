"""Data models for configured accounts and search results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .exceptions import InvalidAccountError


class CriteriaType(str, Enum):
    """Enumeration for the kinds of lookups gview can fan out."""

    INSTANCE_ID = "instance-id"
    IP_ADDRESS = "ip"
    ACCESS_KEY_ID = "iam"


@dataclass(frozen=True)
class AccountRecord:
    """
    A named set of static AWS credentials plus the regions to search under them.

    Records are immutable; the account store replaces the whole list on change.
    """

    name: str
    access_key: str
    secret_key: str
    regions: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate required fields."""
        if not self.name:
            raise InvalidAccountError("Account name must not be empty")
        if not self.access_key or not self.secret_key:
            raise InvalidAccountError(
                f"Account {self.name} must have both an access key and a secret key",
                context={"account": self.name},
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountRecord":
        """Build a record from its YAML mapping."""
        if not isinstance(data, dict):
            raise InvalidAccountError(f"Account entry must be a mapping, got {type(data).__name__}")
        regions = data.get("regions") or []
        if isinstance(regions, str):
            regions = parse_regions(regions)
        return cls(
            name=str(data.get("name") or ""),
            access_key=str(data.get("access_key") or ""),
            secret_key=str(data.get("secret_key") or ""),
            regions=[str(region) for region in regions],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the YAML mapping written by the account store."""
        return {
            "name": self.name,
            "access_key": self.access_key,
            "secret_key": self.secret_key,
            "regions": list(self.regions),
        }

    @property
    def masked_access_key(self) -> str:
        """Access key with everything but the last four characters hidden."""
        if len(self.access_key) <= 4:
            return "*" * len(self.access_key)
        return "*" * (len(self.access_key) - 4) + self.access_key[-4:]


def parse_regions(regions: str) -> List[str]:
    """Split a comma-separated region list, dropping blanks."""
    return [region.strip() for region in regions.split(",") if region.strip()]


@dataclass(frozen=True)
class SearchCriteria:
    """The single lookup requested for one invocation."""

    type: CriteriaType
    value: str

    @classmethod
    def from_options(
        cls,
        instance_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        access_key_id: Optional[str] = None,
    ) -> Optional["SearchCriteria"]:
        """
        Select the criteria from command line values.

        IAM lookups take priority over instance-id lookups, which take
        priority over IP lookups.

        Returns:
            The selected criteria, or None when no value was supplied
        """
        if access_key_id:
            return cls(CriteriaType.ACCESS_KEY_ID, access_key_id)
        if instance_id:
            return cls(CriteriaType.INSTANCE_ID, instance_id)
        if ip_address:
            return cls(CriteriaType.IP_ADDRESS, ip_address)
        return None

    def is_principal_search(self) -> bool:
        return self.type == CriteriaType.ACCESS_KEY_ID


@dataclass(frozen=True)
class SearchOptions:
    """
    Runtime options for a search, built once by the CLI.

    stop_at_first_match of None keeps the historical behaviour: instance
    searches stop at the first hit, IAM searches scan every account.
    """

    stop_at_first_match: Optional[bool] = None
    paginate: bool = True

    def should_stop(self, criteria: SearchCriteria) -> bool:
        """Return whether a hit for the given criteria ends the fan-out."""
        if self.stop_at_first_match is not None:
            return self.stop_at_first_match
        return not criteria.is_principal_search()


@dataclass
class InstanceSummary:
    """An EC2 instance matched by a search."""

    instance_id: str
    instance_type: str
    region: str
    private_ip: Optional[str] = None
    public_ip: Optional[str] = None
    account_name: str = ""

    @classmethod
    def from_api(cls, instance: Dict[str, Any], region: str, account_name: str) -> "InstanceSummary":
        """Build a summary from a describe_instances instance entry."""
        return cls(
            instance_id=instance.get("InstanceId", ""),
            instance_type=instance.get("InstanceType", ""),
            region=region,
            private_ip=instance.get("PrivateIpAddress"),
            public_ip=instance.get("PublicIpAddress"),
            account_name=account_name,
        )


@dataclass
class PrincipalSummary:
    """An IAM user owning a searched access key."""

    user_name: str
    user_id: str
    arn: str
    account_name: str = ""

    @classmethod
    def from_api(cls, user: Dict[str, Any], account_name: str) -> "PrincipalSummary":
        """Build a summary from a list_users user entry."""
        return cls(
            user_name=user.get("UserName", ""),
            user_id=user.get("UserId", ""),
            arn=user.get("Arn", ""),
            account_name=account_name,
        )


@dataclass
class SearchOutcome:
    """What a fan-out search found and how far it got."""

    instances: List[InstanceSummary] = field(default_factory=list)
    principals: List[PrincipalSummary] = field(default_factory=list)
    pairs_visited: int = 0
    pairs_skipped: int = 0
    stopped_early: bool = False

    @property
    def found(self) -> bool:
        return bool(self.instances or self.principals)
