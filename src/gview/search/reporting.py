"""Line-oriented reporting of search results."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ..utils.models import InstanceSummary, PrincipalSummary

SEPARATOR = "-----"


class SearchReporter:
    """Prints matches to the console as soon as they are found.

    Every record is printed with soft wrapping so that a line is never split
    at the console width, whatever the terminal or pipe it goes to.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def _line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _header(self, text: str) -> None:
        self.console.print(f"[green]{text}[/green]", highlight=False, soft_wrap=True)

    def instances_found(self, account_name: str, region: str, instances: List[InstanceSummary]) -> None:
        """Print the instances matched in one account and region."""
        self._header(
            f"Instances found in account: {escape(account_name)}, Region: {escape(region)}"
        )
        for instance in instances:
            self._line(f"Instance ID: {instance.instance_id}")
            self._line(f"Instance Type: {instance.instance_type}")
            self._line(f"Region: {instance.region}")
            self._line(f"Private IP Address: {instance.private_ip or 'N/A'}")
            if instance.public_ip:
                self._line(f"Public IP Address: {instance.public_ip}")
            self._line(SEPARATOR)

    def principal_found(self, access_key_id: str, principal: PrincipalSummary) -> None:
        """Print the IAM user owning the searched access key."""
        self._header(
            f"Found IAM user with access key {escape(access_key_id)} "
            f"in account {escape(principal.account_name)}"
        )
        self._line(f"User Name: {principal.user_name}")
        self._line(f"User ID: {principal.user_id}")
        self._line(f"ARN: {principal.arn}")
        self._line(SEPARATOR)

    def principal_not_found(self, access_key_id: str, account_name: str) -> None:
        self._line(f"No IAM user found with access key {access_key_id} in account {account_name}")
