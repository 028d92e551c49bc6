"""WAF Client Port - Interface for Web ACL operations of one API generation."""
from typing import Protocol

from waf_associator.domain.value_objects import WafVersion


class WafClientPort(Protocol):
    """
    Port interface for the WAF control plane.

    One implementation exists per API generation (WAF Classic Regional and
    WAFv2). Request and response shapes follow the AWS API of that
    generation; callers interpret responses through ``version``.
    Provider errors are raised, never swallowed.
    """

    @property
    def version(self) -> WafVersion:
        """The API generation this client talks to."""
        ...

    def list_web_acls(self, limit: int, next_marker: str | None = None) -> dict:
        """
        List one page of Web ACLs.

        Args:
            limit: Maximum number of ACL summaries on the page
            next_marker: Continuation token from the previous page

        Returns:
            Response dict with ``WebACLs`` and, when more pages exist, ``NextMarker``
        """
        ...

    def get_web_acl_for_resource(self, resource_arn: str) -> dict:
        """
        Get the Web ACL currently associated with a resource.

        Returns:
            Response dict; ``WebACLSummary`` (Regional) or ``WebACL`` (V2)
            is present only when the resource has an association
        """
        ...

    def associate_web_acl(self, resource_arn: str, web_acl_identity: str) -> None:
        """Associate the Web ACL with the resource, replacing any prior ACL."""
        ...

    def disassociate_web_acl(self, resource_arn: str) -> None:
        """Remove the Web ACL association from the resource."""
        ...
