"""Boto3 WAF Client Adapters - Implementations of WafClientPort using boto3."""
from typing import Any

import boto3

from waf_associator.domain.value_objects import WafVersion
from waf_associator.ports.outbound import LoggerPort


class Boto3WafClient:
    """
    Base adapter for one WAF API generation.

    Subclasses only differ in how requests are built; responses are
    returned as the AWS API sends them. botocore errors propagate.
    """

    version: WafVersion

    def __init__(
        self,
        region: str,
        logger: LoggerPort,
        session: boto3.Session | None = None,
    ):
        """
        Initialize the WAF client.

        Args:
            region: Region of the REST API stage
            logger: Logger for operation logging
            session: Optional boto3 session (uses default if not provided)
        """
        self._region = region
        self._logger = logger
        self._session = session or boto3.Session()
        self._client: Any = None

    def _get_client(self) -> Any:
        """Get or create the boto3 client for this API generation."""
        if self._client is None:
            self._client = self._session.client(self.version.aws_service, region_name=self._region)
        return self._client

    def _list_params(self, limit: int, next_marker: str | None) -> dict:
        params: dict[str, Any] = {"Limit": limit}
        if next_marker:
            params["NextMarker"] = next_marker
        return params

    def list_web_acls(self, limit: int, next_marker: str | None = None) -> dict:
        """List one page of Web ACLs."""
        params = self._list_params(limit, next_marker)
        self._logger.debug(f"Listing {self.version.display_name} Web ACLs", **params)
        return self._get_client().list_web_acls(**params)

    def get_web_acl_for_resource(self, resource_arn: str) -> dict:
        """Get the Web ACL currently associated with a resource."""
        return self._get_client().get_web_acl_for_resource(ResourceArn=resource_arn)

    def associate_web_acl(self, resource_arn: str, web_acl_identity: str) -> None:
        """Associate a Web ACL with a resource."""
        params = {
            "ResourceArn": resource_arn,
            self.version.associate_key: web_acl_identity,
        }
        self._get_client().associate_web_acl(**params)

    def disassociate_web_acl(self, resource_arn: str) -> None:
        """Remove the Web ACL association from a resource."""
        self._get_client().disassociate_web_acl(ResourceArn=resource_arn)


class Boto3WafRegionalClient(Boto3WafClient):
    """WAF Classic Regional (``waf-regional``) adapter."""

    version = WafVersion.REGIONAL


class Boto3WafV2Client(Boto3WafClient):
    """WAFv2 (``wafv2``) adapter. Listing requires the REGIONAL scope."""

    version = WafVersion.V2

    def _list_params(self, limit: int, next_marker: str | None) -> dict:
        params = super()._list_params(limit, next_marker)
        params["Scope"] = self.version.scope
        return params


def create_waf_client(
    version: WafVersion,
    region: str,
    logger: LoggerPort,
    session: boto3.Session | None = None,
) -> Boto3WafClient:
    """Create the WAF adapter matching the configured API generation."""
    clients = {
        WafVersion.REGIONAL: Boto3WafRegionalClient,
        WafVersion.V2: Boto3WafV2Client,
    }
    return clients[version](region=region, logger=logger, session=session)
