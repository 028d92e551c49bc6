"""Configuration entities for a WAF association run."""
from dataclasses import dataclass

from waf_associator.domain.value_objects.stage_reference import StageResourceReference
from waf_associator.domain.value_objects.waf_version import DEFAULT_WAF_VERSION, WafVersion


@dataclass(frozen=True)
class AssociateWafConfig:
    """
    The `associateWaf` configuration block.

    An absent or blank name means no WAF should be associated with the stage.
    The version is normalized before construction, see
    waf_associator.application.version_policy.
    """

    name: str | None = None
    version: WafVersion = DEFAULT_WAF_VERSION

    @property
    def wants_association(self) -> bool:
        """True when a non-blank WAF name is configured."""
        return bool(self.name and self.name.strip())


def partition_for_region(region: str) -> str:
    """Return the AWS partition a region belongs to."""
    if region.startswith("cn-"):
        return "aws-cn"
    if region.startswith("us-gov-"):
        return "aws-us-gov"
    return "aws"


@dataclass(frozen=True)
class DeploymentContext:
    """Facts about the deployment supplied by the lifecycle host."""

    service_name: str
    stage: str
    region: str
    partition: str | None = None
    stack_name: str | None = None
    rest_api_id: str | None = None

    @property
    def default_stack_name(self) -> str:
        """CloudFormation stack name the framework derives for a service."""
        return f"{self.service_name}-{self.stage}"

    @property
    def effective_stack_name(self) -> str:
        """Explicit stack name override, else the derived default."""
        return self.stack_name or self.default_stack_name

    @property
    def effective_partition(self) -> str:
        return self.partition or partition_for_region(self.region)

    def stage_reference(self, rest_api_id: str) -> StageResourceReference:
        """Build the attachment point for a REST API in this deployment."""
        return StageResourceReference(
            partition=self.effective_partition,
            region=self.region,
            rest_api_id=rest_api_id,
            stage=self.stage,
        )
