"""Domain entities for the WAF associator."""
from waf_associator.domain.entities.configuration import (
    AssociateWafConfig,
    DeploymentContext,
    partition_for_region,
)
from waf_associator.domain.entities.reconcile_result import (
    ReconcileAction,
    ReconcileOutcome,
    ReconcileResult,
)
from waf_associator.domain.entities.web_acl import WebACL

__all__ = [
    "AssociateWafConfig",
    "DeploymentContext",
    "partition_for_region",
    "ReconcileAction",
    "ReconcileOutcome",
    "ReconcileResult",
    "WebACL",
]
