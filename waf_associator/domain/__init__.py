"""Domain layer for the WAF associator."""
from waf_associator.domain.entities import (
    AssociateWafConfig,
    DeploymentContext,
    ReconcileAction,
    ReconcileOutcome,
    ReconcileResult,
    WebACL,
)
from waf_associator.domain.value_objects import StageResourceReference, WafVersion

__all__ = [
    "AssociateWafConfig",
    "DeploymentContext",
    "ReconcileAction",
    "ReconcileOutcome",
    "ReconcileResult",
    "WebACL",
    "StageResourceReference",
    "WafVersion",
]
