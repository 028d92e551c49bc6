"""WAF Associator - API Gateway stage WAF association reconciler.

A deployment lifecycle step that keeps a REST API stage associated with the
configured WAF Classic Regional or WAFv2 Web ACL.
"""

__version__ = "0.1.0"

# Application layer
from waf_associator.application import (
    AssociateWafPlugin,
    AssociationReconciler,
    LifecycleEvent,
    annotate_template,
    create_plugin,
)
from waf_associator.domain import (
    AssociateWafConfig,
    DeploymentContext,
    ReconcileOutcome,
    ReconcileResult,
    WafVersion,
)

# Re-export for convenience
__all__ = [
    "__version__",
    # Domain
    "AssociateWafConfig",
    "DeploymentContext",
    "ReconcileOutcome",
    "ReconcileResult",
    "WafVersion",
    # Application
    "AssociateWafPlugin",
    "AssociationReconciler",
    "LifecycleEvent",
    "annotate_template",
    "create_plugin",
]
