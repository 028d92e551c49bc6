"""Application layer - Use cases and business logic."""
from waf_associator.application.acl_lookup import AclLookup
from waf_associator.application.association_reconciler import AssociationReconciler
from waf_associator.application.plugin import (
    AssociateWafPlugin,
    LifecycleEvent,
    create_packaging_plugin,
    create_plugin,
)
from waf_associator.application.resource_resolver import (
    REST_API_ID_OUTPUT_KEY,
    REST_API_LOGICAL_ID,
    ResourceResolver,
)
from waf_associator.application.template_annotator import annotate_template
from waf_associator.application.version_policy import (
    build_associate_waf_config,
    normalize_waf_version,
)

__all__ = [
    "AclLookup",
    "AssociationReconciler",
    "AssociateWafPlugin",
    "LifecycleEvent",
    "create_packaging_plugin",
    "create_plugin",
    "ResourceResolver",
    "REST_API_ID_OUTPUT_KEY",
    "REST_API_LOGICAL_ID",
    "annotate_template",
    "build_associate_waf_config",
    "normalize_waf_version",
]
