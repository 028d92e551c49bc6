"""Value objects for the WAF associator domain."""
from waf_associator.domain.value_objects.stage_reference import StageResourceReference
from waf_associator.domain.value_objects.waf_version import DEFAULT_WAF_VERSION, WafVersion

__all__ = ["WafVersion", "DEFAULT_WAF_VERSION", "StageResourceReference"]
