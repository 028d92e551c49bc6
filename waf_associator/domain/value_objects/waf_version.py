"""WAF API generation enumeration."""
from enum import Enum


class WafVersion(str, Enum):
    """WAF API generations that can be associated with a REST API stage."""

    REGIONAL = "Regional"
    V2 = "V2"

    @property
    def aws_service(self) -> str:
        """Return the boto3 service name for this API generation."""
        mapping = {
            WafVersion.REGIONAL: "waf-regional",
            WafVersion.V2: "wafv2",
        }
        return mapping[self]

    @property
    def scope(self) -> str | None:
        """WAFv2 scope for API Gateway stages. WAF Classic has no scope."""
        if self == WafVersion.V2:
            return "REGIONAL"
        return None

    @property
    def acl_identity_key(self) -> str:
        """Attribute of a listed Web ACL summary that identifies the ACL."""
        mapping = {
            WafVersion.REGIONAL: "WebACLId",
            WafVersion.V2: "ARN",
        }
        return mapping[self]

    @property
    def associate_key(self) -> str:
        """Request attribute carrying the ACL identity on associate calls."""
        mapping = {
            WafVersion.REGIONAL: "WebACLId",
            WafVersion.V2: "WebACLArn",
        }
        return mapping[self]

    @property
    def association_key(self) -> str:
        """Attribute of get_web_acl_for_resource responses holding the ACL."""
        mapping = {
            WafVersion.REGIONAL: "WebACLSummary",
            WafVersion.V2: "WebACL",
        }
        return mapping[self]

    @property
    def display_name(self) -> str:
        """Human-readable name for the API generation."""
        mapping = {
            WafVersion.REGIONAL: "WAF Classic (Regional)",
            WafVersion.V2: "WAFv2",
        }
        return mapping[self]


DEFAULT_WAF_VERSION = WafVersion.REGIONAL
