"""WebACL entity representing a WAF Classic Regional or WAFv2 Web ACL."""
from dataclasses import dataclass

from waf_associator.domain.value_objects.waf_version import WafVersion


@dataclass
class WebACL:
    """Represents a Web ACL found by name in a WAF listing."""

    name: str
    identity: str  # WebACLId for WAF Classic, ARN for WAFv2
    version: WafVersion

    @classmethod
    def from_summary(cls, summary: dict, version: WafVersion) -> "WebACL":
        """Build from a list_web_acls summary of the given API generation."""
        return cls(
            name=summary["Name"],
            identity=summary[version.acl_identity_key],
            version=version,
        )

    def is_v2(self) -> bool:
        """Check if this ACL belongs to the WAFv2 API."""
        return self.version == WafVersion.V2

    def __str__(self) -> str:
        return f"WebACL({self.name}, {self.version.value})"
