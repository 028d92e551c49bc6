"""Version Policy - Validation of the configured WAF API generation."""
from typing import Any

from waf_associator.domain.entities import AssociateWafConfig
from waf_associator.domain.value_objects import DEFAULT_WAF_VERSION, WafVersion
from waf_associator.ports.outbound import LoggerPort

INVALID_VERSION_BANNER = "-------- Invalid WAF Version Configuration --------"

VALID_WAF_VERSIONS = [v.value for v in WafVersion]


def normalize_waf_version(raw_version: Any, logger: LoggerPort) -> WafVersion:
    """
    Turn a raw `version` setting into a supported WafVersion.

    Values are matched exactly against "Regional" and "V2". Anything else,
    including a missing value, falls back to the default generation and a
    single warning is logged. This never raises.

    Args:
        raw_version: Value of `associateWaf.version` as read from configuration
        logger: Logger receiving the correction warning

    Returns:
        The validated WafVersion
    """
    if isinstance(raw_version, str) and raw_version in VALID_WAF_VERSIONS:
        return WafVersion(raw_version)

    logger.warning(
        f"\n{INVALID_VERSION_BANNER}\nVersion Defaulted to {DEFAULT_WAF_VERSION.value}",
        configured=raw_version,
        allowed=",".join(VALID_WAF_VERSIONS),
    )
    return DEFAULT_WAF_VERSION


def build_associate_waf_config(raw: dict | None, logger: LoggerPort) -> AssociateWafConfig:
    """
    Build the typed configuration from the raw `associateWaf` block.

    An absent block is treated as empty configuration, which means the
    stage should end up without a WAF. A name that is not a string (YAML
    ``name: false`` or ``name: no``) counts as no name.
    """
    raw = raw or {}
    name = raw.get("name")
    if name is not None and not isinstance(name, str):
        logger.warning("WAF name is not a string; treating it as unset", configured=name)
        name = None

    return AssociateWafConfig(
        name=name,
        version=normalize_waf_version(raw.get("version"), logger),
    )
