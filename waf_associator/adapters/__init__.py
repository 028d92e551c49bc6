"""Adapters - Concrete implementations of ports."""
from waf_associator.adapters.outbound import (
    Boto3StackClient,
    Boto3WafRegionalClient,
    Boto3WafV2Client,
    ConsoleLogger,
    JsonLogger,
    JsonTemplateStore,
    create_waf_client,
)

__all__ = [
    "Boto3StackClient",
    "Boto3WafRegionalClient",
    "Boto3WafV2Client",
    "create_waf_client",
    "ConsoleLogger",
    "JsonLogger",
    "JsonTemplateStore",
]
