"""Outbound adapters - External services (AWS, templates, logging)."""
from waf_associator.adapters.outbound.boto3_stack_client import Boto3StackClient
from waf_associator.adapters.outbound.boto3_waf_client import (
    Boto3WafClient,
    Boto3WafRegionalClient,
    Boto3WafV2Client,
    create_waf_client,
)
from waf_associator.adapters.outbound.console_logger import ConsoleLogger
from waf_associator.adapters.outbound.json_logger import JsonLogger
from waf_associator.adapters.outbound.json_template_store import JsonTemplateStore

__all__ = [
    "Boto3StackClient",
    "Boto3WafClient",
    "Boto3WafRegionalClient",
    "Boto3WafV2Client",
    "create_waf_client",
    "ConsoleLogger",
    "JsonLogger",
    "JsonTemplateStore",
]
