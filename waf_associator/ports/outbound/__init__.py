"""Outbound ports - Interfaces for driven adapters."""
from waf_associator.ports.outbound.logger_port import LoggerPort
from waf_associator.ports.outbound.stack_client_port import StackClientPort
from waf_associator.ports.outbound.template_port import TemplatePort
from waf_associator.ports.outbound.waf_client_port import WafClientPort

__all__ = ["WafClientPort", "StackClientPort", "TemplatePort", "LoggerPort"]
