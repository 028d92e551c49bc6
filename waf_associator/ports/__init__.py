"""Ports - Abstract interfaces for external dependencies."""
from waf_associator.ports.outbound import LoggerPort, StackClientPort, TemplatePort, WafClientPort

__all__ = ["WafClientPort", "StackClientPort", "TemplatePort", "LoggerPort"]
