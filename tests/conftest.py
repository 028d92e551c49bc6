"""Test configuration and shared fixtures."""
from typing import Any

import pytest

from waf_associator.domain.entities import DeploymentContext
from waf_associator.domain.value_objects import WafVersion


class RecordingLogger:
    """LoggerPort implementation that keeps every entry in memory."""

    def __init__(self):
        self.entries: list[tuple[str, str, dict]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("WARNING", message, kwargs))

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        self.entries.append(("ERROR", message, kwargs))

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [message for entry_level, message, _ in self.entries if entry_level == level]


class FakeWafClient:
    """In-memory WafClientPort serving canned listing pages."""

    def __init__(
        self,
        version: WafVersion = WafVersion.REGIONAL,
        pages: list[dict] | None = None,
        association: dict | None = None,
        fail_on: str | None = None,
    ):
        self._version = version
        self._pages = pages or [{"WebACLs": []}]
        self._association = association or {}
        self._fail_on = fail_on
        self.calls: list[tuple[str, dict]] = []

    @property
    def version(self) -> WafVersion:
        return self._version

    def _record(self, operation: str, **params: Any) -> None:
        self.calls.append((operation, params))
        if operation == self._fail_on:
            raise RuntimeError(f"{operation} failed: AccessDenied")

    def list_web_acls(self, limit: int, next_marker: str | None = None) -> dict:
        self._record("list_web_acls", limit=limit, next_marker=next_marker)
        index = int(next_marker) if next_marker else 0
        return self._pages[index]

    def get_web_acl_for_resource(self, resource_arn: str) -> dict:
        self._record("get_web_acl_for_resource", resource_arn=resource_arn)
        return self._association

    def associate_web_acl(self, resource_arn: str, web_acl_identity: str) -> None:
        self._record("associate_web_acl", resource_arn=resource_arn, web_acl_identity=web_acl_identity)

    def disassociate_web_acl(self, resource_arn: str) -> None:
        self._record("disassociate_web_acl", resource_arn=resource_arn)

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]


class FakeStackClient:
    """In-memory StackClientPort for a single deployed stack."""

    def __init__(self, resources: list[dict] | None = None, outputs: list[dict] | None = None):
        self._resources = resources or []
        self._outputs = outputs or []
        self.calls: list[tuple[str, str]] = []

    def list_stack_resources(self, stack_name: str) -> list[dict]:
        self.calls.append(("list_stack_resources", stack_name))
        return self._resources

    def describe_stack_outputs(self, stack_name: str) -> list[dict]:
        self.calls.append(("describe_stack_outputs", stack_name))
        return self._outputs


def acl_page(entries: list[tuple[str, str]], next_marker: str | None = None, key: str = "WebACLId") -> dict:
    """Build a list_web_acls response page from (name, identity) pairs."""
    page: dict = {"WebACLs": [{"Name": name, key: identity} for name, identity in entries]}
    if next_marker:
        page["NextMarker"] = next_marker
    return page


def rest_api_resource(physical_id: str) -> dict:
    """Stack resource summary of a generated REST API."""
    return {
        "LogicalResourceId": "ApiGatewayRestApi",
        "PhysicalResourceId": physical_id,
        "ResourceType": "AWS::ApiGateway::RestApi",
    }


@pytest.fixture
def logger() -> RecordingLogger:
    """Logger capturing entries for assertions."""
    return RecordingLogger()


@pytest.fixture
def sample_region() -> str:
    """Sample AWS region for testing."""
    return "us-east-1"


@pytest.fixture
def context(sample_region) -> DeploymentContext:
    """Deployment of service 'orders-api' to stage 'prod'."""
    return DeploymentContext(service_name="orders-api", stage="prod", region=sample_region)
