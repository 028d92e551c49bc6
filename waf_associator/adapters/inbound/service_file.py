"""Service File Adapter - Reads deployment settings from a serverless.yml-style file."""
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"


class ServiceFileError(Exception):
    """The service file is missing, unreadable or malformed."""


@dataclass
class ServiceSettings:
    """Settings read from the service file, before CLI overrides."""

    service_name: str | None = None
    stage: str | None = None
    region: str | None = None
    stack_name: str | None = None
    rest_api_id: str | None = None
    associate_waf: dict | None = None


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def parse_service_settings(data: dict) -> ServiceSettings:
    """
    Extract the settings this tool needs from a parsed service file.

    Recognised keys::

        service: my-api              # or {name: my-api}
        provider:
          stage: prod
          region: eu-west-1
          stackName: custom-stack
          apiGateway:
            restApiId: abc123
        custom:
          associateWaf:
            name: my-acl
            version: V2
    """
    service = data.get("service")
    if isinstance(service, dict):
        service = service.get("name")

    provider = _section(data, "provider")
    api_gateway = _section(provider, "apiGateway")
    custom = _section(data, "custom")

    associate_waf = custom.get("associateWaf")
    if associate_waf is not None and not isinstance(associate_waf, dict):
        raise ServiceFileError("custom.associateWaf must be a mapping")

    return ServiceSettings(
        service_name=service,
        stage=provider.get("stage"),
        region=provider.get("region"),
        stack_name=provider.get("stackName"),
        rest_api_id=api_gateway.get("restApiId"),
        associate_waf=associate_waf,
    )


def load_service_file(path: str) -> ServiceSettings:
    """
    Load a YAML service file.

    Raises:
        ServiceFileError: If the file cannot be read or parsed
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(content) or {}
    except OSError as e:
        raise ServiceFileError(f"Cannot read service file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ServiceFileError(f"Invalid YAML in service file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ServiceFileError(f"Service file {path} must contain a mapping")

    return parse_service_settings(data)
