"""JSON Template Store Adapter - Reads and writes compiled templates on disk."""
import json
from pathlib import Path


class JsonTemplateStore:
    """
    Implementation of TemplatePort for CloudFormation JSON files.

    Serverless-style frameworks write the compiled template as
    ``.serverless/cloudformation-template-update-stack.json``.
    """

    def __init__(self, indent: int = 2):
        self._indent = indent

    def load(self, location: str) -> dict:
        """Load a template; invalid JSON raises json.JSONDecodeError."""
        with open(location, encoding="utf-8") as f:
            template = json.load(f)

        if not isinstance(template, dict):
            raise ValueError(f"{location} does not contain a CloudFormation template object")
        return template

    def save(self, template: dict, location: str) -> str:
        """Write the template, creating parent directories when needed."""
        path = Path(location)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(template, f, indent=self._indent)
            f.write("\n")

        return str(path)
