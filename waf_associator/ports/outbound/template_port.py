"""Template Port - Interface for reading and writing compiled templates."""
from typing import Protocol


class TemplatePort(Protocol):
    """
    Port interface for compiled CloudFormation template storage.

    Implementations could read from:
    - A local JSON file (CLI usage)
    - The deployment framework's in-memory template
    """

    def load(self, location: str) -> dict:
        """Load the template found at location."""
        ...

    def save(self, template: dict, location: str) -> str:
        """
        Save the template.

        Returns:
            The actual location where the template was written
        """
        ...
