"""Stack Client Port - Interface for reading a deployed CloudFormation stack."""
from typing import Protocol


class StackClientPort(Protocol):
    """Port interface for the CloudFormation reads needed to find a REST API."""

    def list_stack_resources(self, stack_name: str) -> list[dict]:
        """
        List every resource summary of a stack, across all pages.

        Returns:
            List of dicts with ``LogicalResourceId`` and ``PhysicalResourceId``
        """
        ...

    def describe_stack_outputs(self, stack_name: str) -> list[dict]:
        """
        Get the declared outputs of a stack.

        Returns:
            List of dicts with ``OutputKey`` and ``OutputValue`` (empty when
            the stack declares no outputs)
        """
        ...
