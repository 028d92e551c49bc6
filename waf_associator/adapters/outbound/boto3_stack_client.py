"""Boto3 Stack Client Adapter - Implementation of StackClientPort using boto3."""
from typing import Any

import boto3

from waf_associator.ports.outbound import LoggerPort


class Boto3StackClient:
    """
    Implementation of StackClientPort using the CloudFormation API.

    Errors such as a missing stack (a botocore ClientError) are raised to
    the caller.
    """

    def __init__(
        self,
        region: str,
        logger: LoggerPort,
        session: boto3.Session | None = None,
    ):
        self._region = region
        self._logger = logger
        self._session = session or boto3.Session()
        self._client: Any = None

    def _get_client(self) -> Any:
        """Get or create the CloudFormation client."""
        if self._client is None:
            self._client = self._session.client("cloudformation", region_name=self._region)
        return self._client

    def list_stack_resources(self, stack_name: str) -> list[dict]:
        """List every resource summary of a stack."""
        self._logger.debug(f"Listing resources of stack {stack_name}")
        summaries = []

        paginator = self._get_client().get_paginator("list_stack_resources")
        for page in paginator.paginate(StackName=stack_name):
            summaries.extend(page.get("StackResourceSummaries", []))

        return summaries

    def describe_stack_outputs(self, stack_name: str) -> list[dict]:
        """Get the declared outputs of a stack."""
        self._logger.debug(f"Describing outputs of stack {stack_name}")
        response = self._get_client().describe_stacks(StackName=stack_name)

        stacks = response.get("Stacks") or []
        if not stacks:
            return []
        return stacks[0].get("Outputs") or []
