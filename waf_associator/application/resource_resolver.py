"""Resource Resolver - Finds the physical id of the deployed REST API."""
from waf_associator.domain.entities import DeploymentContext
from waf_associator.ports.outbound import LoggerPort, StackClientPort

# Logical id the framework gives the REST API it generates
REST_API_LOGICAL_ID = "ApiGatewayRestApi"

# Stack output written by the template annotator, used when the REST API
# resource lives in another (split) stack
REST_API_ID_OUTPUT_KEY = "ApiGatewayRestApiWaf"


class ResourceResolver:
    """
    Resolves the REST API id of a deployment.

    Strategies, first success wins:
    1. An explicitly configured REST API id
    2. The stack resource with the generated REST API logical id
    3. The stack output written by the template annotator

    Nothing is cached; every call reads the live stack. Provider errors
    propagate to the caller.
    """

    def __init__(
        self,
        context: DeploymentContext,
        stack_client: StackClientPort,
        logger: LoggerPort,
    ):
        """
        Initialize the resolver.

        Args:
            context: Deployment facts (stack name, explicit REST API id)
            stack_client: CloudFormation reader
            logger: Logger for diagnostics
        """
        self._context = context
        self._stack_client = stack_client
        self._logger = logger

    def resolve(self) -> str | None:
        """
        Resolve the REST API id.

        Returns:
            The REST API id, or None when no strategy finds it
        """
        if self._context.rest_api_id:
            self._logger.debug(f"Using configured REST API id {self._context.rest_api_id}")
            return self._context.rest_api_id

        stack_name = self._context.effective_stack_name

        stack_resource = self.find_stack_resource(stack_name, REST_API_LOGICAL_ID)
        if not stack_resource:
            self._logger.info(
                "RestApiId not found (split stacks plugin used?), using stack outputs for RestApiId.",
                stack_name=stack_name,
            )
            stack_output = self.find_stack_output(stack_name, REST_API_ID_OUTPUT_KEY)
            if stack_output and stack_output.get("OutputValue"):
                return stack_output["OutputValue"]
            return None

        return stack_resource.get("PhysicalResourceId") or None

    def find_stack_resource(self, stack_name: str, logical_id: str) -> dict | None:
        """Return the resource summary with the given logical id, if any."""
        for resource_summary in self._stack_client.list_stack_resources(stack_name):
            if resource_summary.get("LogicalResourceId") == logical_id:
                return resource_summary
        return None

    def find_stack_output(self, stack_name: str, output_key: str) -> dict | None:
        """Return the stack output with the given key, if any."""
        for output in self._stack_client.describe_stack_outputs(stack_name):
            if output.get("OutputKey") == output_key:
                return output
        return None
