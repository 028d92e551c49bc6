"""Association Reconciler - Converges a stage's WAF association to configuration."""
from waf_associator.application.acl_lookup import AclLookup
from waf_associator.application.resource_resolver import ResourceResolver
from waf_associator.domain.entities import (
    AssociateWafConfig,
    DeploymentContext,
    ReconcileAction,
    ReconcileOutcome,
    ReconcileResult,
)
from waf_associator.ports.outbound import LoggerPort, WafClientPort

ASSOCIATE_ERROR_BANNER = "-------- Associate WAF Error --------"
DISASSOCIATE_ERROR_BANNER = "-------- Disassociate WAF Error --------"


class AssociationReconciler:
    """
    Makes the live WAF association of a REST API stage match configuration.

    A configured (non-blank) WAF name leads to an associate call, anything
    else to a disassociate call when an association exists. The provider is
    the only source of truth for the current state.

    Errors are never raised: they are logged and returned in the
    ReconcileResult, so a failed association cannot fail a deployment.
    """

    def __init__(
        self,
        config: AssociateWafConfig,
        context: DeploymentContext,
        resolver: ResourceResolver,
        acl_lookup: AclLookup,
        waf_client: WafClientPort,
        logger: LoggerPort,
    ):
        """
        Initialize the reconciler.

        Args:
            config: Validated associateWaf configuration
            context: Deployment facts used to address the stage
            resolver: REST API id resolver
            acl_lookup: Web ACL name resolver
            waf_client: WAF client of the configured API generation
            logger: Logger for operation logging
        """
        self._config = config
        self._context = context
        self._resolver = resolver
        self._acl_lookup = acl_lookup
        self._waf_client = waf_client
        self._logger = logger

    def reconcile(self) -> ReconcileResult:
        """Associate or disassociate depending on the configured name."""
        if self._config.wants_association:
            return self.associate()
        return self.disassociate()

    def associate(self) -> ReconcileResult:
        """Associate the configured Web ACL with the deployed stage."""
        action = ReconcileAction.ASSOCIATE
        rest_api_id = None
        resource_arn = None
        web_acl_identity = None

        try:
            rest_api_id = self._resolver.resolve()
            if not rest_api_id:
                return self._skip(action, "Unable to determine REST API ID")

            web_acl_identity = self._acl_lookup.find_by_name(self._config.name)
            if not web_acl_identity:
                return self._skip(
                    action,
                    f"Unable to find WAF named '{self._config.name}'",
                    rest_api_id=rest_api_id,
                )

            resource_arn = self._context.stage_reference(rest_api_id).arn

            self._logger.info(
                "Associating WAF...",
                waf_version=self._waf_client.version.value,
                resource_arn=resource_arn,
            )
            self._waf_client.associate_web_acl(resource_arn, web_acl_identity)

            return ReconcileResult(
                action=action,
                outcome=ReconcileOutcome.ASSOCIATED,
                rest_api_id=rest_api_id,
                resource_arn=resource_arn,
                web_acl_identity=web_acl_identity,
            )

        except Exception as e:
            self._logger.error(f"\n{ASSOCIATE_ERROR_BANNER}\n{e}", exception=e)
            return ReconcileResult(
                action=action,
                outcome=ReconcileOutcome.FAILED,
                rest_api_id=rest_api_id,
                resource_arn=resource_arn,
                web_acl_identity=web_acl_identity,
                message=str(e),
                error=e,
            )

    def disassociate(self) -> ReconcileResult:
        """Remove any Web ACL from the deployed stage."""
        action = ReconcileAction.DISASSOCIATE
        rest_api_id = None
        resource_arn = None

        try:
            rest_api_id = self._resolver.resolve()
            if not rest_api_id:
                return self._skip(action, "Unable to determine REST API ID")

            resource_arn = self._context.stage_reference(rest_api_id).arn

            response = self._waf_client.get_web_acl_for_resource(resource_arn)
            current = response.get(self._waf_client.version.association_key)
            if not current:
                self._logger.debug(f"No WAF associated with {resource_arn}")
                return ReconcileResult(
                    action=action,
                    outcome=ReconcileOutcome.ALREADY_DISASSOCIATED,
                    rest_api_id=rest_api_id,
                    resource_arn=resource_arn,
                )

            self._logger.info("Disassociating WAF...", resource_arn=resource_arn)
            self._waf_client.disassociate_web_acl(resource_arn)

            return ReconcileResult(
                action=action,
                outcome=ReconcileOutcome.DISASSOCIATED,
                rest_api_id=rest_api_id,
                resource_arn=resource_arn,
                web_acl_identity=current.get("WebACLId") or current.get("ARN"),
            )

        except Exception as e:
            self._logger.error(f"\n{DISASSOCIATE_ERROR_BANNER}\n{e}", exception=e)
            return ReconcileResult(
                action=action,
                outcome=ReconcileOutcome.FAILED,
                rest_api_id=rest_api_id,
                resource_arn=resource_arn,
                message=str(e),
                error=e,
            )

    def _skip(self, action: ReconcileAction, message: str, rest_api_id: str | None = None) -> ReconcileResult:
        """Log why the run was abandoned and return a SKIPPED result."""
        self._logger.warning(message)
        return ReconcileResult(
            action=action,
            outcome=ReconcileOutcome.SKIPPED,
            rest_api_id=rest_api_id,
            message=message,
        )
