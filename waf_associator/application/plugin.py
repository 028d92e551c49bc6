"""Associate WAF Plugin - Lifecycle hook registry wiring the application services."""
from collections.abc import Callable
from enum import Enum
from typing import Any

from waf_associator.application.acl_lookup import AclLookup
from waf_associator.application.association_reconciler import AssociationReconciler
from waf_associator.application.resource_resolver import ResourceResolver
from waf_associator.application.template_annotator import annotate_template
from waf_associator.application.version_policy import build_associate_waf_config
from waf_associator.domain.entities import (
    AssociateWafConfig,
    DeploymentContext,
    ReconcileOutcome,
    ReconcileResult,
)
from waf_associator.ports.outbound import LoggerPort


class LifecycleEvent(str, Enum):
    """Deployment lifecycle events the plugin registers handlers for."""

    AFTER_DEPLOY = "after:deploy:deploy"
    BEFORE_PACKAGE_FINALIZE = "before:package:finalize"


HookHandler = Callable[[], Any]


class AssociateWafPlugin:
    """
    Handlers invoked by the deployment lifecycle host.

    The event to handler mapping is built once at construction and exposed
    as ``hooks``; the host calls ``invoke`` (or the handler directly) at
    the matching point of a deployment.
    """

    def __init__(
        self,
        config: AssociateWafConfig,
        logger: LoggerPort,
        context: DeploymentContext | None = None,
        reconciler: AssociationReconciler | None = None,
        compiled_template: dict | None = None,
    ):
        """
        Initialize the plugin.

        Args:
            config: Validated associateWaf configuration
            logger: Logger for operation logging
            context: Deployment facts; not needed before packaging
            reconciler: Reconciler run after each deployment; a plugin built
                without one only handles the packaging event
            compiled_template: Template annotated before packaging; the host
                may also assign it later
        """
        self.config = config
        self.context = context
        self.compiled_template = compiled_template
        self._reconciler = reconciler
        self._logger = logger

        self.hooks: dict[LifecycleEvent, HookHandler] = {
            LifecycleEvent.AFTER_DEPLOY: self.update_waf_association,
            LifecycleEvent.BEFORE_PACKAGE_FINALIZE: self.update_cloudformation_template,
        }

    def invoke(self, event: LifecycleEvent | str) -> Any:
        """
        Run the handler registered for a lifecycle event.

        Raises:
            KeyError: If no handler is registered for the event
        """
        try:
            event = LifecycleEvent(event)
        except ValueError:
            raise KeyError(f"No hook registered for lifecycle event '{event}'") from None
        return self.hooks[event]()

    def update_cloudformation_template(self) -> dict:
        """Add the REST API id output to the compiled template."""
        if self.compiled_template is None:
            raise ValueError("No compiled CloudFormation template to annotate")
        self._logger.debug("Adding REST API id output to compiled template")
        return annotate_template(self.compiled_template)

    def update_waf_association(self) -> ReconcileResult:
        """
        Reconcile the stage's WAF association after a deployment.

        The result is logged and returned; a failed reconciliation is
        reported but does not raise.
        """
        if self._reconciler is None:
            raise ValueError("No reconciler configured; this plugin only handles packaging")

        result = self._reconciler.reconcile()

        if result.outcome == ReconcileOutcome.FAILED:
            self._logger.warning(
                "WAF association was not updated; deployment continues",
                action=result.action.value,
            )
        else:
            self._logger.info(
                f"WAF reconciliation finished: {result.outcome.value}",
                action=result.action.value,
                stage=self.context.stage if self.context else None,
            )

        return result


def create_plugin(
    raw_config: dict | None,
    context: DeploymentContext,
    logger: LoggerPort,
    session: Any = None,
    compiled_template: dict | None = None,
) -> AssociateWafPlugin:
    """
    Factory function to create a properly configured AssociateWafPlugin.

    Args:
        raw_config: The raw `associateWaf` configuration block
        context: Deployment facts (service, stage, region, overrides)
        logger: Logger instance to use
        session: Optional boto3 session (default session if not provided)
        compiled_template: Template to annotate before packaging

    Returns:
        Configured AssociateWafPlugin instance
    """
    from waf_associator.adapters.outbound import Boto3StackClient, create_waf_client

    config = build_associate_waf_config(raw_config, logger)

    waf_client = create_waf_client(
        version=config.version,
        region=context.region,
        logger=logger,
        session=session,
    )
    stack_client = Boto3StackClient(region=context.region, logger=logger, session=session)

    reconciler = AssociationReconciler(
        config=config,
        context=context,
        resolver=ResourceResolver(context=context, stack_client=stack_client, logger=logger),
        acl_lookup=AclLookup(waf_client=waf_client, logger=logger),
        waf_client=waf_client,
        logger=logger,
    )

    return AssociateWafPlugin(
        config=config,
        logger=logger,
        context=context,
        reconciler=reconciler,
        compiled_template=compiled_template,
    )


def create_packaging_plugin(logger: LoggerPort, compiled_template: dict | None = None) -> AssociateWafPlugin:
    """
    Create a plugin for hosts that only package and need no AWS access.

    Only the before-package event can be invoked on the returned plugin.
    """
    return AssociateWafPlugin(
        config=AssociateWafConfig(),
        logger=logger,
        compiled_template=compiled_template,
    )
