"""CLI Adapter - Command-line lifecycle host for the WAF associator."""
import sys
from collections.abc import Callable

import boto3
import click
from botocore.exceptions import BotoCoreError

from waf_associator import __version__
from waf_associator.adapters.inbound.service_file import (
    DEFAULT_REGION,
    DEFAULT_STAGE,
    ServiceFileError,
    ServiceSettings,
    load_service_file,
)
from waf_associator.adapters.outbound import (
    Boto3StackClient,
    ConsoleLogger,
    JsonLogger,
    JsonTemplateStore,
    create_waf_client,
)
from waf_associator.application import (
    AclLookup,
    LifecycleEvent,
    ResourceResolver,
    build_associate_waf_config,
    create_packaging_plugin,
    create_plugin,
)
from waf_associator.domain.entities import DeploymentContext, ReconcileResult
from waf_associator.domain.value_objects import WafVersion
from waf_associator.ports.outbound import LoggerPort, TemplatePort

WAF_VERSION_CHOICES = [v.value for v in WafVersion]


def _logging_options(func: Callable) -> Callable:
    options = [
        click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (DEBUG level logging)."),
        click.option("--quiet", "-q", is_flag=True, help="Suppress all output except errors."),
        click.option(
            "--log-format",
            type=click.Choice(["text", "json"], case_sensitive=False),
            default="text",
            show_default=True,
            help="Human-readable lines or one JSON object per line.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _deployment_options(func: Callable) -> Callable:
    options = [
        click.option(
            "--config", "-c", "config_path",
            default=None,
            type=click.Path(dir_okay=False),
            help="Service file (serverless.yml style) holding provider and custom.associateWaf settings.",
        ),
        click.option("--service", default=None, help="Service name. Overrides the service file."),
        click.option("--stage", "-s", default=None, help=f"Deployment stage. Default: {DEFAULT_STAGE}."),
        click.option(
            "--region", "-r",
            default=None,
            help=f"AWS region. Default: service file, then AWS profile, then {DEFAULT_REGION}.",
        ),
        click.option("--stack-name", default=None, help="CloudFormation stack name. Default: <service>-<stage>."),
        click.option("--rest-api-id", default=None, help="Use this REST API id instead of reading the stack."),
        click.option("--profile", default=None, help="AWS named profile to use."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _create_logger(verbose: bool, quiet: bool, log_format: str) -> LoggerPort:
    log_level = "DEBUG" if verbose else ("ERROR" if quiet else "INFO")
    if log_format.lower() == "json":
        return JsonLogger(level=log_level)
    return ConsoleLogger(level=log_level)


def _load_settings(config_path: str | None) -> ServiceSettings:
    if not config_path:
        return ServiceSettings()
    try:
        return load_service_file(config_path)
    except ServiceFileError as e:
        raise click.ClickException(str(e)) from e


def _build_context(
    settings: ServiceSettings,
    session: boto3.Session,
    service: str | None,
    stage: str | None,
    region: str | None,
    stack_name: str | None,
    rest_api_id: str | None,
) -> DeploymentContext:
    """Merge CLI options over service file settings."""
    service_name = service or settings.service_name
    if not service_name:
        raise click.UsageError("A service name is required (--service or 'service' in the service file).")

    resolved_region = region or settings.region or session.region_name or DEFAULT_REGION

    return DeploymentContext(
        service_name=service_name,
        stage=stage or settings.stage or DEFAULT_STAGE,
        region=resolved_region,
        stack_name=stack_name or settings.stack_name,
        rest_api_id=rest_api_id or settings.rest_api_id,
    )


def _create_session(profile: str | None) -> boto3.Session:
    try:
        return boto3.Session(profile_name=profile)
    except BotoCoreError as e:
        raise click.ClickException(f"Cannot create AWS session: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="waf-associator")
def cli() -> None:
    """
    WAF Associator - Keep an API Gateway stage's WAF in sync with configuration.

    After a deployment, associates the configured WAF Classic Regional or
    WAFv2 Web ACL with the REST API stage, or removes the association when
    no WAF name is configured.
    """
    pass


@cli.command()
@_deployment_options
@click.option("--name", "-n", default=None, help="Web ACL name. Overrides custom.associateWaf.name.")
@click.option(
    "--waf-version",
    default=None,
    help=f"WAF API generation ({', '.join(WAF_VERSION_CHOICES)}). Overrides custom.associateWaf.version.",
)
@_logging_options
def reconcile(
    config_path: str | None,
    service: str | None,
    stage: str | None,
    region: str | None,
    stack_name: str | None,
    rest_api_id: str | None,
    profile: str | None,
    name: str | None,
    waf_version: str | None,
    verbose: bool,
    quiet: bool,
    log_format: str,
) -> None:
    """
    Associate or disassociate the stage's WAF (after-deploy hook).

    WAF errors are logged and never change the exit code, so a deployment
    pipeline is not failed by this step.

    Examples:

        # Use settings from serverless.yml
        waf-associator reconcile -c serverless.yml

        # Associate a WAFv2 ACL with the prod stage
        waf-associator reconcile --service my-api -s prod -n my-acl --waf-version V2

        # Remove any WAF from the dev stage
        waf-associator reconcile --service my-api -s dev
    """
    logger = _create_logger(verbose, quiet, log_format)
    settings = _load_settings(config_path)
    session = _create_session(profile)
    context = _build_context(settings, session, service, stage, region, stack_name, rest_api_id)
    if isinstance(logger, JsonLogger):
        logger.set_context(service=context.service_name, stage=context.stage)

    raw_config = dict(settings.associate_waf or {})
    if name is not None:
        raw_config["name"] = name
    if waf_version is not None:
        raw_config["version"] = waf_version

    plugin = create_plugin(raw_config=raw_config, context=context, logger=logger, session=session)
    result = plugin.invoke(LifecycleEvent.AFTER_DEPLOY)

    if not quiet:
        _print_summary(result, context)


@cli.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    default=None,
    help="Write the annotated template here instead of overwriting TEMPLATE.",
)
@_logging_options
def annotate(template: str, output: str | None, verbose: bool, quiet: bool, log_format: str) -> None:
    """
    Add the REST API id output to a compiled template (before-package hook).

    TEMPLATE is the compiled CloudFormation JSON template, e.g.
    .serverless/cloudformation-template-update-stack.json
    """
    logger = _create_logger(verbose, quiet, log_format)
    store: TemplatePort = JsonTemplateStore()

    try:
        compiled = store.load(template)
        plugin = create_packaging_plugin(logger=logger, compiled_template=compiled)
        plugin.invoke(LifecycleEvent.BEFORE_PACKAGE_FINALIZE)
        location = store.save(compiled, output or template)
    except Exception as e:
        logger.error(f"Template annotation failed: {e}", exception=e)
        sys.exit(1)

    logger.info(f"REST API id output added to {location}")


@cli.command()
@_deployment_options
@_logging_options
def resolve_api(
    config_path: str | None,
    service: str | None,
    stage: str | None,
    region: str | None,
    stack_name: str | None,
    rest_api_id: str | None,
    profile: str | None,
    verbose: bool,
    quiet: bool,
    log_format: str,
) -> None:
    """
    Print the REST API id of the deployed stack.

    Useful for checking stack discovery before enabling the WAF.
    """
    logger = _create_logger(verbose, quiet, log_format)
    settings = _load_settings(config_path)
    session = _create_session(profile)
    context = _build_context(settings, session, service, stage, region, stack_name, rest_api_id)

    resolver = ResourceResolver(
        context=context,
        stack_client=Boto3StackClient(region=context.region, logger=logger, session=session),
        logger=logger,
    )

    try:
        resolved = resolver.resolve()
    except Exception as e:
        logger.error(f"Failed to read stack {context.effective_stack_name}: {e}", exception=e)
        sys.exit(1)

    if not resolved:
        logger.error("Unable to determine REST API ID")
        sys.exit(1)

    click.echo(resolved)
    if not quiet:
        click.echo(f"Stage ARN: {context.stage_reference(resolved).arn}")


@cli.command()
@click.argument("name")
@click.option("--region", "-r", default=None, help=f"AWS region. Default: AWS profile region, then {DEFAULT_REGION}.")
@click.option("--profile", default=None, help="AWS named profile to use.")
@click.option("--waf-version", default=None, help=f"WAF API generation ({', '.join(WAF_VERSION_CHOICES)}).")
@_logging_options
def find_acl(
    name: str,
    region: str | None,
    profile: str | None,
    waf_version: str | None,
    verbose: bool,
    quiet: bool,
    log_format: str,
) -> None:
    """
    Print the identity of the Web ACL called NAME.

    Shows the WebACLId for WAF Classic Regional and the ARN for WAFv2.
    """
    logger = _create_logger(verbose, quiet, log_format)
    session = _create_session(profile)

    resolved_region = region or session.region_name or DEFAULT_REGION

    config = build_associate_waf_config({"name": name, "version": waf_version}, logger)
    waf_client = create_waf_client(
        version=config.version,
        region=resolved_region,
        logger=logger,
        session=session,
    )

    try:
        identity = AclLookup(waf_client=waf_client, logger=logger).find_by_name(name)
    except Exception as e:
        logger.error(f"Failed to list Web ACLs: {e}", exception=e)
        sys.exit(1)

    if not identity:
        logger.error(f"Unable to find WAF named '{name}'")
        sys.exit(1)

    click.echo(identity)


@cli.command()
def list_hooks() -> None:
    """
    List the lifecycle events this tool handles.
    """
    descriptions = {
        LifecycleEvent.BEFORE_PACKAGE_FINALIZE: "annotate - add the REST API id output to the template",
        LifecycleEvent.AFTER_DEPLOY: "reconcile - associate or disassociate the stage's WAF",
    }
    click.echo("Lifecycle hooks:\n")
    for event in LifecycleEvent:
        click.echo(f"  {event.value}")
        click.echo(f"    {descriptions[event]}")


def _print_summary(result: ReconcileResult, context: DeploymentContext) -> None:
    """Print a summary of the reconciliation."""
    click.echo("\n" + "=" * 60)
    click.echo("WAF ASSOCIATION SUMMARY")
    click.echo("=" * 60)
    click.echo(f"Stack: {context.effective_stack_name}")
    click.echo(f"Stage: {context.stage}")
    click.echo(f"Action: {result.action.value}")
    click.echo(f"Outcome: {result.outcome.value}")
    if result.rest_api_id:
        click.echo(f"REST API: {result.rest_api_id}")
    if result.web_acl_identity:
        click.echo(f"Web ACL: {result.web_acl_identity}")
    if result.message:
        click.echo(f"Details: {result.message}")
    click.echo(f"Completed: {result.completed_at.isoformat(timespec='seconds')}")
    click.echo("=" * 60)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
