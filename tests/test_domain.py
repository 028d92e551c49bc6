"""Tests for the domain model."""
from waf_associator.domain.entities import (
    AssociateWafConfig,
    DeploymentContext,
    ReconcileAction,
    ReconcileOutcome,
    ReconcileResult,
    WebACL,
    partition_for_region,
)
from waf_associator.domain.value_objects import StageResourceReference, WafVersion


class TestWafVersion:
    """Test the WafVersion enum."""

    def test_values_match_configuration_surface(self):
        """Versions are configured as 'Regional' and 'V2'."""
        assert WafVersion("Regional") == WafVersion.REGIONAL
        assert WafVersion("V2") == WafVersion.V2

    def test_aws_service(self):
        """Each generation maps to its boto3 service."""
        assert WafVersion.REGIONAL.aws_service == "waf-regional"
        assert WafVersion.V2.aws_service == "wafv2"

    def test_scope_only_for_v2(self):
        """WAF Classic has no scope, WAFv2 stages are REGIONAL."""
        assert WafVersion.REGIONAL.scope is None
        assert WafVersion.V2.scope == "REGIONAL"

    def test_identity_attributes(self):
        """Listing, associate and query attributes differ per generation."""
        assert WafVersion.REGIONAL.acl_identity_key == "WebACLId"
        assert WafVersion.V2.acl_identity_key == "ARN"
        assert WafVersion.REGIONAL.associate_key == "WebACLId"
        assert WafVersion.V2.associate_key == "WebACLArn"
        assert WafVersion.REGIONAL.association_key == "WebACLSummary"
        assert WafVersion.V2.association_key == "WebACL"


class TestStageResourceReference:
    """Test the stage ARN value object."""

    def test_arn_format(self):
        """ARN follows the API Gateway stage format."""
        ref = StageResourceReference(partition="aws", region="eu-west-1", rest_api_id="abc123", stage="prod")
        assert ref.arn == "arn:aws:apigateway:eu-west-1::/restapis/abc123/stages/prod"
        assert str(ref) == ref.arn


class TestDeploymentContext:
    """Test the DeploymentContext entity."""

    def test_default_stack_name(self, context):
        """Stack name defaults to <service>-<stage>."""
        assert context.effective_stack_name == "orders-api-prod"

    def test_stack_name_override(self):
        """An explicit stack name wins."""
        ctx = DeploymentContext(service_name="svc", stage="dev", region="us-east-1", stack_name="custom")
        assert ctx.effective_stack_name == "custom"

    def test_partition_from_region(self):
        """Partition follows the region unless set."""
        assert partition_for_region("us-east-1") == "aws"
        assert partition_for_region("cn-north-1") == "aws-cn"
        assert partition_for_region("us-gov-west-1") == "aws-us-gov"

        ctx = DeploymentContext(service_name="svc", stage="dev", region="cn-north-1")
        assert ctx.stage_reference("x1").arn == "arn:aws-cn:apigateway:cn-north-1::/restapis/x1/stages/dev"

    def test_stage_reference(self, context):
        """Stage reference combines region, REST API and stage."""
        ref = context.stage_reference("abc123")
        assert ref.arn == "arn:aws:apigateway:us-east-1::/restapis/abc123/stages/prod"


class TestAssociateWafConfig:
    """Test the associateWaf configuration."""

    def test_name_present(self):
        """A non-blank name requests an association."""
        assert AssociateWafConfig(name="acl-prod").wants_association is True

    def test_absent_or_blank_name(self):
        """Absent, empty and whitespace-only names request no association."""
        assert AssociateWafConfig().wants_association is False
        assert AssociateWafConfig(name="").wants_association is False
        assert AssociateWafConfig(name="   ").wants_association is False

    def test_default_version(self):
        """Version defaults to WAF Classic Regional."""
        assert AssociateWafConfig().version == WafVersion.REGIONAL


class TestWebACL:
    """Test the WebACL entity."""

    def test_from_regional_summary(self):
        """WAF Classic identity is the WebACLId."""
        acl = WebACL.from_summary({"Name": "acl-prod", "WebACLId": "wafid-9"}, WafVersion.REGIONAL)
        assert acl.identity == "wafid-9"
        assert acl.is_v2() is False

    def test_from_v2_summary(self):
        """WAFv2 identity is the ARN."""
        arn = "arn:aws:wafv2:us-east-1:123456789012:regional/webacl/acl-prod/1234"
        acl = WebACL.from_summary({"Name": "acl-prod", "Id": "1234", "ARN": arn}, WafVersion.V2)
        assert acl.identity == arn
        assert acl.is_v2() is True


class TestReconcileResult:
    """Test the ReconcileResult entity."""

    def test_failed_is_not_succeeded(self):
        """Only FAILED counts as unsuccessful."""
        failed = ReconcileResult(action=ReconcileAction.ASSOCIATE, outcome=ReconcileOutcome.FAILED)
        skipped = ReconcileResult(action=ReconcileAction.ASSOCIATE, outcome=ReconcileOutcome.SKIPPED)
        assert failed.succeeded is False
        assert skipped.succeeded is True

    def test_changed(self):
        """Only issued associate/disassociate calls count as changes."""
        assert ReconcileResult(
            action=ReconcileAction.DISASSOCIATE, outcome=ReconcileOutcome.DISASSOCIATED
        ).changed is True
        assert ReconcileResult(
            action=ReconcileAction.DISASSOCIATE, outcome=ReconcileOutcome.ALREADY_DISASSOCIATED
        ).changed is False
