"""ReconcileResult representing the outcome of one reconciliation run."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ReconcileAction(str, Enum):
    """Which convergence direction the run took."""

    ASSOCIATE = "associate"
    DISASSOCIATE = "disassociate"


class ReconcileOutcome(str, Enum):
    """Terminal state of a reconciliation run."""

    ASSOCIATED = "ASSOCIATED"
    DISASSOCIATED = "DISASSOCIATED"
    ALREADY_DISASSOCIATED = "ALREADY_DISASSOCIATED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


@dataclass
class ReconcileResult:
    """
    Result of reconciling the WAF association of a stage.

    Resolution failures are SKIPPED and provider errors are FAILED; neither
    is raised, so the caller decides how to report them.
    """

    action: ReconcileAction
    outcome: ReconcileOutcome
    rest_api_id: str | None = None
    resource_arn: str | None = None
    web_acl_identity: str | None = None
    message: str | None = None
    error: Exception | None = None
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def succeeded(self) -> bool:
        """True unless a provider call failed."""
        return self.outcome != ReconcileOutcome.FAILED

    @property
    def changed(self) -> bool:
        """True when an associate or disassociate call was issued."""
        return self.outcome in (ReconcileOutcome.ASSOCIATED, ReconcileOutcome.DISASSOCIATED)

    def __str__(self) -> str:
        target = self.resource_arn or self.rest_api_id or "unresolved"
        return f"ReconcileResult({self.action.value}, {self.outcome.value}, {target})"
