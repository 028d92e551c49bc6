"""Stage reference value object identifying the WAF attachment point."""
from dataclasses import dataclass


@dataclass(frozen=True)
class StageResourceReference:
    """An API Gateway REST API stage, addressable by ARN."""

    partition: str
    region: str
    rest_api_id: str
    stage: str

    @property
    def arn(self) -> str:
        """Return the stage ARN in the format WAF expects for ResourceArn."""
        return (
            f"arn:{self.partition}:apigateway:{self.region}::"
            f"/restapis/{self.rest_api_id}/stages/{self.stage}"
        )

    def __str__(self) -> str:
        return self.arn
