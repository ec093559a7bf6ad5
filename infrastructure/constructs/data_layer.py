"""
Data layer construct: DynamoDB interaction log + knowledge base DB secret.

The knowledge base itself lives in the hosted Postgres; the stack only needs
a reference to its credentials.
"""

from typing import Optional

from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as dynamodb,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct


class DataLayerConstruct(Construct):
    """Provision assistant data resources."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        db_secret_arn: Optional[str] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        # Existing secret when the KB database is already provisioned, otherwise
        # an empty one for operators to fill in (host/port/username/password/dbname).
        if db_secret_arn:
            self.db_secret = secretsmanager.Secret.from_secret_complete_arn(
                self, "KbDbCredentials", db_secret_arn
            )
        else:
            self.db_secret = secretsmanager.Secret(
                self,
                "KbDbCredentials",
                description="Connection details for the assistant knowledge base",
            )

        # DynamoDB table for assistant interaction logs.
        self.interactions_table = dynamodb.Table(
            self,
            "AssistantInteractions",
            partition_key=dynamodb.Attribute(
                name="session_id", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(name="timestamp", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=environment == "prod",
            removal_policy=RemovalPolicy.RETAIN if environment == "prod" else RemovalPolicy.DESTROY,
            time_to_live_attribute="ttl",
        )
