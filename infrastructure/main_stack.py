"""
Main CDK Stack for the Arova assistant API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.config.settings import Settings


class AssistantStack(Stack):
    """Main stack wiring the data and API constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "arova-assistant")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Data layer.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            db_secret_arn=settings.db_secret_arn,
        )

        # 2) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            lambda_environment={
                "MATCH_THRESHOLD": str(settings.match_threshold),
                "KB_TABLE": settings.kb_table,
                "DB_SECRET_ARN": data_construct.db_secret.secret_arn,
                "INTERACTIONS_TABLE": data_construct.interactions_table.table_name,
                "CACHE_TTL_SECONDS": str(settings.cache_ttl_seconds),
                "CACHE_MAX_SIZE": str(settings.cache_max_size),
                "LOG_LEVEL": settings.log_level,
                "INTERACTION_TTL_DAYS": str(settings.interaction_ttl_days),
            },
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        # Permissions for the API Lambda.
        data_construct.db_secret.grant_read(api_construct.main_lambda)
        data_construct.interactions_table.grant_read_write_data(api_construct.main_lambda)

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "InteractionsTable", value=data_construct.interactions_table.table_name)
        CfnOutput(self, "KbSecretArn", value=data_construct.db_secret.secret_arn)
