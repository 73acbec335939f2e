"""AppSync API and schema creation."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from aws_cdk import Stack
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..synth_logging import get_logger

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito
    from aws_cdk import aws_iam as iam


# Asset locations: keep the schema and VTL templates under the appsync/ folder
SCHEMA_PATH = Path(__file__).parent / "schema" / "schema.graphql"
MAPPING_TEMPLATES_DIR = Path(__file__).parent / "mapping-templates"

FIELD_LOG_LEVELS = ("NONE", "ERROR", "ALL")


def read_asset(path: Path) -> str:
    """Read a schema or mapping template file verbatim.

    Raises:
        FileNotFoundError: if the asset does not exist
    """
    if not path.is_file():
        raise FileNotFoundError(f"AppSync asset not found: {path}")
    return path.read_text()


def get_field_log_level() -> str:
    """Get the AppSync field log level from APPSYNC_FIELD_LOG_LEVEL (default ALL)."""
    level = os.getenv("APPSYNC_FIELD_LOG_LEVEL", "ALL").upper()
    if level not in FIELD_LOG_LEVELS:
        raise ValueError(f"Invalid APPSYNC_FIELD_LOG_LEVEL {level!r}; expected one of {', '.join(FIELD_LOG_LEVELS)}")
    return level


def create_graphql_api(
    scope: Construct,
    resource_name: Callable[[str], str],
    user_pool: "cognito.IUserPool",
    cloudwatch_role: "iam.IRole",
) -> appsync.CfnGraphQLApi:
    """
    Create the AppSync GraphQL API with Cognito User Pool authorization.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        user_pool: Cognito User Pool for authentication
        cloudwatch_role: Role AppSync assumes to write field logs

    Returns:
        The created GraphQL API
    """
    api_name = resource_name("pipeline-api")
    get_logger(__name__, scope).info("Creating AppSync API", api_name=api_name)

    return appsync.CfnGraphQLApi(
        scope,
        "GraphqlApi",
        name=api_name,
        authentication_type="AMAZON_COGNITO_USER_POOLS",
        user_pool_config=appsync.CfnGraphQLApi.UserPoolConfigProperty(
            user_pool_id=user_pool.user_pool_id,
            default_action="ALLOW",
            aws_region=Stack.of(scope).region,
        ),
        log_config=appsync.CfnGraphQLApi.LogConfigProperty(
            field_log_level=get_field_log_level(),
            cloud_watch_logs_role_arn=cloudwatch_role.role_arn,
        ),
        xray_enabled=True,
    )


def create_graphql_schema(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    schema_path: Path = SCHEMA_PATH,
) -> appsync.CfnGraphQLSchema:
    """Attach the GraphQL schema document to the API."""
    return appsync.CfnGraphQLSchema(
        scope,
        "GraphqlApiSchema",
        api_id=api.attr_api_id,
        definition=read_asset(schema_path),
    )
