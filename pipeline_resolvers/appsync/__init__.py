"""
AppSync GraphQL API module for the pipeline resolvers stack.

This module orchestrates the creation of the AppSync GraphQL API infrastructure:

- api.py: API and schema creation, asset loading
- datasources.py: DynamoDB data sources
- functions.py: AppSync functions used by pipeline resolvers
- resolver_builder.py: unit and pipeline resolver construction
- resolvers.py: resolver wiring for queries and mutations
- schema/: GraphQL schema document
- mapping-templates/: VTL request/response templates
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from aws_cdk import CfnOutput
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import create_graphql_api, create_graphql_schema
from .datasources import create_dynamodb_datasources
from .functions import create_pipeline_functions
from .resolvers import create_resolvers

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito
    from aws_cdk import aws_dynamodb as dynamodb
    from aws_cdk import aws_iam as iam


@dataclass
class AppSyncResources:
    """Container for all AppSync resources created by setup_appsync."""

    api: appsync.CfnGraphQLApi
    schema: appsync.CfnGraphQLSchema
    datasources: dict[str, appsync.CfnDataSource]
    functions: dict[str, appsync.CfnFunctionConfiguration]
    resolvers: dict[str, appsync.CfnResolver]


def setup_appsync(
    scope: Construct,
    resource_name: Callable[[str], str],
    user_pool: "cognito.IUserPool",
    tables: dict[str, "dynamodb.ITable"],
    dynamodb_role: "iam.IRole",
    cloudwatch_role: "iam.IRole",
) -> AppSyncResources:
    """
    Set up the complete AppSync GraphQL API infrastructure.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        user_pool: Cognito User Pool for authentication
        tables: Dictionary of DynamoDB tables
        dynamodb_role: Role AppSync data sources assume
        cloudwatch_role: Role AppSync assumes for field logging

    Returns:
        AppSyncResources containing all created resources
    """
    api = create_graphql_api(scope, resource_name, user_pool, cloudwatch_role)

    datasources = create_dynamodb_datasources(scope, api, tables, dynamodb_role)

    schema = create_graphql_schema(scope, api)

    functions = create_pipeline_functions(scope, api, datasources)

    resolvers = create_resolvers(scope, api, datasources, functions, schema)

    return AppSyncResources(
        api=api,
        schema=schema,
        datasources=datasources,
        functions=functions,
        resolvers=resolvers,
    )


def output_api_endpoints(scope: Construct, api: appsync.CfnGraphQLApi) -> None:
    """Output the API id and GraphQL URL."""
    CfnOutput(
        scope,
        "AppSyncApiId",
        value=api.attr_api_id,
        description="AppSync GraphQL API ID",
    )
    CfnOutput(
        scope,
        "AppSyncGraphQLUrl",
        value=api.attr_graph_ql_url,
        description="AppSync GraphQL endpoint URL",
    )


__all__ = ["setup_appsync", "output_api_endpoints", "AppSyncResources"]
