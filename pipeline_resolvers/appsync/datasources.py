"""AppSync data source creation."""

from typing import TYPE_CHECKING

from aws_cdk import Stack
from aws_cdk import aws_appsync as appsync
from constructs import Construct

if TYPE_CHECKING:
    from aws_cdk import aws_dynamodb as dynamodb
    from aws_cdk import aws_iam as iam


def create_dynamodb_datasources(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    tables: dict[str, "dynamodb.ITable"],
    service_role: "iam.IRole",
) -> dict[str, appsync.CfnDataSource]:
    """
    Create DynamoDB data sources for the AppSync API.

    Args:
        scope: CDK construct scope
        api: The AppSync GraphQL API
        tables: Dictionary of table key to DynamoDB table
        service_role: Role AppSync assumes to reach the tables

    Returns:
        Dictionary of datasource key to DynamoDB data source
    """
    datasources: dict[str, appsync.CfnDataSource] = {}

    # (datasource key, table key, construct id, datasource name)
    table_configs = [
        ("posts", "posts_table", "PostsDynamoDBTableDataSource", "PostsDynamoDBTableDataSource"),
        (
            "blocked_users",
            "blocked_users_table",
            "BlockedUsersDynamoDBTableDataSource",
            "BlockedUsersDynamoDBTableDataSource",
        ),
    ]

    region = Stack.of(scope).region
    for ds_key, table_key, construct_id, ds_name in table_configs:
        datasources[ds_key] = appsync.CfnDataSource(
            scope,
            construct_id,
            api_id=api.attr_api_id,
            name=ds_name,
            type="AMAZON_DYNAMODB",
            dynamo_db_config=appsync.CfnDataSource.DynamoDBConfigProperty(
                table_name=tables[table_key].table_name,
                aws_region=region,
            ),
            service_role_arn=service_role.role_arn,
        )

    return datasources
