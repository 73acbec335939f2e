from typing import Callable, Dict

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

from .helpers import get_context_bool
from .resource_lookup import lookup_dynamodb_table
from .synth_logging import get_logger


def _import_if_exists(stack: Construct, construct_id: str, table_name: str) -> ddb.ITable | None:
    """Import an existing table by name when the import_existing flag is set."""
    if not get_context_bool(stack, "import_existing"):
        return None
    existing = lookup_dynamodb_table(table_name)
    if existing is None:
        return None
    get_logger(__name__, stack).info("Importing existing DynamoDB table", table_name=table_name)
    return ddb.Table.from_table_name(stack, construct_id, existing["table_name"])


def create_dynamodb_tables(stack: Construct, rn: Callable[[str], str]) -> Dict[str, ddb.ITable]:
    """Create the DynamoDB tables behind the GraphQL API and return them in a dict.

    Args:
        stack: CDK Construct (usually the Stack instance)
        rn: helper function to create resource names (rn(name: str) -> str)

    Returns:
        Mapping of table keys to Table constructs
    """
    blocked_users_name = rn("BlockedUsersDynamoDBTable")
    blocked_users_table = _import_if_exists(stack, "BlockedUsersDynamoDBTable", blocked_users_name)
    if blocked_users_table is None:
        blocked_users_table = ddb.Table(
            stack,
            "BlockedUsersDynamoDBTable",
            table_name=blocked_users_name,
            partition_key=ddb.Attribute(name="userId", type=ddb.AttributeType.STRING),
            sort_key=ddb.Attribute(name="blockedUserId", type=ddb.AttributeType.STRING),
            billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
            stream=ddb.StreamViewType.NEW_IMAGE,
            removal_policy=RemovalPolicy.DESTROY,
        )

    posts_name = rn("PostsDynamoDBTable")
    posts_table = _import_if_exists(stack, "PostsDynamoDBTable", posts_name)
    if posts_table is None:
        posts_table = ddb.Table(
            stack,
            "PostsDynamoDBTable",
            table_name=posts_name,
            partition_key=ddb.Attribute(name="id", type=ddb.AttributeType.STRING),
            billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
            stream=ddb.StreamViewType.NEW_IMAGE,
            removal_policy=RemovalPolicy.DESTROY,
        )
        posts_table.add_global_secondary_index(
            index_name="creator-index",
            partition_key=ddb.Attribute(name="creatorId", type=ddb.AttributeType.STRING),
            projection_type=ddb.ProjectionType.ALL,
        )

    return {
        "blocked_users_table": blocked_users_table,
        "posts_table": posts_table,
    }
