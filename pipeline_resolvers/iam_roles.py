"""
IAM roles and policies for the CDK stack.

Creates:
- AppSync service role for direct DynamoDB data sources
- AppSync role for pushing resolver logs to CloudWatch
"""

from typing import Callable

from aws_cdk import aws_iam as iam
from constructs import Construct


def create_appsync_dynamodb_role(stack: Construct, rn: Callable[[str], str]) -> iam.Role:
    """Create the role AppSync assumes to read and write the DynamoDB tables.

    Args:
        stack: CDK Construct (usually the Stack instance)
        rn: helper function to create resource names

    Returns:
        The AppSync DynamoDB service role
    """
    dynamodb_role = iam.Role(
        stack,
        "DynamoDBRole",
        role_name=rn("pipeline-appsync-dynamodb"),
        assumed_by=iam.ServicePrincipal("appsync.amazonaws.com"),
    )
    dynamodb_role.add_managed_policy(iam.ManagedPolicy.from_aws_managed_policy_name("AmazonDynamoDBFullAccess"))

    return dynamodb_role


def create_appsync_cloudwatch_role(stack: Construct, rn: Callable[[str], str]) -> iam.Role:
    """Create the role AppSync assumes to push field logs to CloudWatch.

    Args:
        stack: CDK Construct (usually the Stack instance)
        rn: helper function to create resource names

    Returns:
        The AppSync CloudWatch logs role
    """
    cloudwatch_role = iam.Role(
        stack,
        "AppSyncCloudWatchLogsRole",
        role_name=rn("pipeline-appsync-logs"),
        assumed_by=iam.ServicePrincipal("appsync.amazonaws.com"),
    )
    cloudwatch_role.add_managed_policy(
        iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AWSAppSyncPushToCloudWatchLogs")
    )

    return cloudwatch_role
