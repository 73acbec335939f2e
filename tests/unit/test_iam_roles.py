"""Tests for IAM roles module."""

from aws_cdk import assertions
from aws_cdk import aws_iam as iam

from pipeline_resolvers.iam_roles import create_appsync_cloudwatch_role, create_appsync_dynamodb_role

APPSYNC_ASSUME_ROLE = {
    "Statement": [
        {
            "Action": "sts:AssumeRole",
            "Effect": "Allow",
            "Principal": {"Service": "appsync.amazonaws.com"},
        }
    ],
}


def _managed_policy_arn(policy_name: str) -> dict:
    return {"Fn::Join": ["", ["arn:", {"Ref": "AWS::Partition"}, f":iam::aws:policy/{policy_name}"]]}


class TestCreateAppSyncDynamoDBRole:
    """Tests for create_appsync_dynamodb_role function."""

    def test_returns_role(self, stack, rn):
        """Function creates and returns an IAM role."""
        role = create_appsync_dynamodb_role(stack, rn)

        assert isinstance(role, iam.Role)

    def test_role_assumed_by_appsync(self, stack, rn):
        """Role trusts the AppSync service principal."""
        create_appsync_dynamodb_role(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::IAM::Role",
            {"RoleName": "pipeline-appsync-dynamodb-ue2-test", "AssumeRolePolicyDocument": APPSYNC_ASSUME_ROLE},
        )

    def test_role_has_dynamodb_managed_policy(self, stack, rn):
        """Role carries the AmazonDynamoDBFullAccess managed policy."""
        create_appsync_dynamodb_role(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::IAM::Role",
            {"ManagedPolicyArns": [_managed_policy_arn("AmazonDynamoDBFullAccess")]},
        )


class TestCreateAppSyncCloudWatchRole:
    """Tests for create_appsync_cloudwatch_role function."""

    def test_role_assumed_by_appsync(self, stack, rn):
        """Role trusts the AppSync service principal."""
        create_appsync_cloudwatch_role(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::IAM::Role",
            {"RoleName": "pipeline-appsync-logs-ue2-test", "AssumeRolePolicyDocument": APPSYNC_ASSUME_ROLE},
        )

    def test_role_has_push_to_cloudwatch_policy(self, stack, rn):
        """Role carries the AWSAppSyncPushToCloudWatchLogs managed policy."""
        create_appsync_cloudwatch_role(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::IAM::Role",
            {"ManagedPolicyArns": [_managed_policy_arn("service-role/AWSAppSyncPushToCloudWatchLogs")]},
        )

    def test_both_roles_coexist(self, stack, rn):
        """Both roles can be created in the same stack."""
        create_appsync_dynamodb_role(stack, rn)
        create_appsync_cloudwatch_role(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.resource_count_is("AWS::IAM::Role", 2)
