"""Tests for the dynamodb_tables module."""

from unittest.mock import patch

from aws_cdk import App, Stack, assertions
from aws_cdk import aws_dynamodb as dynamodb

from pipeline_resolvers.dynamodb_tables import create_dynamodb_tables


class TestCreateDynamoDBTables:
    """Tests for create_dynamodb_tables function."""

    def test_returns_dict_with_all_tables(self, stack, rn):
        """Should return a dict with both tables."""
        result = create_dynamodb_tables(stack, rn)

        assert set(result) == {"blocked_users_table", "posts_table"}
        for key, table in result.items():
            assert isinstance(table, dynamodb.Table), f"{key} is not a Table"

    def test_blocked_users_table_keys(self, stack, rn):
        """Blocked users table is keyed by userId and blockedUserId."""
        create_dynamodb_tables(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "TableName": "BlockedUsersDynamoDBTable-ue2-test",
                "KeySchema": [
                    {"AttributeName": "userId", "KeyType": "HASH"},
                    {"AttributeName": "blockedUserId", "KeyType": "RANGE"},
                ],
            },
        )

    def test_posts_table_has_creator_index(self, stack, rn):
        """Posts table is keyed by id with a creator-index GSI projecting all attributes."""
        create_dynamodb_tables(stack, rn)
        template = assertions.Template.from_stack(stack)

        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "TableName": "PostsDynamoDBTable-ue2-test",
                "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
                "GlobalSecondaryIndexes": [
                    {
                        "IndexName": "creator-index",
                        "KeySchema": [{"AttributeName": "creatorId", "KeyType": "HASH"}],
                        "Projection": {"ProjectionType": "ALL"},
                    }
                ],
            },
        )

    def test_all_tables_on_demand_with_new_image_stream(self, stack, rn):
        """Both tables use PAY_PER_REQUEST billing and NEW_IMAGE streams."""
        create_dynamodb_tables(stack, rn)
        template = assertions.Template.from_stack(stack)

        tables = template.find_resources(
            "AWS::DynamoDB::Table",
            {
                "Properties": {
                    "BillingMode": "PAY_PER_REQUEST",
                    "StreamSpecification": {"StreamViewType": "NEW_IMAGE"},
                }
            },
        )
        assert len(tables) == 2

    def test_tables_destroyed_with_stack(self, stack, rn):
        """Both tables are deleted when the stack is deleted."""
        create_dynamodb_tables(stack, rn)
        template = assertions.Template.from_stack(stack)

        tables = template.find_resources(
            "AWS::DynamoDB::Table",
            {"DeletionPolicy": "Delete", "UpdateReplacePolicy": "Delete"},
        )
        assert len(tables) == 2

    def test_lookup_skipped_without_import_flag(self, stack, rn):
        """No AWS lookups happen unless import_existing is set."""
        with patch("pipeline_resolvers.dynamodb_tables.lookup_dynamodb_table") as mock_lookup:
            create_dynamodb_tables(stack, rn)

        mock_lookup.assert_not_called()


class TestImportExistingTables:
    """Tests for importing tables when import_existing is set."""

    @staticmethod
    def _stack() -> Stack:
        app = App(context={"import_existing": "true"})
        return Stack(app, "TestStack")

    def test_imports_existing_tables(self, rn):
        """Existing tables are imported by name instead of created."""
        stack = self._stack()

        def fake_lookup(table_name):
            return {"table_name": table_name, "table_arn": f"arn:aws:dynamodb:us-east-2:123456789012:table/{table_name}"}

        with patch("pipeline_resolvers.dynamodb_tables.lookup_dynamodb_table", side_effect=fake_lookup):
            result = create_dynamodb_tables(stack, rn)

        template = assertions.Template.from_stack(stack)
        template.resource_count_is("AWS::DynamoDB::Table", 0)
        assert stack.resolve(result["posts_table"].table_name) == "PostsDynamoDBTable-ue2-test"
        assert stack.resolve(result["blocked_users_table"].table_name) == "BlockedUsersDynamoDBTable-ue2-test"

    def test_creates_tables_that_do_not_exist(self, rn):
        """Tables not found in the account are created as usual."""
        stack = self._stack()

        def fake_lookup(table_name):
            if table_name.startswith("Posts"):
                return {"table_name": table_name, "table_arn": "arn"}
            return None

        with patch("pipeline_resolvers.dynamodb_tables.lookup_dynamodb_table", side_effect=fake_lookup):
            create_dynamodb_tables(stack, rn)

        template = assertions.Template.from_stack(stack)
        template.resource_count_is("AWS::DynamoDB::Table", 1)
        template.has_resource_properties("AWS::DynamoDB::Table", {"TableName": "BlockedUsersDynamoDBTable-ue2-test"})
