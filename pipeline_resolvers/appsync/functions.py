"""
AppSync functions for the getPostsByCreator pipeline.

The pipeline runs these in order:
- isUserBlockedFunction: fails the request if the creator blocked the caller
- getPostsByCreatorFunction: queries the creator's posts
"""

from typing import Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import MAPPING_TEMPLATES_DIR, read_asset

FUNCTION_VERSION = "2018-05-29"


def create_pipeline_functions(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    datasources: dict[str, Any],
) -> dict[str, appsync.CfnFunctionConfiguration]:
    """
    Create AppSync functions for pipeline resolvers.

    Args:
        scope: CDK construct scope
        api: The AppSync GraphQL API
        datasources: Dictionary of datasource key to data source

    Returns:
        Dictionary of function key to AppSync function
    """
    functions: dict[str, appsync.CfnFunctionConfiguration] = {}

    # isUserBlockedFunction
    functions["is_user_blocked"] = appsync.CfnFunctionConfiguration(
        scope,
        "isUserBlockedFunction",
        api_id=api.attr_api_id,
        name="isUserBlockedFunction",
        data_source_name=datasources["blocked_users"].attr_name,
        function_version=FUNCTION_VERSION,
        request_mapping_template=read_asset(MAPPING_TEMPLATES_DIR / "is_user_blocked_request.vtl"),
        response_mapping_template=read_asset(MAPPING_TEMPLATES_DIR / "is_user_blocked_response.vtl"),
    )

    # getPostsByCreatorFunction
    functions["get_posts_by_creator"] = appsync.CfnFunctionConfiguration(
        scope,
        "getPostsByCreatorFunction",
        api_id=api.attr_api_id,
        name="getPostsByCreatorFunction",
        data_source_name=datasources["posts"].attr_name,
        function_version=FUNCTION_VERSION,
        request_mapping_template=read_asset(MAPPING_TEMPLATES_DIR / "get_posts_by_creator_request.vtl"),
        response_mapping_template=read_asset(MAPPING_TEMPLATES_DIR / "get_posts_by_creator_response.vtl"),
    )

    return functions
