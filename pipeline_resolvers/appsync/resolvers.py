"""Query and mutation resolvers for the AppSync GraphQL API."""

from typing import Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import MAPPING_TEMPLATES_DIR
from .resolver_builder import ResolverBuilder


def create_resolvers(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    datasources: dict[str, Any],
    functions: dict[str, appsync.CfnFunctionConfiguration],
    schema: appsync.CfnGraphQLSchema,
) -> dict[str, appsync.CfnResolver]:
    """
    Create all AppSync resolvers.

    Args:
        scope: CDK construct scope
        api: AppSync GraphQL API
        datasources: Dictionary of AppSync data sources
        functions: Dictionary of pipeline functions
        schema: Schema resource the resolvers depend on

    Returns:
        Dictionary of field name to resolver
    """
    builder = ResolverBuilder(scope, api, datasources, schema)

    created = builder.create_batch_resolvers(
        [
            # === MUTATIONS ===
            {
                "type": "unit",
                "field_name": "createPost",
                "type_name": "Mutation",
                "datasource_name": "posts",
                "request_template": MAPPING_TEMPLATES_DIR / "create_post_request.vtl",
                "response_template": MAPPING_TEMPLATES_DIR / "create_post_response.vtl",
                "id_suffix": "CreatePostResolver",
            },
            {
                "type": "unit",
                "field_name": "blockUser",
                "type_name": "Mutation",
                "datasource_name": "blocked_users",
                "request_template": MAPPING_TEMPLATES_DIR / "block_user_request.vtl",
                "response_template": MAPPING_TEMPLATES_DIR / "block_user_response.vtl",
                "id_suffix": "BlockUserResolver",
            },
            # === QUERIES ===
            # getPostsByCreator: block check first, then fetch
            {
                "type": "pipeline",
                "field_name": "getPostsByCreator",
                "type_name": "Query",
                "functions": [
                    functions["is_user_blocked"],
                    functions["get_posts_by_creator"],
                ],
                "request_template": MAPPING_TEMPLATES_DIR / "before_mapping_template.vtl",
                "response_template": MAPPING_TEMPLATES_DIR / "after_mapping_template.vtl",
                "id_suffix": "GetPostsByCreatorResolver",
            },
        ]
    )

    return {resolver.field_name: resolver for resolver in created}
