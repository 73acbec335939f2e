"""
Builder pattern for AppSync resolvers.

Simplifies creation of VTL unit and pipeline resolvers on the CloudFormation-level
API. Every resolver built here depends on the schema resource, since AppSync
rejects resolvers for fields the schema does not define yet.
"""

from pathlib import Path
from typing import Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import read_asset


class ResolverBuilder:
    """
    Fluent builder for AppSync resolvers.

    Provides methods for creating:
    - Unit resolvers (one data source, request/response mapping templates)
    - Pipeline resolvers (ordered functions wrapped in before/after templates)

    Example:
        builder = ResolverBuilder(scope, api, datasources, schema)

        builder.create_unit_resolver(
            field_name="createPost",
            type_name="Mutation",
            datasource_name="posts",
            request_template=MAPPING_TEMPLATES_DIR / "create_post_request.vtl",
            response_template=MAPPING_TEMPLATES_DIR / "create_post_response.vtl",
        )
    """

    def __init__(
        self,
        scope: Construct,
        api: appsync.CfnGraphQLApi,
        datasources: dict[str, Any],
        schema: appsync.CfnGraphQLSchema,
    ):
        """
        Initialize the resolver builder.

        Args:
            scope: CDK construct scope for creating resources
            api: AppSync GraphQL API
            datasources: Dictionary of AppSync data sources (keyed by name)
            schema: Schema resource every resolver must wait for
        """
        self.scope = scope
        self.api = api
        self.datasources = datasources
        self.schema = schema

    def create_unit_resolver(
        self,
        field_name: str,
        type_name: str,
        datasource_name: str,
        request_template: Path,
        response_template: Path,
        id_suffix: str | None = None,
    ) -> appsync.CfnResolver:
        """
        Create a unit resolver with request/response mapping templates.

        Args:
            field_name: GraphQL field name (e.g., "createPost")
            type_name: GraphQL type name (e.g., "Query", "Mutation")
            datasource_name: Key in datasources dict (e.g., "posts")
            request_template: Path to request VTL template file
            response_template: Path to response VTL template file
            id_suffix: Optional custom CDK construct ID

        Returns:
            The created resolver
        """
        resolver_id = id_suffix or f"{field_name}Resolver"

        datasource = self.datasources[datasource_name]
        resolver = appsync.CfnResolver(
            self.scope,
            resolver_id,
            api_id=self.api.attr_api_id,
            type_name=type_name,
            field_name=field_name,
            kind="UNIT",
            data_source_name=datasource.attr_name,
            request_mapping_template=read_asset(request_template),
            response_mapping_template=read_asset(response_template),
        )
        resolver.add_dependency(self.schema)
        return resolver

    def create_pipeline_resolver(
        self,
        field_name: str,
        type_name: str,
        functions: list[appsync.CfnFunctionConfiguration],
        request_template: Path,
        response_template: Path,
        id_suffix: str | None = None,
    ) -> appsync.CfnResolver:
        """
        Create a pipeline resolver that runs functions in the given order.

        Args:
            field_name: GraphQL field name
            type_name: GraphQL type name
            functions: AppSync functions to execute, in order
            request_template: Path to the "before" VTL template
            response_template: Path to the "after" VTL template
            id_suffix: Optional custom CDK construct ID

        Returns:
            The created resolver

        Raises:
            ValueError: if no functions are given
        """
        if not functions:
            raise ValueError(f"Pipeline resolver {type_name}.{field_name} needs at least one function")

        resolver_id = id_suffix or f"{field_name}PipelineResolver"

        resolver = appsync.CfnResolver(
            self.scope,
            resolver_id,
            api_id=self.api.attr_api_id,
            type_name=type_name,
            field_name=field_name,
            kind="PIPELINE",
            pipeline_config=appsync.CfnResolver.PipelineConfigProperty(
                functions=[fn.attr_function_id for fn in functions],
            ),
            request_mapping_template=read_asset(request_template),
            response_mapping_template=read_asset(response_template),
        )
        resolver.add_dependency(self.schema)
        return resolver

    def create_batch_resolvers(
        self,
        resolvers: list[dict[str, Any]],
    ) -> list[appsync.CfnResolver]:
        """
        Create multiple resolvers from a configuration list.

        Args:
            resolvers: List of resolver configurations, each containing:
                - type: "unit" or "pipeline"
                - field_name: GraphQL field name
                - type_name: GraphQL type name
                - datasource_name: (for unit) Key in datasources dict
                - functions: (for pipeline) List of AppSync functions
                - request_template: Path to request template
                - response_template: Path to response template
                - id_suffix: (optional) Custom CDK construct ID

        Returns:
            List of created resolvers
        """
        created = []
        for config in resolvers:
            resolver_type = config["type"]

            if resolver_type == "unit":
                resolver = self.create_unit_resolver(
                    field_name=config["field_name"],
                    type_name=config["type_name"],
                    datasource_name=config["datasource_name"],
                    request_template=config["request_template"],
                    response_template=config["response_template"],
                    id_suffix=config.get("id_suffix"),
                )
            elif resolver_type == "pipeline":
                resolver = self.create_pipeline_resolver(
                    field_name=config["field_name"],
                    type_name=config["type_name"],
                    functions=config["functions"],
                    request_template=config["request_template"],
                    response_template=config["response_template"],
                    id_suffix=config.get("id_suffix"),
                )
            else:
                raise ValueError(f"Unknown resolver type: {resolver_type}")

            created.append(resolver)

        return created
