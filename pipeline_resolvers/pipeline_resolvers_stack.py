from aws_cdk import Stack, Token
from constructs import Construct

from .appsync import output_api_endpoints, setup_appsync
from .auth import create_cognito_auth, output_cognito_ids
from .dynamodb_tables import create_dynamodb_tables
from .helpers import get_region, get_region_abbrev, make_resource_namer, validate_env_name
from .iam_roles import create_appsync_cloudwatch_role, create_appsync_dynamodb_role
from .synth_logging import get_logger


class PipelineResolversStack(Stack):
    """
    Pipeline Resolvers - Core Infrastructure Stack

    Creates:
    - Cognito User Pool and client for authentication
    - IAM roles for AppSync (DynamoDB access, CloudWatch logging)
    - AppSync GraphQL API with a Cognito authorizer
    - DynamoDB tables for posts and blocked users
    - Unit resolvers (createPost, blockUser) and the getPostsByCreator
      pipeline resolver (isUserBlocked -> getPostsByCreator)
    """

    def __init__(self, scope: Construct, construct_id: str, env_name: str = "dev", **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = validate_env_name(env_name)

        # Environment-agnostic stacks have a token region; fall back to the env vars for naming
        region = get_region() if Token.is_unresolved(self.region) else self.region
        self.region_abbrev = get_region_abbrev(region)

        # Helper for consistent resource naming: {name}-{region}-{env}
        self.resource_name = make_resource_namer(self.region_abbrev, env_name)
        rn = self.resource_name

        logger = get_logger(__name__, self)
        logger.info("Synthesizing stack", env_name=env_name, region=region)

        # ====================================================================
        # Cognito
        # ====================================================================
        auth = create_cognito_auth(self, rn)
        self.user_pool = auth["user_pool"]
        self.user_pool_client = auth["user_pool_client"]

        # ====================================================================
        # IAM Roles
        # ====================================================================
        self.dynamodb_role = create_appsync_dynamodb_role(self, rn)
        self.cloudwatch_role = create_appsync_cloudwatch_role(self, rn)

        # ====================================================================
        # DynamoDB Tables
        # ====================================================================
        self.tables = create_dynamodb_tables(self, rn)

        # ====================================================================
        # AppSync GraphQL API
        # ====================================================================
        self.appsync = setup_appsync(
            self,
            resource_name=rn,
            user_pool=self.user_pool,
            tables=self.tables,
            dynamodb_role=self.dynamodb_role,
            cloudwatch_role=self.cloudwatch_role,
        )
        self.api = self.appsync.api

        # ====================================================================
        # Outputs
        # ====================================================================
        output_cognito_ids(self, self.user_pool, self.user_pool_client)
        output_api_endpoints(self, self.api)
