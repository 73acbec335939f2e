"""Cognito User Pool authentication configuration for the pipeline resolvers stack.

This module creates and configures:
- Cognito User Pool with email verification by code
- User Pool Client for the GraphQL clients
- Import of an existing pool when one is pinned via context or discovered by name
"""

from typing import Any, Callable

from aws_cdk import CfnOutput
from aws_cdk import aws_cognito as cognito
from constructs import Construct

from .helpers import get_context_bool
from .resource_lookup import lookup_user_pool_by_name
from .synth_logging import get_logger


def _find_existing_user_pool_id(scope: Construct, pool_name: str) -> str | None:
    """Resolve the ID of a pool to import, if any.

    An explicit `-c user_pool_id=...` wins; otherwise the pool is looked up by
    name only when `-c import_existing=true` is set.
    """
    pinned = scope.node.try_get_context("user_pool_id")
    if pinned:
        return str(pinned)
    if not get_context_bool(scope, "import_existing"):
        return None
    existing = lookup_user_pool_by_name(pool_name)
    if existing is None:
        return None
    return existing["user_pool_id"]


def _create_user_pool(scope: Construct, pool_name: str) -> cognito.UserPool:
    """Create a new self sign-up User Pool."""
    return cognito.UserPool(
        scope,
        "PipelineResolverUserPool",
        user_pool_name=pool_name,
        self_sign_up_enabled=True,
        account_recovery=cognito.AccountRecovery.PHONE_AND_EMAIL,
        user_verification=cognito.UserVerificationConfig(
            email_style=cognito.VerificationEmailStyle.CODE,
        ),
        auto_verify=cognito.AutoVerifiedAttrs(email=True),
        standard_attributes=cognito.StandardAttributes(
            email=cognito.StandardAttribute(required=True, mutable=True),
        ),
    )


def create_cognito_auth(scope: Construct, rn: Callable[[str], str]) -> dict[str, Any]:
    """Create the Cognito User Pool and its client.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)

    Returns:
        Dictionary containing user_pool, user_pool_client and imported (bool)
    """
    logger = get_logger(__name__, scope)
    pool_name = rn("pipeline-users")

    existing_user_pool_id = _find_existing_user_pool_id(scope, pool_name)
    if existing_user_pool_id:
        logger.info("Importing existing User Pool", user_pool_id=existing_user_pool_id)
        user_pool: cognito.IUserPool = cognito.UserPool.from_user_pool_id(
            scope, "PipelineResolverUserPool", existing_user_pool_id
        )
    else:
        logger.info("Creating User Pool", user_pool_name=pool_name)
        user_pool = _create_user_pool(scope, pool_name)

    user_pool_client = cognito.UserPoolClient(
        scope,
        "UserPoolClient",
        user_pool=user_pool,
        user_pool_client_name=rn("pipeline-client"),
    )

    return {
        "user_pool": user_pool,
        "user_pool_client": user_pool_client,
        "imported": bool(existing_user_pool_id),
    }


def output_cognito_ids(
    scope: Construct,
    user_pool: cognito.IUserPool,
    user_pool_client: cognito.IUserPoolClient,
) -> None:
    """Output the pool and client IDs clients need to sign in."""
    CfnOutput(
        scope,
        "UserPoolId",
        value=user_pool.user_pool_id,
        description="Cognito User Pool ID",
    )
    CfnOutput(
        scope,
        "UserPoolClientId",
        value=user_pool_client.user_pool_client_id,
        description="Cognito User Pool Client ID",
    )
