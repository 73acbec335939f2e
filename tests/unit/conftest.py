"""
Shared fixtures for CDK stack tests.

Provides test stacks, a resource namer, and a fully synthesised
PipelineResolversStack template.
"""

from typing import Any, Generator

import pytest
from aws_cdk import App, Environment, Stack, assertions

from pipeline_resolvers import resource_lookup
from pipeline_resolvers.pipeline_resolvers_stack import PipelineResolversStack

TEST_ENV = Environment(account="123456789012", region="us-east-2")


@pytest.fixture(autouse=True)
def clear_lookup_caches() -> Generator[None, None, None]:
    """Reset cached boto3 clients and lookup results between tests."""
    resource_lookup._clients.clear()
    resource_lookup.lookup_user_pool_by_name.cache_clear()
    resource_lookup.lookup_dynamodb_table.cache_clear()
    yield
    resource_lookup._clients.clear()
    resource_lookup.lookup_user_pool_by_name.cache_clear()
    resource_lookup.lookup_dynamodb_table.cache_clear()


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set fake AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-2")
    monkeypatch.setenv("AWS_REGION", "us-east-2")


@pytest.fixture
def stack() -> Stack:
    """Create an empty test stack pinned to us-east-2."""
    app = App()
    return Stack(app, "TestStack", env=TEST_ENV)


@pytest.fixture
def rn():
    """Create a resource naming function."""

    def _rn(name: str) -> str:
        return f"{name}-ue2-test"

    return _rn


@pytest.fixture
def pipeline_stack() -> PipelineResolversStack:
    """Synthesise the complete stack for the 'test' environment."""
    app = App()
    return PipelineResolversStack(app, "PipelineResolversTestStack", env_name="test", env=TEST_ENV)


@pytest.fixture
def template(pipeline_stack: PipelineResolversStack) -> assertions.Template:
    """CloudFormation template of the complete stack."""
    return assertions.Template.from_stack(pipeline_stack)


@pytest.fixture
def logical_id():
    """Resolve the logical ID of an L1 resource, or of an L2 construct's default child."""

    def _logical_id(stack: Stack, construct: Any) -> str:
        element = getattr(construct.node, "default_child", None) or construct
        return stack.get_logical_id(element)

    return _logical_id
