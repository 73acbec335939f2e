#!/usr/bin/env python3
import os
import subprocess
from pathlib import Path

import aws_cdk as cdk

from pipeline_resolvers.helpers import get_region, get_region_abbrev, load_env_file
from pipeline_resolvers.pipeline_resolvers_stack import PipelineResolversStack

# Load environment variables from .env file if it exists
load_env_file(Path(__file__).parent / ".env")

app = cdk.App()

# Get environment from context or environment variable (dev/prod)
env_name = app.node.try_get_context("environment") or os.getenv("ENVIRONMENT", "dev")

# Get region and its abbreviation for stack naming
region = get_region()
region_abbrev = get_region_abbrev(region)

account = os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT")
if not account:
    # Try to get from AWS CLI if not in environment
    try:
        account = subprocess.check_output(
            ["aws", "sts", "get-caller-identity", "--query", "Account", "--output", "text"],
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        account = None  # Synthesize an account-agnostic stack

env = cdk.Environment(
    account=account,
    region=region,
)

# Environment-specific stack name with region: pipeline-resolvers-{region}-{env}
stack_name = f"pipeline-resolvers-{region_abbrev}-{env_name}"

PipelineResolversStack(
    app,
    f"PipelineResolversStack-{region_abbrev}-{env_name}",
    stack_name=stack_name,
    env_name=env_name,
    env=env,
    description=f"Pipeline Resolvers - Cognito, AppSync and DynamoDB ({region_abbrev}-{env_name})",
)

app.synth()
