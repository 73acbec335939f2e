"""
Existing-resource discovery for `-c import_existing=true` deployments.

Names are matched exactly; `pipeline-users-ue2-dev` never matches
`pipeline-users-ue2-dev2`.
"""

import functools
from typing import Iterator, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .helpers import get_region
from .synth_logging import StructuredLogger

logger = StructuredLogger(__name__)

# One boto3 client per service, in the deployment region
_clients: dict = {}


def get_client(service: str):
    if service not in _clients:
        _clients[service] = boto3.client(service, region_name=get_region())
    return _clients[service]


def _iter_user_pools(client) -> Iterator[dict]:
    for page in client.get_paginator("list_user_pools").paginate(MaxResults=60):
        yield from page.get("UserPools", [])


@functools.lru_cache(maxsize=128)
def lookup_user_pool_by_name(name: str) -> Optional[dict]:
    """Return the ID and name of the User Pool called exactly `name`, or None."""
    try:
        match = next((pool for pool in _iter_user_pools(get_client("cognito-idp")) if pool["Name"] == name), None)
    except (BotoCoreError, ClientError) as e:
        logger.warning("User pool lookup failed", user_pool_name=name, error=str(e))
        return None
    if match is None:
        return None
    return {"user_pool_id": match["Id"], "user_pool_name": match["Name"]}


@functools.lru_cache(maxsize=128)
def lookup_dynamodb_table(table_name: str) -> Optional[dict]:
    """Return the name and ARN of `table_name` if it exists in the account."""
    client = get_client("dynamodb")
    try:
        table = client.describe_table(TableName=table_name)["Table"]
    except client.exceptions.ResourceNotFoundException:
        return None
    except (BotoCoreError, ClientError) as e:
        logger.warning("DynamoDB table lookup failed", table_name=table_name, error=str(e))
        return None
    return {"table_name": table["TableName"], "table_arn": table["TableArn"]}
