"""
Naming and configuration helpers shared by the stack modules.

Every physical name is built by rn(): {name}-{region_abbrev}-{env},
e.g. pipeline-api-ue2-dev.
"""

import os
import re
from pathlib import Path
from typing import Any, Optional

REGION_ABBREVIATIONS: dict[str, str] = {
    "us-east-1": "ue1",
    "us-east-2": "ue2",
    "us-west-1": "uw1",
    "us-west-2": "uw2",
    "eu-west-1": "ew1",
    "eu-central-1": "ec1",
    "ap-northeast-1": "ane1",
    "ap-southeast-2": "ase2",
}

ENV_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


def get_region() -> str:
    return os.getenv("AWS_REGION") or os.getenv("CDK_DEFAULT_REGION") or "us-east-1"


def get_region_abbrev(region: Optional[str] = None) -> str:
    """Short region code for physical names; unmapped regions use their first three characters."""
    region = region or get_region()
    return REGION_ABBREVIATIONS.get(region, region[:3])


def make_resource_namer(region_abbrev: str, env_name: str):
    """Return rn(name) bound to one region abbreviation and environment.

    rn() also takes explicit abbrev/env arguments for the rare name that
    belongs to another region or environment.
    """

    def rn(name: str, abbrev: str = region_abbrev, env: str = env_name) -> str:
        return f"{name}-{abbrev}-{env}"

    return rn


def validate_env_name(env_name: str) -> str:
    """Reject environment names that would produce invalid physical names.

    Raises:
        ValueError: unless the name is lowercase letters, digits and
            hyphens, starting with a letter
    """
    if not env_name or not ENV_NAME_PATTERN.match(env_name):
        raise ValueError(
            f"Invalid environment name {env_name!r}: use lowercase letters, digits and hyphens, starting with a letter"
        )
    return env_name


def get_context_bool(scope: Any, key: str, default: bool = False) -> bool:
    """Read a `-c key=value` flag; only the string 'false' (any case) turns it off."""
    value = scope.node.try_get_context(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).lower() != "false"


def load_env_file(path: Path) -> list[str]:
    """Copy KEY=VALUE lines from `path` into os.environ and return the keys set.

    A variable that is already defined, even as an empty string, keeps its value.
    """
    if not path.exists():
        return []

    loaded: list[str] = []
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key and key not in os.environ:
            os.environ[key] = value
            loaded.append(key)
    return loaded
