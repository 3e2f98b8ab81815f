"""Mapping of verified WAYF token claims onto :class:`WayfClaims`."""

import json
from collections.abc import Mapping
from typing import Any

from wayf.client.types import WayfClaims

CLAIM_FULL_NAME = "cn"
CLAIM_PRIMARY_AFFILIATION = "eduPersonPrimaryAffiliation"
CLAIM_USER_ID = "uid"


def claim_value(principal: Mapping[str, Any], name: str) -> str:
    """First value of a claim, or an empty string when it is absent."""
    value = principal.get(name)
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None:
        return ""
    return value if isinstance(value, str) else json.dumps(value)


def build_claims(principal: Mapping[str, Any]) -> WayfClaims:
    return WayfClaims(
        full_name=claim_value(principal, CLAIM_FULL_NAME),
        edu_person_primary_affiliation=claim_value(
            principal, CLAIM_PRIMARY_AFFILIATION
        ),
        user_id=claim_value(principal, CLAIM_USER_ID),
    )
