"""Type definitions for the identity claims returned to callers."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WayfClaims(BaseModel):
    """Identity of a user authenticated through WAYF."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    full_name: str = ""
    edu_person_primary_affiliation: str = ""
    user_id: str = ""
