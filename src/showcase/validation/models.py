"""Input validation models using Pydantic.

These models validate user inputs before they are interpolated into
source locations, so a username can never redirect a fetch elsewhere.
"""

import re

from pydantic import BaseModel, Field, field_validator

# Alphanumeric plus a small set of separators; no slashes, dots-only or schemes
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9_-]|\.(?=[a-zA-Z0-9])){0,63}$")


class SourceUsernameInput(BaseModel):
    """Validated profile username for any source site."""

    username: str = Field(
        min_length=1,
        max_length=64,
        description="Profile username on the source site",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Invalid username. Must start with an alphanumeric character and "
                "contain only alphanumeric characters, dots, underscores and hyphens."
            )
        return v
