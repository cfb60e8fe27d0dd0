"""
Environment domain model.

Dependencies: pydantic
System role: Single environment variable value object and key rules
"""

import re

from pydantic import BaseModel, ConfigDict, Field

# Keys must survive an unquoted dotenv line: no whitespace, '=' or '#',
# and no leading single quote (parsed as a quoted key).
_KEY_PATTERN = re.compile(r"[^\s=#'][^\s=#]*")


def is_valid_key(key: str) -> bool:
    """Return True if key can be written to and read back from a dotenv file."""
    return isinstance(key, str) and _KEY_PATTERN.fullmatch(key) is not None


def validate_key(key: str) -> str:
    """
    Check that a variable name is representable in an environment file.

    Args:
        key: Variable name

    Returns:
        str: The unchanged key

    Raises:
        ValueError: If the key is empty or contains whitespace, '=' or '#',
            or starts with a single quote
    """
    if not is_valid_key(key):
        raise ValueError(
            f"Invalid environment key {key!r}: keys must be non-empty and "
            "cannot contain whitespace, '=' or '#', or start with a quote"
        )
    return key


class Environment(BaseModel):
    """One environment variable as an immutable key/value pair."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Variable name")
    value: str = Field(default="", description="Variable value")

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> str:
        return self.value
