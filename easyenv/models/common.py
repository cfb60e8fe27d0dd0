"""
Common helpers shared by domain entities.

Dependencies: uuid
System role: Identifier generation
"""

import uuid


def new_id() -> str:
    """Generate a fresh entity identifier (UUID v4 string)."""
    return str(uuid.uuid4())
