"""Strongly typed identifiers for Scribe domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Issued by the identity provider (the token's ``sub`` claim)
UserId = NewType("UserId", UUID)

PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
ProfileId = NewType("ProfileId", UUID)
