"""Strongly typed identifiers for campus domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)
MaterialId = NewType("MaterialId", UUID)
ReportId = NewType("ReportId", UUID)
