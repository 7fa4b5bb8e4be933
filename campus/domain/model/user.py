"""Student directory entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import UserId, UserSummary


class User(DomainModel):
    """Portal user (student or administrator).

    Accounts are managed by the auth service; this record only carries
    what the discussion screens display.
    """

    id: UserId
    full_name: Optional[str] = None
    email: Optional[str] = None
    student_id: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def display_name(self) -> str:
        """Full name, else the local part of the email, else 'Anonymous'."""
        if self.full_name:
            return self.full_name
        if self.email:
            return self.email.split("@")[0]
        return "Anonymous"

    def summary(self) -> UserSummary:
        return UserSummary(
            user_id=self.id,
            display_name=self.display_name,
            email=self.email,
            student_id=self.student_id,
            avatar_url=self.avatar_url,
        )
