"""Course material entity.

Materials are files students upload to a course. Upload transport and
blob storage live elsewhere; this service only needs the record so that
reports can reference it and moderation can remove it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CourseCode, MaterialId, UserId


class Material(DomainModel):
    """Uploaded course material."""

    id: MaterialId
    course_code: CourseCode
    uploader_id: UserId
    file_name: str = Field(min_length=1, max_length=255)
    file_type: str
    file_size: int = Field(gt=0, le=10 * 1024 * 1024)
    file_url: str
    description: Optional[str] = None
    uploaded_at: datetime = Field(default_factory=datetime.now)
