"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared field by field (``Actor``, ``UserSummary``)."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Single wrapped primitive such as ``CourseCode``.

    Hashable, so codes can key dicts and sets; ``str()`` and
    ``model_dump()`` give the bare value.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
