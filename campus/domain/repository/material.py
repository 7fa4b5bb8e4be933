"""Material repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from campus.domain.model.material import Material
from campus.domain.value import MaterialId


class MaterialRepository(ABC):
    """Repository for course material records."""

    @abstractmethod
    async def find_by_id(self, material_id: MaterialId) -> Optional[Material]:
        """Find a material by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, material_ids: List[MaterialId]) -> List[Material]:
        """Find the materials that still exist among the given IDs."""
        pass

    @abstractmethod
    async def save(self, material: Material) -> Material:
        """Save a material record."""
        pass

    @abstractmethod
    async def delete(self, material_id: MaterialId) -> bool:
        """Delete a material record.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        pass
