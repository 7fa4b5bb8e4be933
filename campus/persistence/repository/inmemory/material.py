"""In-memory material repository for testing."""

from typing import Optional

from campus.domain.model.material import Material
from campus.domain.repository.material import MaterialRepository
from campus.domain.value import MaterialId


class InMemoryMaterialRepository(MaterialRepository):
    """In-memory implementation of MaterialRepository for testing."""

    def __init__(self) -> None:
        self._materials: dict[MaterialId, Material] = {}

    async def find_by_id(self, material_id: MaterialId) -> Optional[Material]:
        """Find a material by ID."""
        return self._materials.get(material_id)

    async def find_by_ids(self, material_ids: list[MaterialId]) -> list[Material]:
        """Find the materials that still exist among the given IDs."""
        return [self._materials[i] for i in set(material_ids) if i in self._materials]

    async def save(self, material: Material) -> Material:
        """Save a material record."""
        self._materials[material.id] = material
        return material

    async def delete(self, material_id: MaterialId) -> bool:
        """Delete a material record."""
        return self._materials.pop(material_id, None) is not None

    def snapshot(self) -> dict[MaterialId, Material]:
        return dict(self._materials)

    def restore(self, snapshot: dict[MaterialId, Material]) -> None:
        self._materials = dict(snapshot)
