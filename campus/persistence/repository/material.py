"""PostgreSQL implementation of Material repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Material
from campus.domain.repository import MaterialRepository
from campus.domain.value import MaterialId
from campus.persistence.mappers import material_to_dict, row_to_material
from campus.persistence.tables import course_files_table


class PostgresMaterialRepository(MaterialRepository):
    """PostgreSQL implementation of MaterialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, material_id: MaterialId) -> Optional[Material]:
        """Find a material by ID."""
        stmt = select(course_files_table).where(course_files_table.c.id == material_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_material(row._asdict()) if row else None

    async def find_by_ids(self, material_ids: List[MaterialId]) -> List[Material]:
        """Find the materials that still exist among the given IDs."""
        if not material_ids:
            return []
        stmt = select(course_files_table).where(
            course_files_table.c.id.in_(material_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_material(row._asdict()) for row in result.fetchall()]

    async def save(self, material: Material) -> Material:
        """Insert a material record."""
        stmt = insert(course_files_table).values(**material_to_dict(material))
        await self.session.execute(stmt)
        await self.session.flush()
        return material

    async def delete(self, material_id: MaterialId) -> bool:
        """Delete a material record."""
        stmt = delete(course_files_table).where(course_files_table.c.id == material_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0
