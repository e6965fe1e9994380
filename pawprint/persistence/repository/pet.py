"""PostgreSQL implementation of the pet profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pawprint.domain.model import Pet
from pawprint.domain.repository import PetRepository
from pawprint.domain.value import PetId
from pawprint.persistence.mappers import row_to_pet
from pawprint.persistence.tables import pets_table


class PostgresPetRepository(PetRepository):
    """Reads pet profiles from the pets table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, pet_id: PetId) -> Optional[Pet]:
        stmt = select(pets_table).where(pets_table.c.id == pet_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_pet(row._asdict()) if row else None

    async def find_by_ids(self, pet_ids: list[PetId]) -> list[Pet]:
        if not pet_ids:
            return []
        stmt = select(pets_table).where(pets_table.c.id.in_(pet_ids))
        result = await self.session.execute(stmt)
        return [row_to_pet(row._asdict()) for row in result.fetchall()]
