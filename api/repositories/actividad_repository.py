"""Actividad repository for the ``actividades`` collection."""

from models import Actividad
from repositories.base import MongoRepository
from repositories.utils import store_operation


class ActividadRepository(MongoRepository[Actividad]):
    """Repository for onboarding activities."""

    collection_name = "actividades"
    model = Actividad
    created_fields = ("fechaCreacion",)

    @store_operation("get_by_dia")
    async def get_by_dia(self, dia: int) -> list[Actividad]:
        """Activities scheduled for onboarding day ``dia``."""
        self.log.info("repository.get_by_dia", dia=dia)
        return await self._find({"dia": dia})

    @store_operation("get_by_tipo")
    async def get_by_tipo(self, tipo: str) -> list[Actividad]:
        self.log.info("repository.get_by_tipo", tipo=tipo)
        return await self._find({"tipo": tipo})

    @store_operation("get_obligatorias")
    async def get_obligatorias(self) -> list[Actividad]:
        self.log.info("repository.get_obligatorias")
        return await self._find({"obligatorio": True})
