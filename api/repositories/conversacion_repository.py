"""Conversacion repository for the ``conversaciones`` collection."""

from models import Conversacion, Mensaje, utcnow
from repositories.base import MongoRepository
from repositories.utils import parse_object_id, store_operation


class ConversacionRepository(MongoRepository[Conversacion]):
    """Repository for chatbot conversations and their embedded messages."""

    collection_name = "conversaciones"
    model = Conversacion
    created_fields = ("fechaInicio",)
    updated_fields = ("fechaUltimaMensaje",)

    @store_operation("get_by_usuario")
    async def get_by_usuario(self, usuario_id: str) -> list[Conversacion]:
        self.log.info("repository.get_by_usuario", usuario_id=usuario_id)
        return await self._find({"usuarioId": usuario_id})

    @store_operation("get_activas")
    async def get_activas(self) -> list[Conversacion]:
        self.log.info("repository.get_activas")
        return await self._find({"activa": True})

    @store_operation("get_resueltas")
    async def get_resueltas(self) -> list[Conversacion]:
        self.log.info("repository.get_resueltas")
        return await self._find({"resuelto": True})

    @store_operation("append_message")
    async def append_message(self, conversacion_id: str, mensaje: Mensaje) -> bool:
        """Append ``mensaje`` and bump ``fechaUltimaMensaje`` in one update.

        A single ``$push``/``$set`` document update is atomic per document,
        so concurrent appends to the same conversation never lose messages.
        Returns False when the id is malformed or no conversation matched.
        """
        object_id = parse_object_id(conversacion_id)
        if object_id is None:
            self.log.warning("repository.invalid_id", id=conversacion_id)
            return False

        result = await self.collection.update_one(
            {"_id": object_id},
            {
                "$push": {"mensajes": mensaje.to_document()},
                "$set": {"fechaUltimaMensaje": utcnow()},
            },
        )
        if result.modified_count > 0:
            self.log.info("repository.message_appended", id=conversacion_id)
            return True
        self.log.warning("repository.append_message.no_match", id=conversacion_id)
        return False
