"""Tests for ConversacionRepository.append_message()."""

from datetime import UTC, datetime

import pytest
from bson import ObjectId
from pymongo.errors import WriteConcernError

from repositories import ConversacionRepository, Fault, Ok
from tests.factories import ConversacionFactory, MensajeFactory
from tests.fakes import write_result


@pytest.mark.unit
class TestAppendMessage:
    async def test_single_push_and_set(self, mock_db, mock_collection):
        oid = ObjectId()
        mock_collection.update_one.return_value = write_result(
            matched_count=1, modified_count=1
        )
        mensaje = MensajeFactory.build(contenido="¿Dónde está mi laptop?")

        result = await ConversacionRepository(mock_db).append_message(str(oid), mensaje)

        assert result == Ok(True)
        mock_collection.update_one.assert_awaited_once()
        filter_, update = mock_collection.update_one.await_args.args
        assert filter_ == {"_id": oid}
        assert update["$push"]["mensajes"]["contenido"] == "¿Dónde está mi laptop?"
        assert update["$push"]["mensajes"]["timestamp"] == mensaje.timestamp
        assert isinstance(update["$set"]["fechaUltimaMensaje"], datetime)
        assert update["$set"]["fechaUltimaMensaje"].tzinfo is UTC

    async def test_pushed_message_omits_unset_faq(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = write_result(
            matched_count=1, modified_count=1
        )

        await ConversacionRepository(mock_db).append_message(
            str(ObjectId()), MensajeFactory.build(faqRelacionada=None)
        )

        _, update = mock_collection.update_one.await_args.args
        assert "faqRelacionada" not in update["$push"]["mensajes"]

    async def test_pushed_message_keeps_related_faq(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = write_result(
            matched_count=1, modified_count=1
        )
        faq_id = str(ObjectId())

        await ConversacionRepository(mock_db).append_message(
            str(ObjectId()), MensajeFactory.build(faqRelacionada=faq_id)
        )

        _, update = mock_collection.update_one.await_args.args
        assert update["$push"]["mensajes"]["faqRelacionada"] == faq_id

    async def test_unknown_conversation(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = write_result(
            matched_count=0, modified_count=0
        )
        result = await ConversacionRepository(mock_db).append_message(
            str(ObjectId()), MensajeFactory.build()
        )
        assert result == Ok(False)

    async def test_malformed_id(self, mock_db, mock_collection):
        result = await ConversacionRepository(mock_db).append_message(
            "xyz", MensajeFactory.build()
        )
        assert result == Ok(False)
        mock_collection.update_one.assert_not_awaited()

    async def test_fault(self, mock_db, mock_collection):
        mock_collection.update_one.side_effect = WriteConcernError("w timeout")

        result = await ConversacionRepository(mock_db).append_message(
            str(ObjectId()), MensajeFactory.build()
        )

        assert isinstance(result, Fault)
        assert result.operation == "conversaciones.append_message"


@pytest.mark.unit
class TestConversacionTimestamps:
    async def test_create_stamps_start_and_last_message(self, mock_db, mock_collection):
        mock_collection.insert_one.return_value = write_result(inserted_id=ObjectId())
        stale = datetime(2000, 1, 1, tzinfo=UTC)
        conversacion = ConversacionFactory.build(
            fechaInicio=stale, fechaUltimaMensaje=stale
        )

        await ConversacionRepository(mock_db).create(conversacion)

        assert conversacion.fechaInicio > stale
        assert conversacion.fechaUltimaMensaje == conversacion.fechaInicio
