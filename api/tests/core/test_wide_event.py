"""Unit tests for core.wide_event module."""

import pytest

from core.wide_event import (
    clear_wide_event,
    get_wide_event,
    init_wide_event,
    record_store_call,
    set_wide_event_fields,
)


@pytest.mark.unit
class TestWideEventLifecycle:
    def test_init_seeds_fields(self):
        event = init_wide_event(request_id="req-1", http_method="GET")
        assert event == {"request_id": "req-1", "http_method": "GET"}
        assert get_wide_event() is event

    def test_set_fields_on_bare_init(self):
        init_wide_event()
        set_wide_event_fields(faq_query="vacaciones")
        assert get_wide_event() == {"faq_query": "vacaciones"}

    def test_set_fields_overwrites_existing_key(self):
        init_wide_event(request_id="req-1")
        set_wide_event_fields(key="old")
        set_wide_event_fields(key="new")
        assert get_wide_event()["key"] == "new"

    def test_clear_closes_event(self):
        init_wide_event(request_id="req-1")
        clear_wide_event()
        assert get_wide_event() == {}


@pytest.mark.unit
class TestWideEventWithoutOpenEvent:
    def test_set_fields_is_noop(self):
        clear_wide_event()
        set_wide_event_fields(should_not="appear")
        assert get_wide_event() == {}

    def test_get_returns_detached_dict(self):
        clear_wide_event()
        get_wide_event()["leak"] = True
        assert get_wide_event() == {}

    def test_record_store_call_is_noop(self):
        clear_wide_event()
        record_store_call("faqs.search", 1.0)
        assert get_wide_event() == {}


@pytest.mark.unit
class TestRecordStoreCall:
    def test_accumulates_calls_and_time(self):
        init_wide_event()
        record_store_call("usuarios.get_by_email", 2.5)
        record_store_call("conversaciones.append_message", 1.25)

        event = get_wide_event()
        assert event["db_calls"] == 2
        assert event["db_time_ms"] == 3.75
        assert event["db_operation"] == "conversaciones.append_message"
        assert "db_fault" not in event

    def test_failed_call_marks_fault(self):
        init_wide_event()
        record_store_call(
            "faqs.create", 0.5, error="connection refused", error_type="AutoReconnect"
        )

        event = get_wide_event()
        assert event["db_fault"] is True
        assert event["db_error"] == "connection refused"
        assert event["db_error_type"] == "AutoReconnect"
