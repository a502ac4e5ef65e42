"""
Tests for request logging middleware helpers and request context
"""

import pytest

from carhub.logging import (
    add_request_context,
    clear_request_context,
    generate_request_id,
    get_request_id,
    service_ctx,
    set_request_context,
)
from carhub.middleware import operation_name_from_document, sanitize_query_params


@pytest.mark.unit
class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        params = {"api_key": "abc", "Authorization": "Bearer x", "limit": "3"}

        assert sanitize_query_params(params) == {
            "api_key": "[REDACTED]",
            "Authorization": "[REDACTED]",
            "limit": "3",
        }

    def test_empty(self):
        assert sanitize_query_params({}) == {}


@pytest.mark.unit
class TestOperationName:
    @pytest.mark.parametrize(
        "document,expected",
        [
            ("query CarByVin { car(vin: \"1\") { vin } }", "CarByVin"),
            ("{ ping }", "unnamed_operation"),
            ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
            ("query($r: [_Any!]!) { _entities(representations: $r) { __typename } }", "_entities"),
            ("", None),
            (None, None),
        ],
    )
    def test_operation_name(self, document, expected):
        assert operation_name_from_document(document) == expected


@pytest.mark.unit
class TestRequestContext:
    def test_set_and_clear(self):
        request_id = set_request_context(request_id="req-1", service="cars")

        assert request_id == "req-1"
        assert get_request_id() == "req-1"
        assert service_ctx.get() == "cars"

        clear_request_context()

        assert get_request_id() is None
        assert service_ctx.get() is None

    def test_generates_request_id(self):
        request_id = set_request_context()

        assert request_id == get_request_id()
        assert len(request_id) == 14
        clear_request_context()

    def test_generated_ids_differ(self):
        assert generate_request_id() != generate_request_id()

    def test_empty_request_id_is_replaced(self):
        request_id = set_request_context(request_id="")

        assert request_id
        clear_request_context()

    def test_processor_stamps_context(self):
        set_request_context(request_id="req-9", service="reviews")

        event = add_request_context(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "request_id": "req-9", "service": "reviews"}
        clear_request_context()

    def test_processor_without_context(self):
        assert add_request_context(None, "info", {"event": "hello"}) == {"event": "hello"}
