"""Tests for selector classification."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from helpdesk_client.exceptions import HelpdeskClientError, InvalidSelectorError
from helpdesk_client.selectors import (
    AllSelector,
    IdSelector,
    QuerySelector,
    parse_selector,
)


class TestParseSelector:
    """Tests for parse_selector."""

    def test_none_is_all(self):
        assert isinstance(parse_selector(None), AllSelector)

    def test_int_is_id(self):
        assert parse_selector(42) == IdSelector(id=42)

    def test_str_is_query(self):
        assert parse_selector("Bob") == QuerySelector(text="Bob")

    def test_bool_rejected(self):
        with pytest.raises(InvalidSelectorError) as exc_info:
            parse_selector(False)
        assert exc_info.value.selector is False
        assert exc_info.value.details == {"selector_type": "bool"}

    def test_error_is_client_error(self):
        with pytest.raises(HelpdeskClientError, match="float"):
            parse_selector(3.14)


class TestSelectorApply:
    """Tests for how selectors write the request configuration."""

    def test_all(self):
        query = {"role": "agent"}
        AllSelector().apply("users", query)
        assert query == {"role": "agent", "path": "users"}

    def test_id(self):
        query = {}
        IdSelector(id=7).apply("users", query)
        assert query == {"path": "users/7"}

    def test_query(self):
        query = {}
        QuerySelector(text="Bob").apply("users", query)
        assert query == {"path": "users", "query": "Bob"}

    def test_selectors_are_frozen(self):
        selector = IdSelector(id=1)
        with pytest.raises(PydanticValidationError):
            selector.id = 2
