"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_option.kernel.errors import (
    DEFAULT_UNWRAP_MESSAGE,
    BaseError,
    EmptyValueError,
    NotAResultError,
    OptionError,
    ResultError,
    UnwrapError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestEmptyValueError:
    def test_defaults(self) -> None:
        err = EmptyValueError()
        assert err.message == DEFAULT_UNWRAP_MESSAGE
        assert err.code == "empty_value"
        assert err.operation == "unwrap"
        assert err.detail == {"operation": "unwrap"}

    def test_custom_message(self) -> None:
        err = EmptyValueError("config key missing", operation="expect")
        assert err.message == "config key missing"
        assert err.detail["operation"] == "expect"

    def test_caller_detail_not_mutated(self) -> None:
        detail = {"key": "timeout"}
        err = EmptyValueError(detail=detail)
        assert detail == {"key": "timeout"}
        assert err.detail == {"key": "timeout", "operation": "unwrap"}

    def test_hierarchy(self) -> None:
        assert issubclass(EmptyValueError, OptionError)
        assert issubclass(OptionError, BaseError)


class TestNotAResultError:
    def test_message_names_type(self) -> None:
        err = NotAResultError([1])
        assert "list" in err.message
        assert err.value == [1]
        assert err.code == "not_a_result"

    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise NotAResultError(1)


class TestUnwrapError:
    def test_fields(self) -> None:
        err = UnwrapError("m", error="e", operation="unwrap")
        assert err.error == "e"
        assert err.code == "result_unwrap"
        assert err.cause is None
        assert issubclass(UnwrapError, ResultError)

    def test_caller_detail_not_mutated(self) -> None:
        detail = {"attempt": 2}
        err = UnwrapError("m", operation="unwrap_err", detail=detail)
        assert detail == {"attempt": 2}
        assert err.detail == {"attempt": 2, "operation": "unwrap_err"}

    def test_exception_error_becomes_cause(self) -> None:
        original = KeyError("k")
        err = UnwrapError("m", error=original)
        assert err.__cause__ is original
        assert "cause" in err.to_dict()
