"""Tests for ErrorList and the nil-safe aggregate operations."""

from __future__ import annotations

import copy
import logging
import pickle

import pytest

from errlist.aggregate import (
    ErrorList,
    add_error,
    add_string,
    check,
    err,
    error_text,
    new_error,
    new_string,
    num,
    to_list,
)
from errlist.types import StringError


def _build(*messages: str) -> ErrorList:
    errs = None
    for message in messages:
        errs = add_string(errs, message)
    assert errs is not None
    return errs


# Construction


def test_new_string_creates_single_element_list():
    errs = new_string("boom")

    assert isinstance(errs, ErrorList)
    assert num(errs) == 1
    assert str(errs) == "boom"
    (only,) = to_list(errs)
    assert isinstance(only, StringError)
    assert only.message == "boom"


def test_new_string_empty_returns_none():
    assert new_string("") is None


def test_new_error_wraps_given_exception():
    exc = ValueError("bad value")
    errs = new_error(exc)

    assert num(errs) == 1
    assert to_list(errs)[0] is exc


def test_new_error_none_returns_none():
    assert new_error(None) is None


def test_new_lists_do_not_share_records():
    first = new_string("a")
    second = new_string("a")
    add_string(first, "b")

    assert num(first) == 2
    assert num(second) == 1


# Appending


@pytest.mark.parametrize("existing", [(), ("a",), ("a", "b", "c")])
@pytest.mark.parametrize("message", ["", "x"])
def test_add_string_count(existing, message):
    """Count grows by one for non-empty text and stays put for empty text."""
    errs = _build(*existing) if existing else None
    before = num(errs)

    errs = add_string(errs, message)

    assert num(errs) == before + (1 if message else 0)


@pytest.mark.parametrize("existing", [(), ("a",), ("a", "b")])
@pytest.mark.parametrize("error", [None, KeyError("k")])
def test_add_error_count(existing, error):
    """Count grows by one for an exception and stays put for None."""
    errs = _build(*existing) if existing else None
    before = num(errs)

    errs = add_error(errs, error)

    assert num(errs) == before + (1 if error is not None else 0)


def test_add_returns_same_handle():
    errs = new_string("a")

    assert add_string(errs, "b") is errs
    assert add_error(errs, OSError("c")) is errs
    assert errs.add_string("d") is errs
    assert errs.add_error(RuntimeError("e")) is errs
    assert num(errs) == 5


def test_noop_appends_keep_identity_and_state():
    errs = _build("a", "b")

    assert add_string(errs, "") is errs
    assert add_error(errs, None) is errs
    assert num(errs) == 2
    assert error_text(errs) == "a\nb"


def test_add_to_none_starts_new_list():
    errs = add_error(None, OSError("missing"))

    assert isinstance(errs, ErrorList)
    assert num(errs) == 1
    assert add_string(None, "x") is not errs


def test_order_preserved():
    failures = [ValueError("1"), StringError("2"), OSError("3"), KeyError("4")]
    errs = None
    for failure in failures:
        errs = add_error(errs, failure)

    listed = to_list(errs)
    for i, failure in enumerate(failures):
        assert listed[i] is failure
    assert list(errs) == failures


# Views on None


def test_views_on_none():
    assert num(None) == 0
    assert error_text(None) == ""
    assert to_list(None) == []
    assert err(None) is None


def test_to_list_on_none_returns_fresh_list():
    first = to_list(None)
    first.append(ValueError("x"))

    assert to_list(None) == []


# Views on a populated list


def test_error_text_joins_with_newlines_without_trailing_separator():
    errs = _build("one", "two", "three")

    assert error_text(errs) == "one\ntwo\nthree"
    assert not error_text(errs).endswith("\n")


def test_error_text_uses_str_of_each_failure():
    errs = add_error(new_string("plain"), KeyError("k"))

    assert error_text(errs) == "plain\n'k'"


def test_to_list_is_independent_copy():
    errs = _build("a", "b")
    listed = to_list(errs)
    listed.clear()

    assert num(errs) == 2
    assert len(to_list(errs)) == 2
    assert to_list(errs) is not to_list(errs)


def test_len_iter_and_repr():
    errs = _build("a", "b")

    assert len(errs) == 2
    assert [str(e) for e in errs] == ["a", "b"]
    assert repr(errs) == "ErrorList([StringError('a'), StringError('b')])"


# Collapse


def test_err_single_returns_unwrapped_failure():
    exc = RuntimeError("only")
    errs = new_error(exc)

    assert err(errs) is exc
    assert errs.err() is exc


def test_err_multiple_returns_list_itself():
    errs = _build("a", "b")

    collapsed = err(errs)

    assert collapsed is errs
    assert isinstance(collapsed, Exception)
    assert str(collapsed) == "a\nb"


def test_error_list_can_be_raised_and_caught():
    errs = _build("a", "b")

    with pytest.raises(ErrorList) as excinfo:
        raise errs

    assert excinfo.value is errs
    assert str(excinfo.value) == "a\nb"


def test_check_raises_collapsed_failure():
    check(None)

    single = new_error(FileNotFoundError("gone"))
    with pytest.raises(FileNotFoundError, match="gone"):
        check(single)

    multi = _build("a", "b")
    with pytest.raises(ErrorList):
        check(multi)


def test_add_list_to_itself_appends_snapshot():
    errs = _build("a", "b")

    assert add_error(errs, errs) is errs

    assert num(errs) == 3
    nested = to_list(errs)[2]
    assert isinstance(nested, ErrorList) and nested is not errs
    assert error_text(errs) == "a\nb\na\nb"


# Pickling and copying


def test_pickle_round_trip_preserves_order_and_text():
    errs = add_error(_build("a", "b"), ValueError("c"))

    restored = pickle.loads(pickle.dumps(errs))

    assert isinstance(restored, ErrorList)
    assert restored is not errs
    assert num(restored) == 3
    assert error_text(restored) == "a\nb\nc"
    assert [type(e) for e in restored] == [StringError, StringError, ValueError]


def test_copy_single_element_list():
    exc = ValueError("x")
    errs = new_error(exc)

    shallow = copy.copy(errs)
    deep = copy.deepcopy(errs)

    assert shallow is not errs and num(shallow) == 1
    assert err(shallow) is exc
    assert err(deep) is not exc
    assert str(deep) == "x"


def test_copy_does_not_share_records():
    errs = _build("a", "b")
    clone = copy.copy(errs)

    add_string(clone, "c")

    assert num(errs) == 2
    assert num(clone) == 3


# Scenarios


def test_scenario_mixed_appends():
    f1 = OSError("f1 failed")
    errs = None
    errs = add_string(errs, "boom")
    errs = add_string(errs, "")
    errs = add_error(errs, f1)

    assert num(errs) == 2
    assert error_text(errs) == "boom\n" + str(f1)
    boom, second = to_list(errs)
    assert isinstance(boom, StringError) and str(boom) == "boom"
    assert second is f1


def test_scenario_only_none_errors_stays_absent():
    errs = None
    for _ in range(5):
        errs = add_error(errs, None)

    assert errs is None
    assert num(errs) == 0
    assert err(errs) is None


def test_scenario_single_text_collapses_to_string_error():
    collapsed = err(new_string("x"))

    assert isinstance(collapsed, StringError)
    assert not isinstance(collapsed, ErrorList)
    assert str(collapsed) == "x"


def test_scenario_nested_list_renders_same_text():
    errs = _build("a", "b", "c")

    wrapper = new_error(err(errs))

    assert num(wrapper) == 1
    assert error_text(wrapper) == "a\nb\nc"
    assert error_text(wrapper) == error_text(errs)


# Logging


def test_noop_append_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="errlist.aggregate")
    errs = new_string("a")

    add_string(errs, "")
    add_error(errs, None)

    messages = [
        r.getMessage() for r in caplog.records if r.name == "errlist.aggregate"
    ]
    assert any("Ignoring empty message" in m for m in messages)
    assert any("Ignoring None error" in m for m in messages)
    assert all(
        r.levelno == logging.DEBUG
        for r in caplog.records
        if r.name == "errlist.aggregate"
    )
