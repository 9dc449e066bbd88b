"""Tests for the request record value objects."""

import dataclasses

import pytest

from reqrecord.ports.request import Header, HttpMethod, InvalidMethod, RequestRecord

__all__ = []


def make_record(**overrides: object) -> RequestRecord:
    fields: dict[str, object] = {
        "id": 1,
        "method": "GET",
        "url": "/items",
        "headers": [],
        "body": "",
    }
    fields.update(overrides)
    return RequestRecord(**fields)  # type: ignore[arg-type]


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
def test_record_accepts_every_supported_method(method: str) -> None:
    """Construction should succeed and keep the method exactly."""
    record = make_record(method=method)

    assert record.method == method
    assert record.method is HttpMethod(method)


@pytest.mark.parametrize("method", ["OPTIONS", "get", "", "HEAD", " GET", None, 1])
def test_record_rejects_unsupported_method(method: object) -> None:
    """Construction should fail with InvalidMethod for anything else."""
    with pytest.raises(InvalidMethod) as exc_info:
        make_record(method=method)

    assert exc_info.value.method == method


def test_invalid_method_is_a_value_error() -> None:
    """InvalidMethod should be catchable as ValueError."""
    with pytest.raises(ValueError, match="HEAD"):
        make_record(method="HEAD")


def test_record_accepts_enum_member() -> None:
    """An HttpMethod member should be stored as is."""
    assert make_record(method=HttpMethod.PATCH).method is HttpMethod.PATCH


def test_parse_returns_member() -> None:
    """HttpMethod.parse should map literals to members."""
    assert HttpMethod.parse("DELETE") is HttpMethod.DELETE
    assert HttpMethod.parse(HttpMethod.PUT) is HttpMethod.PUT


def test_record_equals_itself_and_differs_by_method() -> None:
    """Records compare by all five fields."""
    get = make_record()

    assert get == make_record()
    assert get != make_record(method="POST")
    assert get != make_record(id=2)
    assert get != make_record(url="/other")
    assert get != make_record(body="x")


def test_header_order_matters_for_equality() -> None:
    """Same header pairs in different order should not be equal."""
    a, b = Header("A", "1"), Header("B", "2")

    assert make_record(headers=[a, b]) != make_record(headers=[b, a])


def test_header_equality_is_case_sensitive() -> None:
    """Header keys and values compare exactly."""
    assert Header("Accept", "*/*") == Header("Accept", "*/*")
    assert Header("Accept", "*/*") != Header("accept", "*/*")


def test_duplicate_headers_are_kept() -> None:
    """Duplicate keys should stay as distinct entries in order."""
    record = make_record(headers=[Header("X", "1"), Header("X", "2")])

    assert record.headers == (Header("X", "1"), Header("X", "2"))
    assert record.header_values("X") == ["1", "2"]
    assert record.header_values("x") == []


def test_headers_are_frozen_into_a_tuple() -> None:
    """Mutating the input list should not affect the record."""
    headers = [Header("A", "1")]
    record = make_record(headers=headers)
    headers.append(Header("B", "2"))

    assert record.headers == (Header("A", "1"),)


def test_empty_body_and_headers_are_preserved() -> None:
    """Empty values should not be coerced to None."""
    record = make_record()

    assert record.body == ""
    assert record.headers == ()


def test_get_with_body_is_allowed() -> None:
    """No constraint ties body to method."""
    assert make_record(method="GET", body="payload").body == "payload"


def test_record_is_immutable() -> None:
    """Fields cannot be reassigned."""
    record = make_record()

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.url = "/changed"  # type: ignore[misc]


def test_replace_builds_new_record_and_revalidates() -> None:
    """dataclasses.replace should copy unchanged fields and check the method."""
    record = make_record(headers=[Header("A", "1")])

    changed = dataclasses.replace(record, method="PUT", body="{}")

    assert changed.method is HttpMethod.PUT
    assert changed.headers == record.headers
    assert record.method is HttpMethod.GET
    with pytest.raises(InvalidMethod):
        dataclasses.replace(record, method="TRACE")


def test_records_are_hashable() -> None:
    """Equal records should hash equally."""
    assert len({make_record(), make_record(), make_record(id=2)}) == 2


@pytest.mark.parametrize("headers", ["AB", b"AB"])
def test_record_rejects_string_headers(headers: object) -> None:
    """A string should not be split into characters as headers."""
    with pytest.raises(TypeError, match="sequence of Header"):
        make_record(headers=headers)


@pytest.mark.parametrize("item", [("A", "1"), {"key": "A", "value": "1"}, "A: 1"])
def test_record_rejects_non_header_items(item: object) -> None:
    """Header entries must be Header values, not look-alikes."""
    with pytest.raises(TypeError, match="Header values"):
        make_record(headers=[Header("Accept", "*/*"), item])


def test_record_checks_method_before_headers() -> None:
    """A bad method is reported as InvalidMethod even with bad headers."""
    with pytest.raises(InvalidMethod):
        make_record(method="HEAD", headers="AB")
