"""Tests for PayloadTypeRegistry."""

from __future__ import annotations

from exchange_envelope import PayloadTypeRegistry


class Employee:
    pass


def test_register_and_get() -> None:
    registry = PayloadTypeRegistry()
    registry.register("GET_ALL_EMPLOYEES", Employee)
    assert registry.get("GET_ALL_EMPLOYEES") is Employee
    assert registry.has("GET_ALL_EMPLOYEES")
    assert registry.list_registered() == ["GET_ALL_EMPLOYEES"]


def test_get_unknown_or_none_action() -> None:
    registry = PayloadTypeRegistry()
    assert registry.get("UNKNOWN") is None
    assert registry.get(None) is None
    assert not registry.has("UNKNOWN")


def test_clear() -> None:
    registry = PayloadTypeRegistry()
    registry.register("GET_ALL_EMPLOYEES", Employee)
    registry.clear()
    assert registry.list_registered() == []
