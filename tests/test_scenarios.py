"""End-to-end exchange scenarios: gateway -> provider -> gateway."""

from __future__ import annotations

from exchange_envelope import (
    Event,
    EventSerializer,
    Status,
    TransitionValidator,
)


def test_request_reply_over_the_wire(serializer: EventSerializer) -> None:
    request = Event.new("org1", "svc", "GET_ALL_EMPLOYEES", "tokenA")
    assert request.status is Status.NEW
    assert request.corr_id
    assert request.time > 0
    assert request.data == ()

    # Provider side.
    received = serializer.deserialize(serializer.serialize(request))
    reply = received.with_status(Status.SUCCESS).append_data({"name": "Ola"})

    # Gateway side.
    returned = serializer.deserialize(serializer.serialize(reply))
    assert returned == reply
    assert returned.corr_id == request.corr_id
    assert returned.data == ({"name": "Ola"},)
    assert TransitionValidator().validate(request, returned) is returned


def test_provider_failure_travels_as_data(serializer: EventSerializer) -> None:
    request = Event.new("org1", "svc", "UPDATE_EMPLOYEE", "tokenA").append_data(
        {"name": "Ola"}
    )
    reply = request.with_status(Status.IN_PROGRESS).fail("adapter unavailable")
    returned = serializer.deserialize(serializer.serialize(reply))
    assert returned.status is Status.ERROR
    assert returned.status.is_failure
    assert returned.message == "adapter unavailable"


def test_health_probe() -> None:
    assert Event.new("org1", "svc", "HEALTH", "tokenA").is_health_check
    assert not Event.new("org1", "svc", "GET_ALL_EMPLOYEES", "tokenA").is_health_check
