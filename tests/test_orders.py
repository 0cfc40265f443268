import dataclasses
import json
import uuid

import pytest

from webargus.orders import NotificationRule, Order, create_order


def _sample():
    return create_order(
        "http://example.com/page",
        "online200",
        "hourly",
        "test-phone",
        "Argus",
        "The page is up",
    )


def test_create_order_keeps_fields():
    order = _sample()
    assert order.url == "http://example.com/page"
    assert order.check_type == "online200"
    assert order.period == "hourly"
    assert order.notify == NotificationRule("test-phone", "Argus", "The page is up")


def test_create_order_id_is_random_uuid():
    order = _sample()
    parsed = uuid.UUID(order.id)
    assert str(parsed) == order.id
    assert parsed.version == 4


def test_create_order_ids_are_unique():
    ids = {_sample().id for _ in range(20)}
    assert len(ids) == 20


def test_to_dict_uses_api_field_names():
    order = _sample()
    data = order.to_dict()
    assert set(data) == {"id", "url", "checkType", "notify", "period"}
    assert data["checkType"] == "online200"
    assert data["notify"] == {
        "phone": "test-phone",
        "title": "Argus",
        "message": "The page is up",
    }


def test_to_dict_json_round_trip():
    order = _sample()
    data = json.loads(json.dumps(order.to_dict()))
    rebuilt = Order(
        id=data["id"],
        url=data["url"],
        check_type=data["checkType"],
        notify=NotificationRule(**data["notify"]),
        period=data["period"],
    )
    assert rebuilt == order


def test_order_is_immutable():
    order = _sample()
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.url = "http://example.com/other"  # type: ignore[misc]
    assert order.url == "http://example.com/page"
    assert order.to_dict()["url"] == "http://example.com/page"