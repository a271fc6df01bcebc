import json
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from types import SimpleNamespace
from uuid import UUID

from halpresenter import Presenter, PresenterRegistry, Property
from halpresenter.encoding import jsonable, to_json


class Status(Enum):
    DONE = "done"


def test_jsonable_converts_rich_values():
    document = {
        "created_at": datetime(2013, 10, 14, 7, 0, tzinfo=timezone.utc),
        "due": date(2013, 10, 15),
        "price": Decimal("1.50"),
        "id": UUID("12345678-1234-5678-1234-567812345678"),
        "status": Status.DONE,
        "tags": ("a", "b"),
        1: None,
    }

    assert jsonable(document) == {
        "created_at": "2013-10-14T07:00:00+00:00",
        "due": "2013-10-15",
        "price": "1.50",
        "id": "12345678-1234-5678-1234-567812345678",
        "status": "done",
        "tags": ["a", "b"],
        "1": None,
    }


def test_jsonable_uses_public_instance_attributes():
    assert jsonable(SimpleNamespace(name="Stephen", _secret="x")) == {"name": "Stephen"}


def test_jsonable_presents_presenter_instances():
    class NamePresenter(Presenter, registry=PresenterRegistry()):
        name = Property()

    document = {"user": NamePresenter(SimpleNamespace(name="Stephen"))}

    assert jsonable(document) == {"user": {"name": "Stephen"}}


def test_to_json_is_compact_by_default():
    assert to_json({"name": "Stephen", "todos": [1, 2]}) == '{"name":"Stephen","todos":[1,2]}'


def test_to_json_passes_options_to_json():
    encoded = to_json({"b": 1, "a": 2}, indent=2, sort_keys=True)

    assert encoded == json.dumps({"a": 2, "b": 1}, indent=2)


def test_presenter_as_json():
    class EventPresenter(Presenter, registry=PresenterRegistry()):
        at = Property()

    presenter = EventPresenter(SimpleNamespace(at=date(2013, 10, 14)))

    assert presenter.as_json() == {"at": "2013-10-14"}
    assert presenter.to_json() == '{"at":"2013-10-14"}'
