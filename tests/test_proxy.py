from types import SimpleNamespace

import pytest

from halpresenter.domain import LetSpec
from halpresenter.proxy import LetsProxy, attribute_reader, read_attribute


@pytest.fixture
def counter():
    return []


@pytest.fixture
def lets(counter):
    def full_name(person, context):
        counter.append("full_name")
        return f"{person.first_name} {person.last_name}"

    return {
        "full_name": LetSpec(full_name),
        "greeting": LetSpec(lambda person, context: f"{context.salutation} {person.full_name}"),
    }


@pytest.fixture
def proxy(lets):
    resource = SimpleNamespace(first_name="John", last_name="Doe")
    return LetsProxy(resource, SimpleNamespace(salutation="Hello"), lets)


def test_resolves_lets(proxy):
    assert proxy.full_name == "John Doe"
    assert proxy.resolve("full_name") == "John Doe"
    assert proxy["full_name"] == "John Doe"


def test_memoizes_lets(proxy, counter):
    proxy.full_name
    proxy.greeting
    proxy.resolve("full_name")

    assert counter == ["full_name"]


def test_lets_can_use_other_lets_and_the_context(proxy):
    assert proxy.greeting == "Hello John Doe"


def test_forwards_other_attributes_to_the_resource(proxy):
    assert proxy.first_name == "John"
    assert proxy.resolve("last_name") == "Doe"


def test_unknown_attributes_raise_the_resource_error(proxy):
    with pytest.raises(AttributeError):
        proxy.middle_name


def test_forwards_item_access_to_mapping_resources(lets):
    proxy = LetsProxy({"first_name": "John", "last_name": "Doe"}, None, {})

    assert proxy["first_name"] == "John"
    with pytest.raises(KeyError):
        proxy["middle_name"]


def test_separate_proxies_do_not_share_memoized_values(lets, counter):
    resource = SimpleNamespace(first_name="John", last_name="Doe")

    LetsProxy(resource, None, lets).full_name
    LetsProxy(resource, None, lets).full_name

    assert counter == ["full_name", "full_name"]


def test_bound_context_is_used_by_lets(lets):
    proxy = LetsProxy(SimpleNamespace(first_name="John", last_name="Doe", salutation="Hey"), None, lets)
    proxy.bind_context(proxy)

    assert proxy.greeting == "Hey John Doe"


def test_read_attribute_handles_objects_mappings_and_proxies(proxy):
    assert read_attribute(SimpleNamespace(name="Stephen"), "name") == "Stephen"
    assert read_attribute({"name": "Stephen"}, "name") == "Stephen"
    assert read_attribute(proxy, "full_name") == "John Doe"


def test_attribute_reader_ignores_the_context():
    read_name = attribute_reader("name")

    assert read_name(SimpleNamespace(name="Stephen"), object()) == "Stephen"


class Ledger:
    def __init__(self, owner, entries):
        self.owner = owner
        self.entries = entries

    def __str__(self):
        return f"{self.owner}'s ledger"

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __eq__(self, other):
        return isinstance(other, Ledger) and other.entries == self.entries

    def __hash__(self):
        return hash(tuple(self.entries))


@pytest.fixture
def ledger():
    return Ledger("Stephen", [10, 20])


@pytest.fixture
def ledger_proxy(ledger):
    return LetsProxy(ledger, None, {"total": LetSpec(lambda ledger, context: sum(ledger))})


def test_special_methods_reach_the_resource(ledger, ledger_proxy):
    assert len(ledger_proxy) == 2
    assert str(ledger_proxy) == "Stephen's ledger"
    assert f"{ledger_proxy}" == "Stephen's ledger"
    assert repr(ledger_proxy) == repr(ledger)
    assert list(ledger_proxy) == [10, 20]
    assert 20 in ledger_proxy
    assert bool(ledger_proxy)
    assert ledger_proxy == ledger
    assert not (ledger_proxy != ledger)
    assert hash(ledger_proxy) == hash(ledger)
    assert ledger_proxy.total == 30


def test_type_checks_and_instance_dict_reach_the_resource(ledger, ledger_proxy):
    assert isinstance(ledger_proxy, Ledger)
    assert isinstance(ledger_proxy, LetsProxy)
    assert ledger_proxy.__dict__ == {"owner": "Stephen", "entries": [10, 20]}
    assert vars(ledger_proxy) == vars(ledger)


def test_falsy_resources_stay_falsy():
    proxy = LetsProxy(Ledger("Stephen", []), None, {})

    assert not proxy
    assert len(proxy) == 0
