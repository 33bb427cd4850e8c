"""Tests for element identity: canonical names, equality and tags."""

import pytest

from archmodel.model import (
    CANONICAL_NAME_SEPARATOR,
    Model,
    format_for_canonical_name,
    split_canonical_name,
    tags,
)


@pytest.fixture
def model():
    return Model()


def test_canonical_name_follows_parent_chain(model):
    system = model.add_software_system("Shop")
    container = system.add_container("API")
    component = container.add_component("Orders")

    assert model.canonical_name == ""
    assert system.canonical_name == "/Shop"
    assert container.canonical_name == "/Shop/API"
    assert component.canonical_name == (
        container.canonical_name + CANONICAL_NAME_SEPARATOR + "Orders"
    )
    assert model.add_person("Customer").canonical_name == "/Customer"


def test_canonical_name_escapes_separator(model):
    system = model.add_software_system("Front/Back")
    container = system.add_container("100%")

    assert system.canonical_name == "/Front%2FBack"
    assert container.canonical_name == "/Front%2FBack/100%25"
    assert split_canonical_name(container.canonical_name) == ["Front/Back", "100%"]


def test_escaping_keeps_distinct_names_distinct():
    assert format_for_canonical_name("a/b") != format_for_canonical_name("a%2Fb")
    assert format_for_canonical_name("plain") == "plain"


def test_canonical_name_is_not_cached(model):
    system = model.add_software_system("Old")
    container = system.add_container("API")
    system.name = "New"
    assert container.canonical_name == "/New/API"


def test_equality_is_by_canonical_name(model):
    system = model.add_software_system("S")
    a = system.add_container("A")
    b = system.add_container("B")

    assert a != b
    b.name = "A"
    assert a == b
    assert hash(a) == hash(b)
    assert a.id != b.id


def test_elements_are_not_equal_to_other_types(model):
    system = model.add_software_system("S")
    assert system != "/S"
    assert system != None  # noqa: E711


def test_parent_is_resolved_through_model(model):
    system = model.add_software_system("S")
    container = system.add_container("C")

    assert container.parent_id == system.id
    assert container.parent is system
    assert container.software_system is system
    assert system.parent is None


@pytest.mark.parametrize(
    "factory, kind",
    [
        (lambda m: m.add_person("P"), tags.PERSON),
        (lambda m: m.add_software_system("S"), tags.SOFTWARE_SYSTEM),
        (lambda m: m.add_software_system("S").add_container("C"), tags.CONTAINER),
        (lambda m: m.add_software_system("S").add_container("C").add_component("X"), tags.COMPONENT),
    ],
)
def test_required_tags_per_kind(model, factory, kind):
    element = factory(model)
    assert element.required_tags() == [tags.ELEMENT, kind]
    assert element.tags == [tags.ELEMENT, kind]


def test_extra_tags_keep_order_and_skip_duplicates(model):
    container = model.add_software_system("S").add_container("DB")
    container.add_tags("Database", "", None, "Database", "Element", "Legacy")

    assert container.tags == ["Element", "Container", "Database", "Legacy"]
    assert container.has_tag("Legacy")


def test_required_tags_cannot_be_removed(model):
    person = model.add_person("P")
    person.add_tags("Staff")

    assert person.remove_tag("Element") is False
    assert person.remove_tag("Person") is False
    assert person.remove_tag("Staff") is True
    assert person.tags == ["Element", "Person"]


def test_required_tags_returns_a_fresh_list(model):
    person = model.add_person("P")
    person.required_tags().append("Mutated")
    assert person.required_tags() == ["Element", "Person"]


def test_efferent_relationship_helpers(model):
    user = model.add_person("User")
    system = model.add_software_system("S")
    other = model.add_software_system("T")
    r = user.uses(system, "Uses")

    assert user.has_efferent_relationship_with(system)
    assert user.get_efferent_relationship_with(system) is r
    assert not user.has_efferent_relationship_with(other)
    assert user.get_efferent_relationship_with(None) is None
    assert user.remove_all_relationships_with(system.id) == 1
    assert model.relationships == []
