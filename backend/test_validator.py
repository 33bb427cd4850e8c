"""Tests for the model validator."""

import pytest

from archmodel.model import Model, ModelIntegrityError, Relationship
from archmodel.validation import ValidationSeverity, raise_on_errors, validate_model


@pytest.fixture
def model():
    model = Model()
    user = model.add_person("User")
    system = model.add_software_system("S")
    user.uses(system, "Uses")
    return model


def test_connected_model_is_valid(model):
    result = validate_model(model)
    assert result.is_valid
    assert result.error_count == 0
    assert result.stats["people"] == 1
    assert result.stats["relationships"] == 1


def test_rename_collision_is_reported(model):
    system = model.get_software_system_with_name("S")
    a = system.add_container("A")
    b = system.add_container("B")
    a.uses(b, "Calls")
    b.name = "A"

    result = validate_model(model)
    codes = {i.code: i.severity for i in result.issues}

    assert codes["DUPLICATE_CHILD_NAME"] == ValidationSeverity.ERROR
    assert codes["CANONICAL_NAME_COLLISION"] == ValidationSeverity.WARNING
    assert not result.is_valid
    with pytest.raises(ModelIntegrityError):
        raise_on_errors(model)


def test_unconnected_elements_are_info_only(model):
    model.add_software_system("Lonely")
    result = validate_model(model, strict=True)
    assert result.is_valid
    assert result.info_count == 1


def test_dangling_relationship_is_an_error(model):
    system = model.get_software_system_with_name("S")
    bogus = Relationship(model, "999", system.id, "missing", "Broken")
    model._relationships[bogus.id] = bogus
    system._relationships[bogus.id] = bogus

    result = validate_model(model)
    assert not result.is_valid
    assert result.error_count == 1
    assert result.to_dict()["issues"][0]["code"] == "DANGLING_RELATIONSHIP"
