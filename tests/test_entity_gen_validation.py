"""Tests for the checks applied before generation."""
import pytest
from app.generators.entity_gen.types import DataType, Entity, EntityProperty, Relationship, RelationshipType
from app.generators.entity_gen.validation import (
    EntityValidationError,
    ensure_valid,
    is_valid_entity_name,
    is_valid_property_name,
    is_valid_relationship_name,
    validate_entity,
)


def _entity(**kwargs):
    defaults = dict(
        name="Post",
        properties=[EntityProperty(id="1", name="id", type=DataType.UUID, is_primary_key=True)],
        relationships=[Relationship(id="2", name="author", type=RelationshipType.MANY_TO_ONE, target_entity="User")],
    )
    defaults.update(kwargs)
    return Entity(**defaults)


def test_name_patterns():
    assert is_valid_entity_name("Post")
    assert is_valid_entity_name("post2")
    assert not is_valid_entity_name("2post")
    assert not is_valid_entity_name("blog post")
    assert not is_valid_entity_name("")

    assert is_valid_property_name("createdBy")
    assert not is_valid_property_name("CreatedBy")
    assert not is_valid_property_name("created_by")
    assert is_valid_relationship_name("author")
    assert not is_valid_relationship_name("Author")


def test_valid_entity_has_no_issues():
    assert validate_entity(_entity()) == []
    ensure_valid(_entity())


def test_entity_name_messages():
    issues = validate_entity(_entity(name=""))
    assert [(i.field, i.message) for i in issues] == [("name", "Entity name is required")]

    issues = validate_entity(_entity(name="blog post"))
    assert issues[0].message == "Entity name must start with a letter and contain only letters and numbers"


def test_property_and_relationship_messages():
    entity = _entity(
        properties=[
            EntityProperty(id="1", name=""),
            EntityProperty(id="2", name="Title"),
        ],
        relationships=[Relationship(id="3", name="Author", target_entity=" ")],
    )
    messages = [(i.field, i.message) for i in validate_entity(entity)]
    assert messages == [
        ("properties[0].name", "Property name is required"),
        ("properties[1].name",
         "Property name must start with a lowercase letter and contain only letters and numbers"),
        ("relationships[0].name",
         "Relationship name must start with a lowercase letter and contain only letters and numbers"),
        ("relationships[0].target_entity", "Target entity is required"),
    ]


def test_duplicate_primary_keys_are_reported():
    entity = _entity(properties=[
        EntityProperty(id="1", name="id", is_primary_key=True),
        EntityProperty(id="2", name="code", is_primary_key=True),
    ])
    issues = validate_entity(entity)
    assert len(issues) == 1
    assert issues[0].field == "properties[1].is_primary_key"
    assert issues[0].message == "Only one property can be the primary key"


def test_ensure_valid_raises_with_issues():
    with pytest.raises(EntityValidationError) as exc_info:
        ensure_valid(_entity(name=""))
    assert exc_info.value.issues[0].message == "Entity name is required"
    assert isinstance(exc_info.value, ValueError)
