"""Editing operations on entity descriptions.

Every function returns a new value and leaves its inputs untouched. Field edits
are expressed as one small update type per field instead of assigning by key.
"""
import uuid
from dataclasses import dataclass, replace
from typing import Optional, Union

from app.generators.entity_gen.types import (
    DataType,
    Entity,
    EntityProperty,
    Relationship,
    RelationshipType,
)


def new_id() -> str:
    return str(uuid.uuid4())


def create_new_property() -> EntityProperty:
    """Blank string property with a fresh id."""
    return EntityProperty(id=new_id(), name="", type=DataType.STRING)


def create_new_relationship() -> Relationship:
    """Blank one-to-one relationship with a fresh id."""
    return Relationship(id=new_id(), name="", type=RelationshipType.ONE_TO_ONE, target_entity="")


# Property field updates

@dataclass(frozen=True)
class SetName:
    value: str


@dataclass(frozen=True)
class SetType:
    value: DataType


@dataclass(frozen=True)
class SetOptional:
    value: bool


@dataclass(frozen=True)
class SetUnique:
    value: bool


@dataclass(frozen=True)
class SetNullable:
    value: bool


@dataclass(frozen=True)
class SetPrimaryKey:
    value: bool


@dataclass(frozen=True)
class SetDefaultValue:
    value: Optional[str]


@dataclass(frozen=True)
class SetLength:
    value: Optional[int]


PropertyUpdate = Union[
    SetName, SetType, SetOptional, SetUnique, SetNullable, SetPrimaryKey, SetDefaultValue, SetLength
]


# Relationship field updates

@dataclass(frozen=True)
class SetRelationshipName:
    value: str


@dataclass(frozen=True)
class SetRelationshipType:
    value: RelationshipType


@dataclass(frozen=True)
class SetTargetEntity:
    value: str


@dataclass(frozen=True)
class SetRelationshipOptional:
    value: bool


@dataclass(frozen=True)
class SetInverseSide:
    value: Optional[str]


RelationshipUpdate = Union[
    SetRelationshipName, SetRelationshipType, SetTargetEntity, SetRelationshipOptional, SetInverseSide
]


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value if value and value.strip() else None


def apply_property_update(prop: EntityProperty, update: PropertyUpdate) -> EntityProperty:
    if isinstance(update, SetName):
        return replace(prop, name=update.value)
    if isinstance(update, SetType):
        return replace(prop, type=DataType(update.value))
    if isinstance(update, SetOptional):
        return replace(prop, is_optional=update.value)
    if isinstance(update, SetUnique):
        return replace(prop, is_unique=update.value)
    if isinstance(update, SetNullable):
        return replace(prop, is_nullable=update.value)
    if isinstance(update, SetPrimaryKey):
        return replace(prop, is_primary_key=update.value)
    if isinstance(update, SetDefaultValue):
        return replace(prop, default_value=_blank_to_none(update.value))
    if isinstance(update, SetLength):
        return replace(prop, length=update.value)
    raise TypeError(f"Unsupported property update: {update!r}")


def apply_relationship_update(rel: Relationship, update: RelationshipUpdate) -> Relationship:
    if isinstance(update, SetRelationshipName):
        return replace(rel, name=update.value)
    if isinstance(update, SetRelationshipType):
        return replace(rel, type=RelationshipType(update.value))
    if isinstance(update, SetTargetEntity):
        return replace(rel, target_entity=update.value)
    if isinstance(update, SetRelationshipOptional):
        return replace(rel, is_optional=update.value)
    if isinstance(update, SetInverseSide):
        return replace(rel, inverse_side=_blank_to_none(update.value))
    raise TypeError(f"Unsupported relationship update: {update!r}")


def _clear_other_primary_keys(entity: Entity, keep_id: str) -> list:
    return [
        p if p.id == keep_id or not p.is_primary_key else replace(p, is_primary_key=False)
        for p in entity.properties
    ]


def add_property(entity: Entity, prop: EntityProperty) -> Entity:
    """Append a property under a fresh id; a new primary key demotes the old one."""
    added = replace(prop, id=new_id())
    properties = list(entity.properties)
    if added.is_primary_key:
        properties = _clear_other_primary_keys(entity, added.id)
    return replace(entity, properties=properties + [added])


def update_property(entity: Entity, property_id: str, prop: EntityProperty) -> Entity:
    if not any(p.id == property_id for p in entity.properties):
        raise KeyError(property_id)
    properties = [prop if p.id == property_id else p for p in entity.properties]
    entity = replace(entity, properties=properties)
    if prop.is_primary_key:
        entity = replace(entity, properties=_clear_other_primary_keys(entity, prop.id))
    return entity


def edit_property(entity: Entity, property_id: str, update: PropertyUpdate) -> Entity:
    """Apply a single field update to the property with the given id."""
    for p in entity.properties:
        if p.id == property_id:
            return update_property(entity, property_id, apply_property_update(p, update))
    raise KeyError(property_id)


def delete_property(entity: Entity, property_id: str) -> Entity:
    return replace(entity, properties=[p for p in entity.properties if p.id != property_id])


def add_relationship(entity: Entity, rel: Relationship) -> Entity:
    added = replace(rel, id=new_id())
    return replace(entity, relationships=list(entity.relationships) + [added])


def update_relationship(entity: Entity, relationship_id: str, rel: Relationship) -> Entity:
    if not any(r.id == relationship_id for r in entity.relationships):
        raise KeyError(relationship_id)
    return replace(
        entity,
        relationships=[rel if r.id == relationship_id else r for r in entity.relationships],
    )


def edit_relationship(entity: Entity, relationship_id: str, update: RelationshipUpdate) -> Entity:
    for r in entity.relationships:
        if r.id == relationship_id:
            return update_relationship(entity, relationship_id, apply_relationship_update(r, update))
    raise KeyError(relationship_id)


def delete_relationship(entity: Entity, relationship_id: str) -> Entity:
    return replace(entity, relationships=[r for r in entity.relationships if r.id != relationship_id])
