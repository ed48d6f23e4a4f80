"""Display labels for the choices offered when describing an entity."""
from typing import Dict, List

from app.generators.entity_gen.types import DataType, RelationshipType, TemplateVariant

DATA_TYPE_LABELS = [
    (DataType.STRING, "String"),
    (DataType.NUMBER, "Number"),
    (DataType.BOOLEAN, "Boolean"),
    (DataType.DATE, "Date"),
    (DataType.UUID, "UUID"),
    (DataType.OBJECT, "Object"),
    (DataType.ARRAY, "Array"),
    (DataType.ENUM, "Enum"),
]

RELATIONSHIP_TYPE_LABELS = [
    (RelationshipType.ONE_TO_ONE, "One-to-One"),
    (RelationshipType.ONE_TO_MANY, "One-to-Many"),
    (RelationshipType.MANY_TO_ONE, "Many-to-One"),
    (RelationshipType.MANY_TO_MANY, "Many-to-Many"),
]

TEMPLATE_VARIANT_LABELS = [
    (TemplateVariant.ORM, "NestJS + TypeORM"),
    (TemplateVariant.PLAIN_CLASS, "NestJS"),
]


def _as_options(pairs) -> List[Dict[str, str]]:
    return [{"value": member.value, "label": label} for member, label in pairs]


def data_type_options() -> List[Dict[str, str]]:
    return _as_options(DATA_TYPE_LABELS)


def relationship_type_options() -> List[Dict[str, str]]:
    return _as_options(RELATIONSHIP_TYPE_LABELS)


def template_variant_options() -> List[Dict[str, str]]:
    return _as_options(TEMPLATE_VARIANT_LABELS)
