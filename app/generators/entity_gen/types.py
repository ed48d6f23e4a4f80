"""Dataclasses and enums for entity generation."""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


def _normalize(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


class _LenientEnum(str, Enum):
    """String enum that also matches values ignoring case and separators."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = _normalize(value)
            for member in cls:
                if _normalize(member.value) == key or _normalize(member.name) == key:
                    return member
        return None


class DataType(_LenientEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"
    ARRAY = "array"
    UUID = "uuid"
    ENUM = "enum"


class RelationshipType(_LenientEnum):
    """Relationship kinds; each value doubles as the decorator name."""
    ONE_TO_ONE = "OneToOne"
    ONE_TO_MANY = "OneToMany"
    MANY_TO_ONE = "ManyToOne"
    MANY_TO_MANY = "ManyToMany"


class TemplateVariant(_LenientEnum):
    ORM = "ORM"  # decorators and imports from 'typeorm'
    PLAIN_CLASS = "PlainClass"  # base decorators from '@nestjs/typeorm', no relationships

    @classmethod
    def _missing_(cls, value):
        aliases = {
            "nestjstypeorm": cls.ORM,
            "typeorm": cls.ORM,
            "nestjs": cls.PLAIN_CLASS,
            "plain": cls.PLAIN_CLASS,
        }
        if isinstance(value, str) and _normalize(value) in aliases:
            return aliases[_normalize(value)]
        return super()._missing_(value)


@dataclass
class EntityProperty:
    """A scalar column of an entity."""
    id: str
    name: str
    type: DataType = DataType.STRING
    is_optional: bool = False
    is_unique: bool = False
    is_nullable: bool = False
    is_primary_key: bool = False
    default_value: Optional[str] = None  # raw text, emitted as-is
    length: Optional[int] = None  # string columns only


@dataclass
class Relationship:
    """A reference to another entity by class name."""
    id: str
    name: str
    type: RelationshipType = RelationshipType.ONE_TO_ONE
    target_entity: str = ""
    is_optional: bool = False
    inverse_side: Optional[str] = None


@dataclass
class Entity:
    """Entity description consumed by the code generator."""
    name: str
    table_name: str = ""
    include_timestamps: bool = True
    properties: List[EntityProperty] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
