from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from uuid import uuid4
from app.generators.entity_gen.types import (
    DataType,
    Entity,
    EntityProperty,
    Relationship,
    RelationshipType,
    TemplateVariant,
)


class _CamelModel(BaseModel):
    # Accept both snake_case and the form's camelCase keys
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyIn(_CamelModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(..., examples=["email"])
    type: DataType = DataType.STRING
    is_optional: bool = False
    is_unique: bool = False
    is_nullable: bool = False
    is_primary_key: bool = False
    default_value: Optional[str] = None
    length: Optional[int] = Field(default=None, ge=1)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        return DataType(value) if isinstance(value, str) else value

    def to_property(self) -> EntityProperty:
        return EntityProperty(
            id=self.id,
            name=self.name,
            type=self.type,
            is_optional=self.is_optional,
            is_unique=self.is_unique,
            is_nullable=self.is_nullable,
            is_primary_key=self.is_primary_key,
            default_value=self.default_value,
            length=self.length,
        )


class RelationshipIn(_CamelModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(..., examples=["author"])
    type: RelationshipType = RelationshipType.ONE_TO_ONE
    target_entity: str = Field("", examples=["User"])
    is_optional: bool = False
    inverse_side: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        return RelationshipType(value) if isinstance(value, str) else value

    def to_relationship(self) -> Relationship:
        return Relationship(
            id=self.id,
            name=self.name,
            type=self.type,
            target_entity=self.target_entity,
            is_optional=self.is_optional,
            inverse_side=self.inverse_side,
        )


class EntityIn(_CamelModel):
    name: str = Field(..., examples=["userProfile"])
    table_name: str = ""
    include_timestamps: bool = True
    properties: List[PropertyIn] = []
    relationships: List[RelationshipIn] = []

    def to_entity(self) -> Entity:
        return Entity(
            name=self.name,
            table_name=self.table_name,
            include_timestamps=self.include_timestamps,
            properties=[p.to_property() for p in self.properties],
            relationships=[r.to_relationship() for r in self.relationships],
        )


class GenerateRequest(_CamelModel):
    entity: EntityIn
    variant: Optional[TemplateVariant] = None  # falls back to settings.default_variant

    @field_validator("variant", mode="before")
    @classmethod
    def _parse_variant(cls, value):
        return TemplateVariant(value) if isinstance(value, str) else value


class GenerateResponse(BaseModel):
    class_name: str
    table_name: str
    file_name: str
    variant: TemplateVariant
    code: str


class IssueOut(BaseModel):
    field: str
    message: str


class ValidateResponse(BaseModel):
    valid: bool
    issues: List[IssueOut] = []


class OptionOut(BaseModel):
    value: str
    label: str
