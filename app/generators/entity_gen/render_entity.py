"""Entity class rendering for TypeORM-style TypeScript sources."""
from typing import Dict, List

from app.generators.entity_gen.types import (
    DataType,
    Entity,
    EntityProperty,
    Relationship,
    RelationshipType,
    TemplateVariant,
)
from app.generators.entity_gen.utils import (
    entity_to_class_name,
    entity_to_table_name,
    to_camel_case,
)


INDENT = "  "

BASE_DECORATORS = ["Entity", "Column", "PrimaryGeneratedColumn", "CreateDateColumn", "UpdateDateColumn"]

# Same names as BASE_DECORATORS, alphabetical, from the NestJS wrapper package
PLAIN_CLASS_IMPORT = (
    "import { Column, CreateDateColumn, Entity, PrimaryGeneratedColumn, UpdateDateColumn } "
    "from '@nestjs/typeorm';"
)

COLUMN_TYPES: Dict[DataType, str] = {
    DataType.STRING: "varchar",
    DataType.NUMBER: "int",
    DataType.BOOLEAN: "boolean",
    DataType.DATE: "timestamp",
    DataType.OBJECT: "json",
    DataType.ARRAY: "json",
    DataType.UUID: "uuid",
    DataType.ENUM: "enum",
}

TYPESCRIPT_TYPES: Dict[DataType, str] = {
    DataType.STRING: "string",
    DataType.NUMBER: "number",
    DataType.BOOLEAN: "boolean",
    DataType.DATE: "Date",
    DataType.OBJECT: "Record<string, any>",
    DataType.ARRAY: "any[]",
    DataType.UUID: "string",
    DataType.ENUM: "string",
}

# to-many sides are typed as arrays and never widened with null
COLLECTION_RELATIONSHIPS = {RelationshipType.ONE_TO_MANY, RelationshipType.MANY_TO_MANY}


def _map_column_type(data_type: DataType) -> str:
    return COLUMN_TYPES[data_type]


def _map_typescript_type(data_type: DataType, is_optional: bool) -> str:
    """Map a data type to its TypeScript annotation, widened with null when optional."""
    ts_type = TYPESCRIPT_TYPES[data_type]
    return f"{ts_type} | null" if is_optional else ts_type


def _render_default(prop: EntityProperty) -> str:
    value = prop.default_value
    if prop.type == DataType.STRING:
        return f"'{value}'"
    if prop.type == DataType.BOOLEAN:
        return value.lower()
    return value


def render_property_decorator(prop: EntityProperty) -> str:
    """Render the column decorator for a scalar property."""
    if prop.is_primary_key:
        return "@PrimaryGeneratedColumn()"

    options: List[str] = []
    if prop.type == DataType.STRING and prop.length:
        options.append(f"length: {prop.length}")
    if prop.is_unique:
        options.append("unique: true")
    if prop.is_nullable:
        options.append("nullable: true")
    if prop.default_value and prop.default_value.strip():
        options.append(f"default: {_render_default(prop)}")

    column_type = _map_column_type(prop.type)
    if options:
        return f"@Column({{ type: '{column_type}', {', '.join(options)} }})"
    return f"@Column('{column_type}')"


def render_property_field(prop: EntityProperty) -> str:
    marker = "?" if prop.is_optional else ""
    return f"{prop.name}{marker}: {_map_typescript_type(prop.type, prop.is_optional)};"


def render_relationship_decorator(rel: Relationship) -> str:
    """Render the relationship decorator, e.g. ``@ManyToOne((type) => User, { nullable: true })``."""
    target = rel.target_entity
    if rel.inverse_side:
        alias = to_camel_case(target)
        args = [f"(type) => {target}, ({alias}) => {alias}.{rel.inverse_side}"]
    else:
        args = [f"(type) => {target}"]
    if rel.is_optional:
        args.append("{ nullable: true }")
    return f"@{RelationshipType(rel.type).value}({', '.join(args)})"


def render_relationship_field(rel: Relationship) -> str:
    marker = "?" if rel.is_optional else ""
    if rel.type in COLLECTION_RELATIONSHIPS:
        ts_type = f"{rel.target_entity}[]"
    elif rel.is_optional:
        ts_type = f"{rel.target_entity} | null"
    else:
        ts_type = rel.target_entity
    return f"{rel.name}{marker}: {ts_type};"


def relationship_decorator_names(relationships: List[Relationship]) -> List[str]:
    """Distinct relationship decorator names in order of first use."""
    names: List[str] = []
    for rel in relationships:
        if RelationshipType(rel.type).value not in names:
            names.append(RelationshipType(rel.type).value)
    return names


def render_imports(entity: Entity, variant: TemplateVariant) -> str:
    if variant == TemplateVariant.PLAIN_CLASS:
        return PLAIN_CLASS_IMPORT
    names = BASE_DECORATORS + relationship_decorator_names(entity.relationships)
    return f"import {{ {', '.join(names)} }} from 'typeorm';"


def generate(entity: Entity, variant: TemplateVariant = TemplateVariant.ORM) -> str:
    """
    Render the full entity class source.

    Args:
        entity: Entity description
        variant: ORM emits relationships and imports from 'typeorm';
            PlainClass imports the base decorators only and omits relationships

    Returns:
        TypeScript source text ending with a newline
    """
    variant = TemplateVariant(variant)
    class_name = entity_to_class_name(entity.name)
    table_name = entity_to_table_name(entity.name, entity.table_name)

    lines = [
        render_imports(entity, variant),
        "",
        f"@Entity('{table_name}')",
        f"export class {class_name} {{",
    ]

    for prop in entity.properties:
        lines.append(INDENT + render_property_decorator(prop))
        lines.append(INDENT + render_property_field(prop))
        lines.append("")

    if variant == TemplateVariant.ORM:
        for rel in entity.relationships:
            lines.append(INDENT + render_relationship_decorator(rel))
            lines.append(INDENT + render_relationship_field(rel))
            lines.append("")

    if entity.include_timestamps:
        lines.append(INDENT + "@CreateDateColumn()")
        lines.append(INDENT + "createdAt: Date;")
        lines.append("")
        lines.append(INDENT + "@UpdateDateColumn()")
        lines.append(INDENT + "updatedAt: Date;")

    lines.append("}")
    return "\n".join(lines) + "\n"
