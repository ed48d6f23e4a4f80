"""Checks an entity must pass before it is handed to the generator.

The generator itself never validates; these are the same rules the entity
form applies, with the same messages.
"""
import re
from dataclasses import dataclass
from typing import List

from app.generators.entity_gen.types import Entity

ENTITY_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
MEMBER_NAME_RE = re.compile(r"^[a-z][A-Za-z0-9]*$")


@dataclass(frozen=True)
class ValidationIssue:
    field: str  # dotted location, e.g. "properties[1].name"
    message: str


class EntityValidationError(ValueError):
    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__("; ".join(f"{i.field}: {i.message}" for i in issues))


def is_valid_entity_name(name: str) -> bool:
    return bool(ENTITY_NAME_RE.match(name or ""))


def is_valid_property_name(name: str) -> bool:
    return bool(MEMBER_NAME_RE.match(name or ""))


def is_valid_relationship_name(name: str) -> bool:
    return bool(MEMBER_NAME_RE.match(name or ""))


def _check_member_name(name: str, kind: str, location: str) -> List[ValidationIssue]:
    if not name:
        return [ValidationIssue(location, f"{kind} name is required")]
    if not MEMBER_NAME_RE.match(name):
        return [ValidationIssue(
            location,
            f"{kind} name must start with a lowercase letter and contain only letters and numbers",
        )]
    return []


def validate_entity(entity: Entity) -> List[ValidationIssue]:
    """Return every problem found, in field order. An empty list means valid."""
    issues: List[ValidationIssue] = []

    if not entity.name:
        issues.append(ValidationIssue("name", "Entity name is required"))
    elif not is_valid_entity_name(entity.name):
        issues.append(ValidationIssue(
            "name", "Entity name must start with a letter and contain only letters and numbers"
        ))

    for i, prop in enumerate(entity.properties):
        issues.extend(_check_member_name(prop.name, "Property", f"properties[{i}].name"))

    primary_keys = [i for i, prop in enumerate(entity.properties) if prop.is_primary_key]
    for i in primary_keys[1:]:
        issues.append(ValidationIssue(
            f"properties[{i}].is_primary_key", "Only one property can be the primary key"
        ))

    for i, rel in enumerate(entity.relationships):
        issues.extend(_check_member_name(rel.name, "Relationship", f"relationships[{i}].name"))
        if not rel.target_entity.strip():
            issues.append(ValidationIssue(
                f"relationships[{i}].target_entity", "Target entity is required"
            ))

    return issues


def ensure_valid(entity: Entity) -> None:
    """Raise EntityValidationError if the entity breaks any rule."""
    issues = validate_entity(entity)
    if issues:
        raise EntityValidationError(issues)
