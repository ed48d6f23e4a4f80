"""Naming helpers for entity generation."""
import re
from typing import List


def _split_words(name: str) -> List[str]:
    """Split on runs of non-alphanumeric characters and on camelCase humps, dropping empty segments."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name or "")
    return [word for word in re.split(r"[^a-zA-Z0-9]+", spaced) if word]


def to_pascal_case(name: str) -> str:
    """Convert free-form text to PascalCase (for class names)."""
    return "".join(word[0].upper() + word[1:].lower() for word in _split_words(name))


def to_camel_case(name: str) -> str:
    """Convert free-form text to camelCase (for variable names)."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(name: str) -> str:
    """Convert PascalCase or camelCase to kebab-case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1-\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1-\2', s1)
    return s2.lower()


def entity_to_class_name(entity_name: str) -> str:
    return to_pascal_case(entity_name)


def entity_to_table_name(entity_name: str, table_name: str = "") -> str:
    """Use the explicit table name, else camelCase of the entity name plus 's'."""
    if table_name:
        return table_name
    return to_camel_case(entity_name) + "s"


def entity_to_file_name(entity_name: str) -> str:
    """File name for the generated class, e.g. ``user-profile.entity.ts``."""
    return f"{to_kebab_case(entity_to_class_name(entity_name))}.entity.ts"
