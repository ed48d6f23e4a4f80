"""Tests for entity naming helpers."""
from app.generators.entity_gen.types import DataType, RelationshipType, TemplateVariant
from app.generators.entity_gen.utils import (
    entity_to_class_name,
    entity_to_file_name,
    entity_to_table_name,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)


def test_pascal_case_splits_on_separators():
    assert to_pascal_case("user profile") == "UserProfile"
    assert to_pascal_case("user_profile") == "UserProfile"
    assert to_pascal_case("--user--profile--") == "UserProfile"
    assert to_pascal_case("ORDER-ITEM") == "OrderItem"


def test_pascal_case_keeps_camel_humps():
    assert to_pascal_case("userProfile") == "UserProfile"
    assert to_pascal_case("UserProfile") == "UserProfile"


def test_pascal_case_lowercases_segment_remainder():
    assert to_pascal_case("USER") == "User"
    assert to_pascal_case("HTTPServer") == "Httpserver"


def test_empty_names():
    assert to_pascal_case("") == ""
    assert to_camel_case("") == ""
    assert to_pascal_case("___") == ""


def test_camel_case():
    assert to_camel_case("order item") == "orderItem"
    assert to_camel_case("User") == "user"


def test_table_name():
    assert entity_to_table_name("userProfile") == "userProfiles"
    assert entity_to_table_name("category") == "categorys"
    assert entity_to_table_name("userProfile", "profiles") == "profiles"


def test_class_and_file_names():
    assert entity_to_class_name("order item") == "OrderItem"
    assert to_kebab_case("OrderItem") == "order-item"
    assert entity_to_file_name("order item") == "order-item.entity.ts"


def test_enum_parsing_is_lenient():
    assert DataType("Date") is DataType.DATE
    assert DataType("UUID") is DataType.UUID
    assert RelationshipType("one-to-many") is RelationshipType.ONE_TO_MANY
    assert RelationshipType("many_to_one") is RelationshipType.MANY_TO_ONE
    assert RelationshipType("ManyToMany") is RelationshipType.MANY_TO_MANY
    assert TemplateVariant("PlainClass") is TemplateVariant.PLAIN_CLASS
    assert TemplateVariant("NestJS") is TemplateVariant.PLAIN_CLASS
