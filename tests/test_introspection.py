"""Tests for the dataclass and SQLAlchemy schema introspectors."""

import pytest

from semantic_formgen.exceptions import SchemaIntrospectionUnavailable
from semantic_formgen.introspection import (
    DataclassIntrospector,
    SqlAlchemyIntrospector,
    UnavailableIntrospector,
    introspector_for,
)
from semantic_formgen.protocols import (
    AssociationKind,
    ColumnType,
    register_schema_introspector,
    unregister_schema_introspector,
)


def test_introspector_selection(article, post):
    assert isinstance(introspector_for(article), DataclassIntrospector)
    assert isinstance(introspector_for(post), SqlAlchemyIntrospector)
    assert isinstance(introspector_for(object()), UnavailableIntrospector)
    assert isinstance(introspector_for(None), UnavailableIntrospector)


def test_registered_introspector_takes_precedence(article):
    class Custom(DataclassIntrospector):
        pass

    custom = Custom()
    register_schema_introspector(custom)
    try:
        assert introspector_for(article) is custom
    finally:
        unregister_schema_introspector(custom)
    assert introspector_for(article) is not custom


def test_dataclass_columns_and_associations(article, settings):
    introspector = DataclassIntrospector()
    assert introspector.column_type(article, "title") is ColumnType.STRING
    assert introspector.column_type(article, "body") is ColumnType.TEXT
    assert introspector.column_type(article, "author") is None
    assert introspector.association_kind(article, "author") is AssociationKind.BELONGS_TO
    assert introspector.association_kind(settings, "labels") is AssociationKind.HAS_MANY
    assert introspector.associations(article) == ["author"]
    assert introspector.associations(settings, [AssociationKind.BELONGS_TO]) == []
    assert introspector.content_columns(article) == ["title", "body", "created_at"]


def test_dataclass_unknown_field_is_unavailable(article):
    with pytest.raises(SchemaIntrospectionUnavailable):
        DataclassIntrospector().column_type(article, "nope")


def test_dataclass_required_metadata():
    from dataclasses import dataclass, field

    @dataclass
    class Signup:
        nickname: str = field(default="", metadata={"required": True})

    assert DataclassIntrospector().is_required(Signup(), "nickname") is True


def test_errors_are_read_from_errors_attribute(article):
    introspector = DataclassIntrospector()
    assert introspector.errors_on(article, "title") == []
    article.errors = {"title": "is required"}
    assert introspector.errors_on(article, "title") == ["is required"]


def test_sqlalchemy_columns_and_relationships(post):
    introspector = SqlAlchemyIntrospector()
    assert introspector.column_type(post, "title") is ColumnType.STRING
    assert introspector.column_type(post, "body") is ColumnType.TEXT
    assert introspector.column_type(post, "price") is ColumnType.DECIMAL
    assert introspector.column_type(post, "author") is None
    assert introspector.association_kind(post, "author") is AssociationKind.BELONGS_TO
    assert introspector.association_kind(post, "tags") is AssociationKind.HAS_AND_BELONGS_TO_MANY
    assert introspector.association_kind(post.author, "posts") is AssociationKind.HAS_MANY
    assert set(introspector.associations(post)) == {"author", "tags"}
    assert introspector.associations(post, [AssociationKind.BELONGS_TO]) == ["author"]
    columns = introspector.content_columns(post)
    assert "id" not in columns
    assert "author_id" not in columns
    assert set(columns) == {"title", "body", "published", "price", "created_at"}


def test_sqlalchemy_unknown_attribute_is_unavailable(post):
    with pytest.raises(SchemaIntrospectionUnavailable):
        SqlAlchemyIntrospector().column_type(post, "nope")


def test_unavailable_introspector_raises():
    introspector = UnavailableIntrospector()
    with pytest.raises(SchemaIntrospectionUnavailable):
        introspector.content_columns(object())
    with pytest.raises(SchemaIntrospectionUnavailable):
        introspector.associations(object())
