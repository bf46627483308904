"""Unit tests for schema augmentation."""

import pytest

from dgql.core import (
    FieldDefinition,
    NameCollisionError,
    Schema,
    SchemaAugmentationError,
    TypeDefinition,
    TypeKind,
    TypeOrigin,
    TypeRef,
    UndefinedTypeReferenceError,
    augment_schema,
    check_augmentation,
    ensure_scalars,
    generate_complete_schema,
    source_object_types,
)


def _object(name, *fields):
    return TypeDefinition(kind=TypeKind.OBJECT, name=name, fields=list(fields))


@pytest.fixture
def schema():
    """Schema with two related object types and an enum."""
    author = _object(
        "Author",
        FieldDefinition("id", TypeRef.named("ID", non_null=True)),
        FieldDefinition("name", TypeRef.named("String", non_null=True)),
        FieldDefinition("posts", TypeRef.list_of(TypeRef.named("Post"))),
    )
    post = _object(
        "Post",
        FieldDefinition("id", TypeRef.named("ID", non_null=True)),
        FieldDefinition("title", TypeRef.named("String")),
        FieldDefinition("author", TypeRef.named("Author", non_null=True)),
        FieldDefinition("status", TypeRef.named("Status")),
    )
    status = TypeDefinition(
        kind=TypeKind.ENUM, name="Status", enum_values=["DRAFT", "PUBLISHED"]
    )
    schema = Schema(types={"Author": author, "Post": post, "Status": status})
    ensure_scalars(schema)
    return schema


class TestAugmentSchema:
    """Test the full augmentation pass."""

    def test_every_object_gets_seven_companions(self, schema):
        augment_schema(schema)

        for name in ("Author", "Post"):
            for derived in (
                f"{name}Input",
                f"{name}Ref",
                f"{name}Update",
                f"{name}Filter",
                f"Add{name}Payload",
                f"Update{name}Payload",
                f"Delete{name}Payload",
            ):
                assert derived in schema.types

    def test_non_object_types_get_no_companions(self, schema):
        augment_schema(schema)

        assert "StatusInput" not in schema.types
        assert "StringRef" not in schema.types

    def test_derived_types_are_not_treated_as_sources(self, schema):
        augment_schema(schema)

        assert "AddAuthorPayloadInput" not in schema.types
        assert len(schema.types) == 3 + 6 + 2 * 7

    def test_root_fields(self, schema):
        augment_schema(schema)

        assert [f.name for f in schema.query.fields] == [
            "getAuthor",
            "queryAuthor",
            "getPost",
            "queryPost",
        ]
        assert [f.name for f in schema.mutation.fields] == [
            "addAuthor",
            "updateAuthor",
            "deleteAuthor",
            "addPost",
            "updatePost",
            "deletePost",
        ]

    def test_cross_references_use_ref_types(self, schema):
        augment_schema(schema)

        post_input = schema.types["PostInput"]
        assert str(post_input.get_field("author").type) == "AuthorRef!"
        assert str(post_input.get_field("status").type) == "Status"
        assert str(schema.types["AuthorInput"].get_field("posts").type) == "[PostRef]"
        assert str(schema.types["PostUpdate"].get_field("author").type) == "AuthorRef"

    def test_user_types_are_untouched(self, schema):
        post = schema.types["Post"]

        augment_schema(schema)

        assert schema.types["Post"] is post
        assert str(post.get_field("author").type) == "Author!"
        assert post.field_names == ["id", "title", "author", "status"]

    def test_existing_roots_are_replaced(self, schema):
        schema.query = _object("Query", FieldDefinition("old", TypeRef.named("Int")))

        augment_schema(schema)

        assert "old" not in schema.query.field_names
        assert schema.query.origin == TypeOrigin.QUERY
        assert schema.mutation.origin == TypeOrigin.MUTATION

    def test_declaration_order_does_not_change_structure(self, schema):
        reordered = Schema(types=dict(reversed(list(schema.types.items()))))

        augment_schema(schema)
        augment_schema(reordered)

        assert set(schema.types) == set(reordered.types)
        for name, defn in schema.types.items():
            assert reordered.types[name].field_names == defn.field_names
        assert {f.name for f in schema.query.fields} == {
            f.name for f in reordered.query.fields
        }

    def test_introspection_types_are_skipped(self, schema):
        schema.types["__Schema"] = _object(
            "__Schema", FieldDefinition("types", TypeRef.named("String"))
        )

        augment_schema(schema)

        assert "__SchemaInput" not in schema.types
        assert [s.name for s in source_object_types(schema)] == ["Author", "Post"]

    def test_generate_complete_schema_alias(self):
        assert generate_complete_schema is augment_schema

    def test_empty_schema_gets_empty_roots(self):
        schema = Schema()

        augment_schema(schema)

        assert schema.types == {}
        assert schema.query.fields == []
        assert schema.mutation.fields == []


class TestAugmentationErrors:
    """Test that structural problems abort augmentation atomically."""

    def test_undefined_reference_aborts(self, schema):
        schema.types["Post"].fields.append(
            FieldDefinition("tags", TypeRef.named("Tag"))
        )
        before = dict(schema.types)

        with pytest.raises(SchemaAugmentationError) as exc_info:
            augment_schema(schema)

        errors = exc_info.value.errors
        assert len(errors) == 1
        assert isinstance(errors[0], UndefinedTypeReferenceError)
        assert errors[0].referenced_type == "Tag"
        assert schema.types == before
        assert schema.query is None
        assert schema.mutation is None

    def test_name_collision_aborts(self, schema):
        schema.types["PostPayload"] = _object("PostPayload")
        schema.types["AuthorRef"] = TypeDefinition(
            kind=TypeKind.INPUT_OBJECT, name="AuthorRef"
        )

        with pytest.raises(SchemaAugmentationError) as exc_info:
            augment_schema(schema)

        collisions = [
            e for e in exc_info.value.errors if isinstance(e, NameCollisionError)
        ]
        assert [(e.name, e.source_type) for e in collisions] == [
            ("AuthorRef", "Author")
        ]
        assert "AuthorInput" not in schema.types
        assert schema.types["AuthorRef"].kind == TypeKind.INPUT_OBJECT

    def test_all_errors_reported_together(self, schema):
        schema.types["Post"].fields.append(FieldDefinition("a", TypeRef.named("X")))
        schema.types["Author"].fields.append(FieldDefinition("b", TypeRef.named("Y")))
        schema.types["AuthorFilter"] = TypeDefinition(
            kind=TypeKind.INPUT_OBJECT, name="AuthorFilter"
        )

        errors = check_augmentation(schema)

        assert len(errors) == 3
        with pytest.raises(SchemaAugmentationError) as exc_info:
            augment_schema(schema)
        assert len(exc_info.value.errors) == 3
        assert "3 error(s)" in str(exc_info.value)

    def test_check_augmentation_clean_schema(self, schema):
        assert check_augmentation(schema) == []
