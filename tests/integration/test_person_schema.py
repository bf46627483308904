"""End-to-end augmentation of the canonical Person schema.

Loads the schema from YAML, bootstraps scalars, augments, validates and
renders it, checking every derived type and the exact SDL produced.
"""

import pytest

from dgql.core import (
    Schema,
    TypeKind,
    YamlSchemaLoader,
    augment_schema,
    ensure_scalars,
    stringify,
)
from dgql.validation import ValidationError, ValidationRuleRegistry

PERSON_YAML = """
types:
  Person:
    fields:
      id: {type: ID, non_null: true}
      name: {type: String, non_null: true}
      best: Person
"""

EXPECTED_SDL = (
    "type Person {\n"
    "\tid: ID!\n"
    "\tname: String!\n"
    "\tbest: Person\n"
    "}\n"
    "\n"
    "scalar Int\n"
    "scalar Float\n"
    "scalar String\n"
    "scalar Boolean\n"
    "scalar ID\n"
    "scalar DateTime\n"
    "\n"
    "input PersonInput {\n"
    "\tname: String!\n"
    "\tbest: PersonRef\n"
    "}\n"
    "\n"
    "input PersonUpdate {\n"
    "\tname: String\n"
    "\tbest: PersonRef\n"
    "}\n"
    "\n"
    "input PersonRef {\n"
    "\tid: ID!\n"
    "}\n"
    "\n"
    "input PersonFilter {\n"
    "\tdgraph: String\n"
    "}\n"
    "\n"
    "type AddPersonPayload {\n"
    "\tperson: Person!\n"
    "}\n"
    "\n"
    "type UpdatePersonPayload {\n"
    "\tperson: Person!\n"
    "}\n"
    "\n"
    "type DeletePersonPayload {\n"
    "\tmsg: String!\n"
    "}\n"
    "\n"
    "type Query {\n"
    "\tgetPerson(id: ID!): Person!\n"
    "\tqueryPerson(filter: PersonFilter!): [Person!]!\n"
    "}\n"
    "type Mutation {\n"
    "\taddPerson(input: PersonInput!): AddPersonPayload!\n"
    "\tupdatePerson(id: ID!,input: PersonUpdate): UpdatePersonPayload!\n"
    "\tdeletePerson(id: ID!): DeletePersonPayload!\n"
    "}\n"
)


@pytest.fixture
def schema():
    document = YamlSchemaLoader().loads(PERSON_YAML)
    ensure_scalars(document)
    ensure_scalars(document)
    schema = Schema.from_document(document)
    augment_schema(schema)
    return schema


def _fields(schema, type_name):
    return [(f.name, str(f.type)) for f in schema.types[type_name].fields]


def _operations(root):
    return [
        f"{f.name}({', '.join(f'{a.name}: {a.type}' for a in f.arguments)}): {f.type}"
        for f in root.fields
    ]


class TestPersonAugmentation:
    """Check every derived type of the Person schema."""

    def test_scalars_declared_once(self, schema):
        scalars = [d.name for d in schema.types.values() if d.kind == TypeKind.SCALAR]
        assert sorted(scalars) == sorted(
            ["Int", "Float", "String", "Boolean", "ID", "DateTime"]
        )

    def test_input_types(self, schema):
        assert _fields(schema, "PersonInput") == [
            ("name", "String!"),
            ("best", "PersonRef"),
        ]
        assert _fields(schema, "PersonRef") == [("id", "ID!")]
        assert _fields(schema, "PersonUpdate") == [
            ("name", "String"),
            ("best", "PersonRef"),
        ]
        assert _fields(schema, "PersonFilter") == [("dgraph", "String")]

    def test_payload_types(self, schema):
        assert _fields(schema, "AddPersonPayload") == [("person", "Person!")]
        assert _fields(schema, "UpdatePersonPayload") == [("person", "Person!")]
        assert _fields(schema, "DeletePersonPayload") == [("msg", "String!")]

    def test_root_operations(self, schema):
        assert _operations(schema.query) == [
            "getPerson(id: ID!): Person!",
            "queryPerson(filter: PersonFilter!): [Person!]!",
        ]
        assert _operations(schema.mutation) == [
            "addPerson(input: PersonInput!): AddPersonPayload!",
            "updatePerson(id: ID!, input: PersonUpdate): UpdatePersonPayload!",
            "deletePerson(id: ID!): DeletePersonPayload!",
        ]

    def test_source_type_unchanged(self, schema):
        assert _fields(schema, "Person") == [
            ("id", "ID!"),
            ("name", "String!"),
            ("best", "Person"),
        ]

    def test_exact_sdl(self, schema):
        assert stringify(schema) == EXPECTED_SDL

    def test_stringify_is_deterministic(self):
        outputs = set()
        for _ in range(3):
            document = YamlSchemaLoader().loads(PERSON_YAML)
            ensure_scalars(document)
            schema = Schema.from_document(document)
            augment_schema(schema)
            outputs.add(stringify(schema))

        assert len(outputs) == 1

    def test_validation_over_augmented_schema(self, schema):
        rules = ValidationRuleRegistry()

        @rules.rule("every_object_has_ref")
        def every_object_has_ref(s):
            for defn in s.types.values():
                if defn.kind == TypeKind.OBJECT and defn.name.endswith("Payload"):
                    continue
                if defn.kind == TypeKind.OBJECT and f"{defn.name}Ref" not in s.types:
                    return ValidationError(
                        message="Object type has no Ref type", type_name=defn.name
                    )
            return None

        assert rules.run_all(schema) == []
