"""Unit tests for root Query and Mutation field generation."""

from dgql.core import TypeDefinition, TypeKind, add_mutation_fields, add_query_fields
from dgql.core.operations import new_mutation_root, new_query_root
from dgql.core.schema import TypeOrigin


def _signature(fld):
    arguments = ", ".join(f"{arg.name}: {arg.type}" for arg in fld.arguments)
    return f"{fld.name}({arguments}): {fld.type}"


class TestRoots:
    """Test root type construction."""

    def test_query_root(self):
        query = new_query_root()

        assert query.kind == TypeKind.OBJECT
        assert query.name == "Query"
        assert query.origin == TypeOrigin.QUERY
        assert query.fields == []

    def test_mutation_root(self):
        mutation = new_mutation_root()

        assert mutation.name == "Mutation"
        assert mutation.origin == TypeOrigin.MUTATION


class TestQueryFields:
    """Test query field generation."""

    def test_get_and_query_fields(self):
        query = new_query_root()
        person = TypeDefinition(kind=TypeKind.OBJECT, name="Person")

        add_query_fields(person, query)

        assert [_signature(f) for f in query.fields] == [
            "getPerson(id: ID!): Person!",
            "queryPerson(filter: PersonFilter!): [Person!]!",
        ]
        assert query.fields[0].description == "ID based query function for Person"

    def test_appends_without_touching_existing_fields(self):
        query = new_query_root()
        add_query_fields(TypeDefinition(kind=TypeKind.OBJECT, name="A"), query)
        first = list(query.fields)

        add_query_fields(TypeDefinition(kind=TypeKind.OBJECT, name="B"), query)

        assert query.fields[:2] == first
        assert [f.name for f in query.fields] == ["getA", "queryA", "getB", "queryB"]


class TestMutationFields:
    """Test mutation field generation."""

    def test_add_update_delete_fields(self):
        mutation = new_mutation_root()
        person = TypeDefinition(kind=TypeKind.OBJECT, name="Person")

        add_mutation_fields(person, mutation)

        assert [_signature(f) for f in mutation.fields] == [
            "addPerson(input: PersonInput!): AddPersonPayload!",
            "updatePerson(id: ID!, input: PersonUpdate): UpdatePersonPayload!",
            "deletePerson(id: ID!): DeletePersonPayload!",
        ]

    def test_update_input_is_nullable(self):
        mutation = new_mutation_root()
        add_mutation_fields(TypeDefinition(kind=TypeKind.OBJECT, name="T"), mutation)

        update = mutation.fields[1]
        assert update.arguments[1].name == "input"
        assert update.arguments[1].type.non_null is False
