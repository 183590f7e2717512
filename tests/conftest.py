"""Shared fixtures for the generator tests."""

import pytest

from gql_valgen.core.config import ValidationSchemaConfig
from gql_valgen.core.context import GenerationContext
from gql_valgen.core.emitters import EMITTERS
from gql_valgen.core.parser import SchemaParser


def _make_emitter(sdl: str, **options):
    schema = SchemaParser.parse_string(sdl)
    config = ValidationSchemaConfig.from_mapping(options)
    return EMITTERS[config.target](schema, config, GenerationContext()), schema


def _field_expression(sdl: str, type_name: str, field_name: str, **options) -> str:
    emitter, schema = _make_emitter(sdl, **options)
    describer = emitter.create_describer("input")
    field = next(f for f in schema.get(type_name).fields if f.name == field_name)
    line = describer.describe_field(field, indent_count=0)
    return line[len(f"{field_name}: "):]


@pytest.fixture
def make_emitter():
    """Parse SDL and create the emitter selected by the options."""
    return _make_emitter


@pytest.fixture
def field_expression():
    """Validator expression of one input field, without the ``name:`` prefix."""
    return _field_expression


@pytest.fixture
def value_expression():
    """Expression of a ``value`` field of the given type in a one-field input."""
    def value_expression(type_sdl: str, target: str, **options) -> str:
        sdl = f"input Sample {{ value: {type_sdl} }}"
        return _field_expression(sdl, "Sample", "value", schema=target, **options)
    return value_expression


@pytest.fixture
def user_sdl():
    """Schema used by the end-to-end scenarios."""
    return """
        type User {
          id: ID!
          name: String
          tags: [String!]
        }
    """


@pytest.fixture
def mixed_sdl():
    """Schema exercising inputs, outputs, enums and unions together."""
    return """
        scalar Date

        enum Role {
          ADMIN
          MEMBER
        }

        input UserFilter {
          role: Role
          createdAfter: Date
          nested: UserFilter
        }

        type User {
          id: ID!
          role: Role!
          friends: [User!]
        }

        type Group {
          id: ID!
          members: [User!]!
        }

        union Principal = User | Group

        type Query {
          users(filter: UserFilter): [User!]!
        }
    """
