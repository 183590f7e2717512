"""Tests for the type descent engine."""

import logging

import pytest

from gql_valgen.core.context import GenerationContext
from gql_valgen.core.emitters import ZodEmitter
from gql_valgen.core.ir import DefinitionKind, ListTypeRef, NamedTypeRef, NonNullTypeRef
from gql_valgen.core.shapes import (
    is_input_kind,
    is_list_type,
    is_named_type,
    is_non_null_type,
    is_output_kind,
    is_scalar_kind,
    is_structured_kind,
)

CONSTRAINT = {"constraint": {"minLength": "min"}}


class TestNullabilityZod:
    """Wrapper combinations for zod."""

    @pytest.mark.parametrize(
        "type_sdl, expected",
        [
            ("String", "z.string().nullish()"),
            ("String!", "z.string()"),
            ("[String]", "z.array(z.string().nullable()).nullish()"),
            ("[String!]", "z.array(z.string()).nullish()"),
            ("[String]!", "z.array(z.string().nullable())"),
            ("[String!]!", "z.array(z.string())"),
            ("[[String]]", "z.array(z.array(z.string().nullable()).nullish()).nullish()"),
            ("[[String]!]", "z.array(z.array(z.string().nullable())).nullish()"),
            ("[[String]]!", "z.array(z.array(z.string().nullable()).nullish())"),
            ("[[String!]]", "z.array(z.array(z.string()).nullish()).nullish()"),
            ("[[String!]!]", "z.array(z.array(z.string())).nullish()"),
            ("[[String!]]!", "z.array(z.array(z.string()).nullish())"),
            ("[[String!]!]!", "z.array(z.array(z.string()))"),
        ],
    )
    def test_wrappers(self, value_expression, type_sdl, expected):
        assert value_expression(type_sdl, "zod") == expected


class TestNullabilityMyZod:
    """Wrapper combinations for myzod."""

    @pytest.mark.parametrize(
        "type_sdl, expected",
        [
            ("Int", "myzod.number().optional().nullable()"),
            ("Int!", "myzod.number()"),
            ("[Int]", "myzod.array(myzod.number().nullable()).optional().nullable()"),
            ("[Int!]", "myzod.array(myzod.number()).optional().nullable()"),
            ("[Int]!", "myzod.array(myzod.number().nullable())"),
            ("[Int!]!", "myzod.array(myzod.number())"),
            (
                "[[Int]]",
                "myzod.array(myzod.array(myzod.number().nullable()).optional().nullable())"
                ".optional().nullable()",
            ),
            ("[[Int]!]", "myzod.array(myzod.array(myzod.number().nullable())).optional().nullable()"),
            ("[[Int]]!", "myzod.array(myzod.array(myzod.number().nullable()).optional().nullable())"),
            (
                "[[Int!]]",
                "myzod.array(myzod.array(myzod.number()).optional().nullable()).optional().nullable()",
            ),
            ("[[Int!]]!", "myzod.array(myzod.array(myzod.number()).optional().nullable())"),
            ("[[Int!]!]", "myzod.array(myzod.array(myzod.number())).optional().nullable()"),
            ("[[Int!]!]!", "myzod.array(myzod.array(myzod.number()))"),
        ],
    )
    def test_wrappers(self, value_expression, type_sdl, expected):
        assert value_expression(type_sdl, "myzod") == expected


class TestNullabilityYup:
    """Wrapper combinations for yup."""

    @pytest.mark.parametrize(
        "type_sdl, expected",
        [
            ("String", "yup.string().defined().nullable().optional()"),
            ("String!", "yup.string().defined().nonNullable()"),
            ("[String]", "yup.array(yup.string().defined().nullable()).defined().nullable().optional()"),
            ("[String!]", "yup.array(yup.string().defined().nonNullable()).defined().nullable().optional()"),
            ("[String]!", "yup.array(yup.string().defined().nullable()).defined()"),
            ("[String!]!", "yup.array(yup.string().defined().nonNullable()).defined()"),
            (
                "[[String]]",
                "yup.array(yup.array(yup.string().defined().nullable()).defined().nullable())"
                ".defined().nullable().optional()",
            ),
            (
                "[[String]!]",
                "yup.array(yup.array(yup.string().defined().nullable()).defined())"
                ".defined().nullable().optional()",
            ),
            (
                "[[String]]!",
                "yup.array(yup.array(yup.string().defined().nullable()).defined().nullable()).defined()",
            ),
            (
                "[[String!]]",
                "yup.array(yup.array(yup.string().defined().nonNullable()).defined().nullable())"
                ".defined().nullable().optional()",
            ),
            (
                "[[String!]!]",
                "yup.array(yup.array(yup.string().defined().nonNullable()).defined())"
                ".defined().nullable().optional()",
            ),
            (
                "[[String!]]!",
                "yup.array(yup.array(yup.string().defined().nonNullable()).defined().nullable()).defined()",
            ),
            (
                "[[String!]!]!",
                "yup.array(yup.array(yup.string().defined().nonNullable()).defined()).defined()",
            ),
        ],
    )
    def test_wrappers(self, value_expression, type_sdl, expected):
        assert value_expression(type_sdl, "yup") == expected


class TestLazyReferences:
    """Input object references are deferred."""

    SDL = """
        input Node {
          child: Node
          required: Node!
          children: [Node]
          strict: [Node!]!
        }
    """

    @pytest.mark.parametrize(
        "field, expected",
        [
            ("child", "z.lazy(() => NodeSchema().nullish())"),
            ("required", "z.lazy(() => NodeSchema())"),
            ("children", "z.array(z.lazy(() => NodeSchema().nullable())).nullish()"),
            ("strict", "z.array(z.lazy(() => NodeSchema()))"),
        ],
    )
    def test_zod_function(self, field_expression, field, expected):
        assert field_expression(self.SDL, "Node", field, schema="zod") == expected

    def test_zod_const(self, field_expression):
        expression = field_expression(self.SDL, "Node", "child", schema="zod", validationSchemaExportType="const")
        assert expression == "z.lazy(() => NodeSchema.nullish())"

    def test_myzod(self, field_expression):
        expression = field_expression(self.SDL, "Node", "child", schema="myzod")
        assert expression == "myzod.lazy(() => NodeSchema().optional().nullable())"

    @pytest.mark.parametrize(
        "field, expected",
        [
            ("child", "yup.lazy(() => NodeSchema()).optional()"),
            ("required", "yup.lazy(() => NodeSchema().nonNullable())"),
            ("children", "yup.array(yup.lazy(() => NodeSchema())).defined().nullable().optional()"),
        ],
    )
    def test_yup(self, field_expression, field, expected):
        assert field_expression(self.SDL, "Node", field, schema="yup") == expected

    def test_enum_and_output_references_are_eager(self, field_expression):
        sdl = """
            enum Color { RED }
            type User { id: ID! }
            type Holder { color: Color, user: User! }
        """
        assert field_expression(sdl, "Holder", "color", schema="zod") == "ColorSchema.nullish()"
        assert field_expression(sdl, "Holder", "user", schema="zod") == "UserSchema()"


class TestDefaults:
    """Default values of input fields."""

    SDL = """
        enum Status { ACTIVE }
        input Page {
          limit: Int = 10
          ratio: Float = 0.5
          flag: Boolean! = true
          name: String = "x"
          quoted: String = "say \\"hi\\""
          status: Status = ACTIVE
          tags: [String!] = ["a"]
        }
    """

    @pytest.mark.parametrize(
        "field, expected",
        [
            ("limit", "z.number().default(10).nullish()"),
            ("ratio", "z.number().default(0.5).nullish()"),
            ("flag", "z.boolean().default(true)"),
            ("name", 'z.string().default("x").nullish()'),
            ("quoted", 'z.string().default("say \\"hi\\"").nullish()'),
            ("status", 'StatusSchema.default("ACTIVE").nullish()'),
            ("tags", "z.array(z.string()).nullish()"),
        ],
    )
    def test_zod(self, field_expression, field, expected):
        assert field_expression(self.SDL, "Page", field, schema="zod") == expected

    def test_yup(self, field_expression):
        assert field_expression(self.SDL, "Page", "limit", schema="yup") == (
            "yup.number().defined().nullable().default(10).optional()"
        )
        assert field_expression(self.SDL, "Page", "flag", schema="yup") == (
            "yup.boolean().defined().nonNullable().default(true)"
        )


class TestNotAllowEmptyString:
    """Required string scalars reject the empty string."""

    @pytest.mark.parametrize(
        "target, type_sdl, expected",
        [
            ("zod", "String!", "z.string().min(1)"),
            ("zod", "ID!", "z.string().min(1)"),
            ("zod", "String", "z.string().nullish()"),
            ("zod", "Int!", "z.number()"),
            ("zod", "[String!]!", "z.array(z.string().min(1))"),
            ("myzod", "String!", "myzod.string().min(1)"),
            ("yup", "String!", "yup.string().defined().required()"),
            ("yup", "String", "yup.string().defined().nullable().optional()"),
        ],
    )
    def test_expressions(self, value_expression, target, type_sdl, expected):
        assert value_expression(type_sdl, target, notAllowEmptyString=True) == expected


class TestDirectivePlacement:
    """Where directive refinements land."""

    @pytest.mark.parametrize(
        "type_sdl, expected",
        [
            ("String", "z.string().min(1).nullish()"),
            ("String!", "z.string().min(1)"),
            ("[String!]", "z.array(z.string().min(1)).min(1).nullish()"),
            ("[String!]!", "z.array(z.string().min(1))"),
            ("[String]", "z.array(z.string().nullable()).min(1).nullish()"),
        ],
    )
    def test_zod(self, value_expression, type_sdl, expected):
        assert value_expression(f"{type_sdl} @constraint(minLength: 1)", "zod", directives=CONSTRAINT) == expected

    def test_zod_before_default(self, field_expression):
        sdl = "input A { name: String = \"x\" @constraint(minLength: 1) }"
        expression = field_expression(sdl, "A", "name", schema="zod", directives=CONSTRAINT)
        assert expression == 'z.string().min(1).default("x").nullish()'

    @pytest.mark.parametrize(
        "type_sdl, expected",
        [
            ("String", "yup.string().defined().nullable().min(1).optional()"),
            ("String!", "yup.string().defined().nonNullable().min(1)"),
            ("[String!]", "yup.array(yup.string().defined().nonNullable()).defined().nullable().min(1).optional()"),
        ],
    )
    def test_yup_whole_field(self, value_expression, type_sdl, expected):
        assert value_expression(f"{type_sdl} @constraint(minLength: 1)", "yup", directives=CONSTRAINT) == expected

    def test_multiple_arguments(self, value_expression):
        directives = {"constraint": {"minLength": "min", "startsWith": ["matches", "/^$1/"]}}
        expression = value_expression(
            'String! @constraint(minLength: 50, startsWith: "Hello")', "zod", directives=directives
        )
        assert expression == "z.string().min(50).matches(/^Hello/)"


class TestFieldLine:
    """Tests for the rendered shape line."""

    def test_indentation(self, make_emitter):
        emitter, schema = make_emitter("input A { x: Int! }", schema="zod")
        describer = emitter.create_describer("input")
        assert describer.describe_field(schema.get("A").fields[0]) == "    x: z.number()"

    def test_references_are_recorded(self, make_emitter):
        emitter, schema = make_emitter("input A { b: B, n: Int }\ninput B { x: Int }", schema="zod")
        describer = emitter.create_describer("input")
        for field in schema.get("A").fields:
            describer.describe_field(field)
        assert emitter.context.references == {"B"}

    def test_unhandled_type_ref(self, make_emitter, caplog):
        emitter, schema = make_emitter("input A { x: Int }", schema="zod")
        describer = emitter.create_describer("input")
        field = schema.get("A").fields[0]
        with caplog.at_level(logging.WARNING):
            assert describer.describe(object(), None, field) == ""
        assert "unhandled type" in caplog.text

    def test_emitter_is_zod(self, make_emitter):
        emitter, _ = make_emitter("input A { x: Int }", schema="zod")
        assert isinstance(emitter, ZodEmitter)
        assert isinstance(emitter.context, GenerationContext)


class TestShapes:
    """Tests for type-shape predicates."""

    def test_type_refs(self):
        named = NamedTypeRef("String")
        assert is_named_type(named)
        assert is_list_type(ListTypeRef(named))
        assert is_non_null_type(NonNullTypeRef(named))
        assert not is_named_type(None)
        assert not is_non_null_type(named)

    @pytest.mark.parametrize(
        "kind, input_, output, scalar, structured",
        [
            (DefinitionKind.INPUT_OBJECT, True, False, False, True),
            (DefinitionKind.OBJECT, False, True, False, True),
            (DefinitionKind.UNION, False, True, False, True),
            (DefinitionKind.INTERFACE, False, False, False, True),
            (DefinitionKind.ENUM, False, False, False, True),
            (DefinitionKind.SCALAR, False, False, True, False),
            (None, False, False, False, False),
        ],
    )
    def test_kinds(self, kind, input_, output, scalar, structured):
        assert is_input_kind(kind) is input_
        assert is_output_kind(kind) is output
        assert is_scalar_kind(kind) is scalar
        assert is_structured_kind(kind) is structured
