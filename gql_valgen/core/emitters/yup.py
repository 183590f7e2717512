"""Emitter for yup (https://github.com/jquense/yup)."""

from ..blocks import const_block, function_block, indent
from ..descent import Nullability, Vocabulary
from ..ir import IREnum
from .base import SchemaEmitter


class YupEmitter(SchemaEmitter):
    """Generates ``yup.object(...)`` schemas.

    Unlike zod, yup refines whole field expressions: directives and defaults
    are chained after the descent, and non-required fields end in
    ``.optional()``. Unions go through a ``union`` helper declared in the
    preamble.
    """

    vocabulary = Vocabulary(
        module="yup",
        nullability={
            Nullability.REQUIRED: ".nonNullable()",
            Nullability.LIST_ELEMENT: ".nullable()",
            Nullability.OPTIONAL: ".nullable()",
        },
        required_list=".defined()",
        nullable_list=".defined().nullable()",
        non_empty_string=".required()",
        field_level_refinements=True,
        bare_input_references=True,
    )
    primitives = {
        "string": "yup.string().defined()",
        "number": "yup.number().defined()",
        "boolean": "yup.boolean().defined()",
    }
    any_schema = "yup.mixed()"

    def import_validation_schema(self) -> str:
        return "import * as yup from 'yup'"

    def initial_emit(self) -> str:
        declarations = list(self.context.enum_declarations)
        if self.config.with_object_type:
            declarations.append(function_block(
                "union<T extends {}>(...schemas: ReadonlyArray<yup.Schema<T>>): yup.MixedSchema<T>",
                "\n".join([
                    indent("return yup.mixed<T>().test({"),
                    indent("test: (value) => schemas.some((schema) => schema.isValidSync(value))", 2),
                    indent("}).defined()"),
                ]),
            ))
        return "\n" + "\n".join(declarations)

    def object_schema_type(self, name: str) -> str:
        return f"yup.ObjectSchema<{name}>"

    def typename_field(self, type_name: str) -> str:
        return f"__typename: yup.string<'{type_name}'>().optional(),"

    def enum_declaration(self, enum: IREnum, enum_name: str) -> str:
        if self.config.enums_as_types:
            values = ", ".join(f"'{v.name}'" for v in enum.values)
            return const_block(f"{enum_name}Schema", f"yup.string().oneOf([{values}]).defined()")
        values = ", ".join(
            f"{enum_name}.{self.resolver.convert_enum_value(v.name)}" for v in enum.values
        )
        return const_block(f"{enum_name}Schema", f"yup.string<{enum_name}>().oneOf([{values}]).defined()")

    def union_schema_type(self, union_name: str) -> str | None:
        return f"yup.MixedSchema<{union_name}>"

    def union_expression(self, union_name: str, elements: list[str]) -> str:
        return f"union<{union_name}>({', '.join(elements)})"
