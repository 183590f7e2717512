"""Emitter for myzod (https://github.com/davidmdm/myzod)."""

from ..blocks import const_block, type_block
from ..descent import Nullability, Vocabulary
from ..ir import IREnum
from .base import SchemaEmitter

ANY_SCHEMA = "definedNonNullAnySchema"


class MyZodEmitter(SchemaEmitter):
    """Generates ``myzod.object(...)`` schemas."""

    vocabulary = Vocabulary(
        module="myzod",
        nullability={
            Nullability.REQUIRED: "",
            Nullability.LIST_ELEMENT: ".nullable()",
            Nullability.OPTIONAL: ".optional().nullable()",
        },
        required_list="",
        nullable_list=".optional().nullable()",
        non_empty_string=".min(1)",
    )
    primitives = {
        "string": "myzod.string()",
        "number": "myzod.number()",
        "boolean": "myzod.boolean()",
    }
    any_schema = ANY_SCHEMA

    def import_validation_schema(self) -> str:
        return "import * as myzod from 'myzod'"

    def initial_emit(self) -> str:
        return "\n" + "\n".join([
            const_block(ANY_SCHEMA, "myzod.object({})"),
            *self.context.enum_declarations,
        ])

    def object_schema_type(self, name: str) -> str:
        return f"myzod.Type<{name}>"

    def typename_field(self, type_name: str) -> str:
        return f"__typename: myzod.literal('{type_name}').optional(),"

    def enum_declaration(self, enum: IREnum, enum_name: str) -> str:
        # myzod.literals is the counterpart of z.enum
        if self.config.enums_as_types:
            values = ", ".join(f"'{v.name}'" for v in enum.values)
            return type_block(f"{enum_name}Schema", f"myzod.literals({values})")
        return const_block(f"{enum_name}Schema", f"myzod.enum({enum_name})")

    def union_expression(self, union_name: str, elements: list[str]) -> str:
        if len(elements) > 1:
            return f"myzod.union([{', '.join(elements)}])"
        return ", ".join(elements)
