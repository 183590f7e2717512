"""Emitter for zod (https://zod.dev)."""

from ..blocks import const_block, type_block
from ..descent import Nullability, Vocabulary
from ..ir import IREnum
from .base import SchemaEmitter

ANY_SCHEMA = "definedNonNullAnySchema"


class ZodEmitter(SchemaEmitter):
    """Generates ``z.object(...)`` schemas."""

    vocabulary = Vocabulary(
        module="z",
        nullability={
            Nullability.REQUIRED: "",
            Nullability.LIST_ELEMENT: ".nullable()",
            Nullability.OPTIONAL: ".nullish()",
        },
        required_list="",
        nullable_list=".nullish()",
        non_empty_string=".min(1)",
    )
    primitives = {
        "string": "z.string()",
        "number": "z.number()",
        "boolean": "z.boolean()",
    }
    any_schema = ANY_SCHEMA

    def import_validation_schema(self) -> str:
        return "import { z } from 'zod'"

    def initial_emit(self) -> str:
        return "\n" + "\n".join([
            type_block(
                "Properties<T>",
                "\n".join(["Required<{", "  [K in keyof T]: z.ZodType<T[K], any, T[K]>;", "}>"]),
                exported=False,
            ),
            # zod has no "defined, non-null, any" schema of its own
            type_block("definedNonNullAny", "{}", exported=False),
            const_block(
                "isDefinedNonNullAny",
                "(v: any): v is definedNonNullAny => v !== undefined && v !== null",
            ),
            const_block(ANY_SCHEMA, "z.any().refine((v) => isDefinedNonNullAny(v))"),
            *self.context.enum_declarations,
        ])

    def object_schema_type(self, name: str) -> str:
        return f"z.ZodObject<Properties<{name}>>"

    def typename_field(self, type_name: str) -> str:
        return f"__typename: z.literal('{type_name}').optional(),"

    def enum_declaration(self, enum: IREnum, enum_name: str) -> str:
        if self.config.enums_as_types:
            values = ", ".join(f"'{v.name}'" for v in enum.values)
            return const_block(f"{enum_name}Schema", f"z.enum([{values}])")
        return const_block(f"{enum_name}Schema", f"z.nativeEnum({enum_name})")

    def union_expression(self, union_name: str, elements: list[str]) -> str:
        if len(elements) > 1:
            return f"z.union([{', '.join(elements)}])"
        return ", ".join(elements)
