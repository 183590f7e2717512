"""Scalar mapping from GraphQL scalars to validator expressions.

Each scalar resolves to a TypeScript type (``string``, ``number``,
``boolean`` or ``any``), which the target library maps to a primitive
validator. ``scalarSchemas`` overrides the expression outright.

Example:
    primitives = {"string": "z.string()", "number": "z.number()", "boolean": "z.boolean()"}
    mapper = ScalarMapper(schema, config, primitives, "definedNonNullAnySchema")
    mapper.map("Int")       # "z.number()"
    mapper.map("DateTime")  # config.scalar_schemas["DateTime"], if configured
"""

import logging
from typing import Mapping

from .config import ValidationSchemaConfig
from .errors import UnknownTypeError
from .ir import IRSchema
from .shapes import is_scalar_kind

logger = logging.getLogger(__name__)

# TypeScript types of the built-in scalars
BUILTIN_SCALAR_TYPES = {
    "ID": "string",
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}


class ScalarMapper:
    """Maps scalar names to primitive validator expressions for one direction.

    Attributes:
        primitives: TypeScript type -> validator expression, e.g. {"string": "z.string()"}
        any_schema: Expression used for scalars without a primitive mapping
        direction: "input" or "output", selects the configured scalar type
    """

    def __init__(
        self,
        schema: IRSchema,
        config: ValidationSchemaConfig,
        primitives: Mapping[str, str],
        any_schema: str,
        direction: str = "input",
    ):
        self.schema = schema
        self.config = config
        self.primitives = dict(primitives)
        self.any_schema = any_schema
        self.direction = direction

    def ts_type(self, name: str) -> str:
        """TypeScript type of a scalar in this mapper's direction."""
        configured = self.config.scalar_ts_type(name, self.direction)
        if configured is not None:
            return configured
        if name in BUILTIN_SCALAR_TYPES:
            return BUILTIN_SCALAR_TYPES[name]
        if is_scalar_kind(self.schema.kind_of(name)):
            return "any"
        raise UnknownTypeError(name)

    def map(self, name: str) -> str:
        """Return the validator expression for a scalar."""
        if name in self.config.scalar_schemas:
            return self.config.scalar_schemas[name]
        expression = self.primitives.get(self.ts_type(name))
        if expression is not None:
            return expression
        logger.warning("unhandled scalar name: %s", name)
        return self.any_schema

    def should_reject_empty_string(self, name: str) -> bool:
        """Check if a required value of this scalar must also be non-empty."""
        if not self.config.not_allow_empty_string:
            return False
        if not is_scalar_kind(self.schema.kind_of(name)):
            return False
        return self.ts_type(name) == "string"
