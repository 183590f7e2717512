"""Validation schema generator.

Drives an emitter over every definition of a schema and assembles the
generated TypeScript module:

    result = generate(sdl, {"schema": "zod", "withObjectType": True})
    print(result.render())

``result.prepend`` holds the import block and ``result.content`` the
declarations, so a host pipeline can merge imports across plugins.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .config import ExportType, ValidationSchemaConfig
from .context import GeneratedDeclaration, GenerationContext
from .emitters import EMITTERS, SchemaEmitter
from .errors import UnknownTypeError
from .ir import IRSchema
from .ordering import order_declarations
from .parser import SchemaParser

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Output of one generation run."""
    prepend: list[str]
    content: str
    declarations: list[GeneratedDeclaration] = field(default_factory=list)
    # Declarations dropped because of unresolvable references
    errors: list[UnknownTypeError] = field(default_factory=list)

    def render(self) -> str:
        """The complete module: imports followed by the declarations."""
        return "\n".join(self.prepend) + "\n" + self.content


class ValidationSchemaGenerator:
    """Generates validation schemas for one schema and configuration."""

    def __init__(self, schema: IRSchema, config: ValidationSchemaConfig):
        self.schema = schema
        self.config = config

    def create_emitter(self, context: GenerationContext) -> SchemaEmitter:
        return EMITTERS[self.config.target](self.schema, self.config, context)

    def generate(self) -> GenerationResult:
        """Run the generation. Each call starts from a fresh context."""
        context = GenerationContext()
        emitter = self.create_emitter(context)

        declarations: list[GeneratedDeclaration] = []
        errors: list[UnknownTypeError] = []
        for definition in self.schema.definitions:
            try:
                declaration = emitter.emit(definition)
            except UnknownTypeError as e:
                e.definition = definition.name
                logger.error("Skipping %s: %s", definition.name, e)
                errors.append(e)
                continue
            if declaration is not None:
                declarations.append(declaration)

        if self.config.export_type is ExportType.CONST:
            declarations = order_declarations(declarations)

        logger.debug(
            "Generated %d declarations and %d enums for %s",
            len(declarations), len(context.enum_declarations), self.config.target.value,
        )
        content = "\n".join([emitter.initial_emit(), *(d.text for d in declarations)])
        return GenerationResult(
            prepend=emitter.build_imports(),
            content=content,
            declarations=declarations,
            errors=errors,
        )


def generate(
    schema: IRSchema | str,
    config: ValidationSchemaConfig | Mapping[str, Any] | None = None,
) -> GenerationResult:
    """Generate validation schemas from an IRSchema or SDL text."""
    if isinstance(schema, str):
        schema = SchemaParser.parse_string(schema)
    if not isinstance(config, ValidationSchemaConfig):
        config = ValidationSchemaConfig.from_mapping(config)
    return ValidationSchemaGenerator(schema, config).generate()
