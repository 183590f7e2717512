"""Shared contract of the validation library emitters.

An emitter turns each schema definition into one generated declaration. The
traversal, the object/union/argument declaration layout and the import block
are shared; subclasses supply the library vocabulary and the few declarations
whose syntax differs (preamble, enums, unions, type annotations).
"""

from abc import ABC, abstractmethod

from ..blocks import const_block, function_block, indent
from ..config import ExportType, ValidationSchemaConfig
from ..context import GeneratedDeclaration, GenerationContext
from ..descent import FieldTypeDescriber, Vocabulary
from ..directives import DirectiveApplier
from ..ir import DefinitionKind, IRDefinition, IREnum, IRField, IRSchema, IRType, IRUnion
from ..naming import NameResolver
from ..scalars import ScalarMapper
from ..shapes import is_structured_kind

# Root operation types never get an object schema
ROOT_OPERATION_TYPES = ("Query", "Mutation", "Subscription")


class SchemaEmitter(ABC):
    """Emits validator declarations for one target library."""

    # Target library vocabulary
    vocabulary: Vocabulary
    # TypeScript type -> primitive validator
    primitives: dict[str, str]
    # Validator for values that must be defined and non-null but are otherwise unchecked
    any_schema: str

    def __init__(self, schema: IRSchema, config: ValidationSchemaConfig, context: GenerationContext):
        self.schema = schema
        self.config = config
        self.context = context
        self.resolver = NameResolver(schema, config)
        self.directives = DirectiveApplier(config.directives)

    @property
    def is_const(self) -> bool:
        return self.config.export_type is ExportType.CONST

    def create_describer(self, direction: str) -> FieldTypeDescriber:
        """Descent engine whose scalars resolve in the given direction."""
        scalars = ScalarMapper(
            self.schema, self.config, self.primitives, self.any_schema, direction=direction
        )
        return FieldTypeDescriber(
            self.vocabulary, self.config, self.resolver, scalars, self.directives, self.context
        )

    # -- library specifics ------------------------------------------------

    @abstractmethod
    def import_validation_schema(self) -> str:
        """Import statement of the validation library."""

    @abstractmethod
    def initial_emit(self) -> str:
        """Preamble helpers followed by the hoisted enum declarations."""

    @abstractmethod
    def object_schema_type(self, name: str) -> str:
        """Type annotation of an object schema, e.g. ``z.ZodObject<Properties<User>>``."""

    @abstractmethod
    def typename_field(self, type_name: str) -> str:
        """Optional ``__typename`` literal entry of an output object shape."""

    @abstractmethod
    def enum_declaration(self, enum: IREnum, enum_name: str) -> str:
        """Hoisted declaration of an enum schema."""

    @abstractmethod
    def union_expression(self, union_name: str, elements: list[str]) -> str:
        """Expression accepting any of the union's member schemas."""

    def union_schema_type(self, union_name: str) -> str | None:
        """Type annotation of a union schema, if the library needs one."""
        return None

    # -- traversal ----------------------------------------------------------

    def emit(self, definition: IRDefinition) -> GeneratedDeclaration | None:
        """Emit the declaration for one definition.

        Enums are hoisted into the context and scalars/interfaces produce
        nothing, so those return None.
        """
        if not is_structured_kind(definition.kind):
            return None
        references = self.context.start_declaration()
        if isinstance(definition, IREnum):
            self.emit_enum(definition)
            return None
        if isinstance(definition, IRUnion):
            text = self.emit_union(definition)
        elif isinstance(definition, IRType) and definition.kind is DefinitionKind.INPUT_OBJECT:
            text = self.emit_input_object(definition)
        elif isinstance(definition, IRType) and definition.kind is DefinitionKind.OBJECT:
            text = self.emit_object(definition)
        else:
            return None
        if text is None:
            return None
        return GeneratedDeclaration(
            name=definition.name,
            identifier=f"{self.resolver.convert_name(definition.name)}Schema",
            text=text,
            dependencies=set(references),
        )

    def emit_input_object(self, node: IRType) -> str:
        describer = self.create_describer("input")
        name = self.resolver.convert_name(node.name)
        text = self.build_input_fields(node.fields, describer, name)
        self.context.add_import(name)
        return text

    def emit_object(self, node: IRType) -> str | None:
        if not self.config.with_object_type or node.name in ROOT_OPERATION_TYPES:
            return None
        describer = self.create_describer("output")
        name = self.resolver.convert_name(node.name)

        argument_blocks = self.build_field_arguments(node, describer)
        shape = ",\n".join(describer.describe_field(f) for f in node.fields)
        typename = indent(self.typename_field(node.name), 2)
        module = self.vocabulary.module
        if self.is_const:
            text = const_block(
                f"{name}Schema: {self.object_schema_type(name)}",
                "\n".join([f"{module}.object({{", typename, shape, "})"]),
            )
        else:
            text = function_block(
                f"{name}Schema(): {self.object_schema_type(name)}",
                "\n".join([indent(f"return {module}.object({{"), typename, shape, indent("})")]),
            )
        # Imports are recorded only once the whole declaration has been built
        self.context.add_import(name)
        for type_name, block in argument_blocks:
            text += "\n" + block
            self.context.add_import(type_name)
        return text

    def emit_enum(self, node: IREnum):
        enum_name = self.resolver.convert_name(node.name)
        self.context.enum_declarations.append(self.enum_declaration(node, enum_name))
        self.context.add_import(enum_name)

    def emit_union(self, node: IRUnion) -> str | None:
        if not node.members or not self.config.with_object_type:
            return None
        union_name = self.resolver.convert_name(node.name)
        elements = []
        for member in node.members:
            self.context.references.add(member)
            element = self.resolver.convert_name(member)
            if self.resolver.kind_of(member) is DefinitionKind.ENUM or self.is_const:
                elements.append(f"{element}Schema")
            else:
                elements.append(f"{element}Schema()")
        union = self.union_expression(union_name, elements)
        schema_type = self.union_schema_type(union_name)
        annotation = ""
        if schema_type:
            annotation = f": {schema_type}"
            self.context.add_import(union_name)
        if self.is_const:
            return const_block(f"{union_name}Schema{annotation}", union)
        return function_block(f"{union_name}Schema(){annotation}", indent(f"return {union}"))

    def build_field_arguments(self, node: IRType, describer: FieldTypeDescriber) -> list[tuple[str, str]]:
        """Schemas for the arguments of each output field that has any.

        Arguments share the describer of the object they belong to, so their
        scalars resolve in the output direction. Returns ``(type name, block)``
        pairs in field order.
        """
        blocks = []
        for field in node.fields:
            if not field.arguments:
                continue
            type_name = self.resolver.args_type_name(node.name, field.name)
            blocks.append((type_name, self.build_input_fields(field.arguments, describer, type_name)))
        return blocks

    def build_input_fields(self, fields: list[IRField], describer: FieldTypeDescriber, name: str) -> str:
        shape = ",\n".join(describer.describe_field(f) for f in fields)
        module = self.vocabulary.module
        if self.is_const:
            return const_block(
                f"{name}Schema: {self.object_schema_type(name)}",
                "\n".join([f"{module}.object({{", shape, "})"]),
            )
        return function_block(
            f"{name}Schema(): {self.object_schema_type(name)}",
            "\n".join([indent(f"return {module}.object({{"), shape, indent("})")]),
        )

    # -- imports ------------------------------------------------------------

    def build_imports(self) -> list[str]:
        """Import block to prepend to the generated module."""
        if self.config.import_from and self.context.import_types:
            prefix = "type " if self.config.use_type_imports else ""
            names = ", ".join(self.context.import_types)
            return [
                self.import_validation_schema(),
                f"import {prefix}{{ {names} }} from '{self.config.import_from}'",
            ]
        return [self.import_validation_schema()]
