"""GraphQL schema parser using graphql-core.

Parses .graphql/.graphqls/.gql files (or an SDL string) and produces an IRSchema.
"""

import logging
import os

from graphql import (
    BooleanValueNode,
    ConstDirectiveNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    EnumValueNode,
    FloatValueNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    IntValueNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    ValueNode,
    parse,
    value_from_ast_untyped,
)

from .ir import (
    DefinitionKind,
    IRDefaultValue,
    IRDirective,
    IRDirectiveArgument,
    IREnum,
    IREnumValue,
    IRField,
    IRScalar,
    IRSchema,
    IRType,
    IRUnion,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeRef,
    ValueKind,
)

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")

_EXTENSION_KINDS = {
    ObjectTypeExtensionNode: DefinitionKind.OBJECT,
    InputObjectTypeExtensionNode: DefinitionKind.INPUT_OBJECT,
    InterfaceTypeExtensionNode: DefinitionKind.INTERFACE,
}


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str | None = None):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""
        # Extensions seen before their base definition
        self._pending_extensions: dict[str, list[IRField]] = {}
        self._pending_kinds: dict[str, DefinitionKind] = {}
        self._pending_enum_values: dict[str, list[IREnumValue]] = {}
        self._pending_union_members: dict[str, list[str]] = {}

    @classmethod
    def parse_string(cls, sdl: str) -> IRSchema:
        """Parse SDL text into IR."""
        parser = cls()
        parser.current_file = "<string>"
        parser._process_ast(parse(sdl))
        return parser._finish()

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            with open(file_path) as f:
                content = f.read()
            try:
                ast = parse(content)
            except Exception as e:
                logger.error("Error parsing %s: %s", self.current_file, e)
                raise
            self._process_ast(ast)
        return self._finish()

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _finish(self) -> IRSchema:
        # Extensions of types never defined become definitions of their own
        for name, fields in self._pending_extensions.items():
            logger.debug("Extension of undefined type %s treated as a definition", name)
            self.ir.add(IRType(name=name, fields=fields, kind=self._pending_kinds[name]))
        for name, values in self._pending_enum_values.items():
            logger.debug("Extension of undefined enum %s treated as a definition", name)
            self.ir.add(IREnum(name=name, values=values))
        for name, members in self._pending_union_members.items():
            logger.debug("Extension of undefined union %s treated as a definition", name)
            self.ir.add(IRUnion(name=name, members=members))
        self._pending_extensions = {}
        self._pending_kinds = {}
        self._pending_enum_values = {}
        self._pending_union_members = {}
        return self.ir

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                self.ir.add(IRScalar(
                    name=definition.name.value,
                    description=_description(definition),
                ))
            elif isinstance(definition, EnumTypeDefinitionNode):
                self._process_enum(definition)
            elif isinstance(definition, UnionTypeDefinitionNode):
                self._process_union(definition)
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                self._process_object_type(definition, DefinitionKind.INTERFACE)
            elif isinstance(definition, ObjectTypeDefinitionNode):
                self._process_object_type(definition, DefinitionKind.OBJECT)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self._process_object_type(definition, DefinitionKind.INPUT_OBJECT)
            elif isinstance(
                definition,
                (ObjectTypeExtensionNode, InputObjectTypeExtensionNode, InterfaceTypeExtensionNode),
            ):
                self._merge_extension_fields(definition)
            elif isinstance(definition, EnumTypeExtensionNode):
                self._merge_enum_values(definition)
            elif isinstance(definition, UnionTypeExtensionNode):
                self._merge_union_members(definition)

    def _process_enum(self, node: EnumTypeDefinitionNode):
        values = _enum_values(node)
        for extra in self._pending_enum_values.pop(node.name.value, []):
            _append_unique(values, extra)
        self.ir.add(IREnum(
            name=node.name.value,
            values=values,
            description=_description(node),
        ))

    def _process_union(self, node: UnionTypeDefinitionNode):
        members = [t.name.value for t in node.types or ()]
        for extra in self._pending_union_members.pop(node.name.value, []):
            if extra not in members:
                members.append(extra)
        self.ir.add(IRUnion(
            name=node.name.value,
            members=members,
            description=_description(node),
        ))

    def _process_object_type(self, node, kind: DefinitionKind):
        name = node.name.value
        fields = self._process_fields(node.fields or (), is_input=kind is DefinitionKind.INPUT_OBJECT)
        for extra in self._pending_extensions.pop(name, []):
            _append_unique(fields, extra)
        self._pending_kinds.pop(name, None)
        self.ir.add(IRType(
            name=name,
            fields=fields,
            kind=kind,
            description=_description(node),
        ))

    def _merge_extension_fields(
        self,
        node: ObjectTypeExtensionNode | InputObjectTypeExtensionNode | InterfaceTypeExtensionNode,
    ):
        """Merge `extend type`/`extend input`/`extend interface` fields into the existing type.

        Extensions may appear before the type they extend (e.g. across files);
        those are held back until the base definition shows up.
        """
        type_name = node.name.value
        is_input = isinstance(node, InputObjectTypeExtensionNode)
        extension_fields = self._process_fields(node.fields or (), is_input=is_input)

        existing_type = self.ir.get(type_name)
        if isinstance(existing_type, IRType):
            for field in extension_fields:
                _append_unique(existing_type.fields, field)
        else:
            pending = self._pending_extensions.setdefault(type_name, [])
            self._pending_kinds.setdefault(type_name, _EXTENSION_KINDS[type(node)])
            for field in extension_fields:
                _append_unique(pending, field)

    def _merge_enum_values(self, node: EnumTypeExtensionNode):
        """Merge `extend enum` values into the existing enum."""
        existing = self.ir.get(node.name.value)
        if isinstance(existing, IREnum):
            target = existing.values
        else:
            target = self._pending_enum_values.setdefault(node.name.value, [])
        for value in _enum_values(node):
            _append_unique(target, value)

    def _merge_union_members(self, node: UnionTypeExtensionNode):
        """Merge `extend union` members into the existing union."""
        existing = self.ir.get(node.name.value)
        if isinstance(existing, IRUnion):
            target = existing.members
        else:
            target = self._pending_union_members.setdefault(node.name.value, [])
        for member in node.types or ():
            if member.name.value not in target:
                target.append(member.name.value)

    def _process_fields(self, field_nodes, is_input: bool) -> list[IRField]:
        """Process field or input value definitions into the IRField list."""
        fields = []
        for node in field_nodes:
            arguments = []
            if not is_input and getattr(node, "arguments", None):
                arguments = self._process_fields(node.arguments, is_input=True)
            fields.append(IRField(
                name=node.name.value,
                type=self._get_type_ref(node.type),
                directives=self._process_directives(node.directives or ()),
                default_value=_default_value(node) if is_input else None,
                description=_description(node),
                is_input=is_input,
                arguments=arguments,
            ))
        return fields

    @staticmethod
    def _process_directives(directive_nodes: tuple[ConstDirectiveNode, ...]) -> list[IRDirective]:
        return [
            IRDirective(
                name=node.name.value,
                arguments=[
                    IRDirectiveArgument(
                        name=arg.name.value,
                        value=value_from_ast_untyped(arg.value),
                        kind=_value_kind(arg.value),
                    )
                    for arg in node.arguments or ()
                ],
            )
            for node in directive_nodes
        ]

    @classmethod
    def _get_type_ref(cls, type_node: TypeNode) -> TypeRef:
        """Convert the type node into a TypeRef, keeping every wrapper."""
        if isinstance(type_node, NonNullTypeNode):
            return NonNullTypeRef(cls._get_type_ref(type_node.type))
        if isinstance(type_node, ListTypeNode):
            return ListTypeRef(cls._get_type_ref(type_node.type))
        assert isinstance(type_node, NamedTypeNode), f"Expected NamedTypeNode, got {type(type_node)}"
        return NamedTypeRef(type_node.name.value)


def _enum_values(node: EnumTypeDefinitionNode | EnumTypeExtensionNode) -> list[IREnumValue]:
    return [
        IREnumValue(name=v.name.value, description=_description(v))
        for v in node.values or ()
    ]


def _description(node) -> str | None:
    return node.description.value if getattr(node, "description", None) else None


def _append_unique(fields: list[IRField], field: IRField):
    if all(f.name != field.name for f in fields):
        fields.append(field)


def _value_kind(node: ValueNode) -> ValueKind:
    if isinstance(node, IntValueNode):
        return ValueKind.INT
    if isinstance(node, FloatValueNode):
        return ValueKind.FLOAT
    if isinstance(node, BooleanValueNode):
        return ValueKind.BOOLEAN
    if isinstance(node, StringValueNode):
        return ValueKind.STRING
    if isinstance(node, EnumValueNode):
        return ValueKind.ENUM
    return ValueKind.OTHER


def _default_value(node: InputValueDefinitionNode) -> IRDefaultValue | None:
    value = node.default_value
    if value is None:
        return None
    kind = _value_kind(value)
    if kind is ValueKind.BOOLEAN:
        literal = "true" if value.value else "false"
    elif kind is ValueKind.OTHER:
        literal = ""
    else:
        literal = value.value
    return IRDefaultValue(kind=kind, literal=literal)
