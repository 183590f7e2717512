"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that represent the parts of a GraphQL schema
the validation schema generator needs: type references with their full
List/NonNull nesting, fields with directives and default values, and the
ordered list of type definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Scalars every GraphQL schema has without declaring them
BUILTIN_SCALARS = ("ID", "String", "Int", "Float", "Boolean")


class DefinitionKind(Enum):
    """Kinds of named type definitions."""
    INPUT_OBJECT = "input_object"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    ENUM = "enum"
    SCALAR = "scalar"


class ValueKind(Enum):
    """Kinds of GraphQL literal values."""
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    ENUM = "enum"
    OTHER = "other"  # null, list and object literals


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type, e.g. ``String``."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListTypeRef:
    """List wrapper, e.g. ``[String]``."""
    of_type: "TypeRef"

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullTypeRef:
    """Non-null wrapper, e.g. ``String!``."""
    of_type: "TypeRef"

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = Union[NamedTypeRef, ListTypeRef, NonNullTypeRef]


@dataclass
class IRDefaultValue:
    """Literal default value of an input field or argument."""
    kind: ValueKind
    literal: str  # e.g. "10", "true", "hello", "ACTIVE"


@dataclass
class IRDirectiveArgument:
    """Argument of a directive application."""
    name: str
    value: Any  # untyped Python value of the literal
    kind: ValueKind


@dataclass
class IRDirective:
    """A directive applied to a field, e.g. ``@constraint(minLength: 1)``."""
    name: str
    arguments: list[IRDirectiveArgument] = field(default_factory=list)


@dataclass
class IRField:
    """Represents a field of an object type, input type, or a field argument."""
    name: str
    type: TypeRef
    directives: list[IRDirective] = field(default_factory=list)
    default_value: IRDefaultValue | None = None
    description: str | None = None
    # True for input object fields and field arguments (input values)
    is_input: bool = False
    arguments: list["IRField"] = field(default_factory=list)


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue]
    description: str | None = None

    kind = DefinitionKind.ENUM


@dataclass
class IRType:
    """Represents a GraphQL object, input or interface type."""
    name: str
    fields: list[IRField]
    kind: DefinitionKind = DefinitionKind.OBJECT
    description: str | None = None

    @property
    def is_input(self) -> bool:
        return self.kind is DefinitionKind.INPUT_OBJECT


@dataclass
class IRUnion:
    """Represents a GraphQL union type."""
    name: str
    members: list[str]
    description: str | None = None

    kind = DefinitionKind.UNION


@dataclass
class IRScalar:
    """Represents a GraphQL scalar type."""
    name: str
    description: str | None = None

    kind = DefinitionKind.SCALAR


IRDefinition = Union[IRType, IREnum, IRUnion, IRScalar]


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema.

    ``definitions`` keeps schema declaration order, which is the order
    declarations are emitted in unless they are topologically sorted.
    """
    definitions: list[IRDefinition] = field(default_factory=list)

    def __post_init__(self):
        self._by_name: dict[str, IRDefinition] = {d.name: d for d in self.definitions}

    def add(self, definition: IRDefinition):
        """Append a definition, keeping the first one on name clashes."""
        if definition.name in self._by_name:
            return
        self.definitions.append(definition)
        self._by_name[definition.name] = definition

    def get(self, name: str) -> IRDefinition | None:
        """Look up a definition by name."""
        return self._by_name.get(name)

    def kind_of(self, name: str) -> DefinitionKind | None:
        """Return the kind of the named type, or None if it is unknown."""
        definition = self._by_name.get(name)
        if definition is not None:
            return definition.kind
        if name in BUILTIN_SCALARS:
            return DefinitionKind.SCALAR
        return None

    @property
    def enums(self) -> list[IREnum]:
        return [d for d in self.definitions if isinstance(d, IREnum)]

    @property
    def inputs(self) -> list[IRType]:
        return [d for d in self.definitions if isinstance(d, IRType) and d.is_input]

    @property
    def types(self) -> list[IRType]:
        return [
            d for d in self.definitions
            if isinstance(d, IRType) and d.kind is DefinitionKind.OBJECT
        ]

    @property
    def unions(self) -> list[IRUnion]:
        return [d for d in self.definitions if isinstance(d, IRUnion)]

    @property
    def scalars(self) -> list[IRScalar]:
        return [d for d in self.definitions if isinstance(d, IRScalar)]
