"""Core modules for validation schema generation."""

from .config import (
    ExportType,
    ScalarTypes,
    TargetSchema,
    ValidationSchemaConfig,
    load_config,
)
from .context import GeneratedDeclaration, GenerationContext
from .directives import DirectiveApplier
from .emitters import MyZodEmitter, SchemaEmitter, YupEmitter, ZodEmitter
from .errors import ConfigurationError, UnknownTypeError, ValgenError
from .generator import GenerationResult, ValidationSchemaGenerator, generate
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
    ValueKind,
)
from .naming import NameResolver
from .ordering import order_declarations
from .parser import SchemaParser
from .scalars import ScalarMapper

__all__ = [
    # Config
    "ExportType",
    "ScalarTypes",
    "TargetSchema",
    "ValidationSchemaConfig",
    "load_config",
    # Errors
    "ConfigurationError",
    "UnknownTypeError",
    "ValgenError",
    # IR types
    "DefinitionKind",
    "IRDefaultValue",
    "IRDirective",
    "IRDirectiveArgument",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRScalar",
    "IRSchema",
    "IRType",
    "IRUnion",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "ValueKind",
    # Parser
    "SchemaParser",
    # Resolution
    "DirectiveApplier",
    "NameResolver",
    "ScalarMapper",
    # Emitters
    "MyZodEmitter",
    "SchemaEmitter",
    "YupEmitter",
    "ZodEmitter",
    # Generator
    "GeneratedDeclaration",
    "GenerationContext",
    "GenerationResult",
    "ValidationSchemaGenerator",
    "generate",
    "order_declarations",
]
