"""Type-shape classification for type references and definition kinds."""

from .ir import DefinitionKind, ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef


def is_named_type(type_ref: TypeRef | None) -> bool:
    return isinstance(type_ref, NamedTypeRef)


def is_list_type(type_ref: TypeRef | None) -> bool:
    return isinstance(type_ref, ListTypeRef)


def is_non_null_type(type_ref: TypeRef | None) -> bool:
    return isinstance(type_ref, NonNullTypeRef)


def is_input_kind(kind: DefinitionKind | None) -> bool:
    """Input objects are the only structured input types."""
    return kind is DefinitionKind.INPUT_OBJECT


def is_output_kind(kind: DefinitionKind | None) -> bool:
    """Output types with a validator of their own; interfaces have none."""
    return kind in (DefinitionKind.OBJECT, DefinitionKind.UNION)


def is_scalar_kind(kind: DefinitionKind | None) -> bool:
    return kind is DefinitionKind.SCALAR


def is_structured_kind(kind: DefinitionKind | None) -> bool:
    """Types with their own validator declaration (everything but scalars)."""
    return kind is not None and kind is not DefinitionKind.SCALAR
