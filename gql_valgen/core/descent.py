"""Recursive type descent: from a field's type reference to a validator expression.

The describer unwraps List/NonNull/Named wrappers outer-to-inner and decides,
from the parent wrapper, which nullability combinator the leaf receives. It is
the single place nullability semantics live; the per-library differences are
confined to a ``Vocabulary`` table.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .blocks import indent
from .config import ExportType, ValidationSchemaConfig
from .context import GenerationContext
from .directives import DirectiveApplier
from .ir import DefinitionKind, IRField, TypeRef, ValueKind
from .naming import NameResolver
from .scalars import ScalarMapper
from .shapes import is_input_kind, is_list_type, is_named_type, is_non_null_type, is_output_kind

logger = logging.getLogger(__name__)


class Nullability(Enum):
    """Position of a named leaf relative to its parent wrapper."""
    REQUIRED = "required"          # T!
    LIST_ELEMENT = "list_element"  # [T]
    OPTIONAL = "optional"          # T


@dataclass(frozen=True)
class Vocabulary:
    """Library-specific call syntax and nullability combinators.

    Attributes:
        module: Namespace of the library in generated code, e.g. "z"
        nullability: Combinator appended to a named leaf, per position
        required_list: Suffix of an array under NonNull
        nullable_list: Suffix of an array that may be null/undefined
        non_empty_string: Replaces the REQUIRED combinator for string scalars
            when empty strings are rejected
        field_level_refinements: Apply directives and defaults to the whole
            field expression, then mark non-required fields ``.optional()``
        bare_input_references: Input object references get no combinator
            in non-required positions
    """
    module: str
    nullability: dict[Nullability, str] = field(default_factory=dict)
    required_list: str = ""
    nullable_list: str = ""
    non_empty_string: str = ".min(1)"
    field_level_refinements: bool = False
    bare_input_references: bool = False

    def array(self, expression: str) -> str:
        return f"{self.module}.array({expression})"

    def lazy(self, expression: str) -> str:
        return f"{self.module}.lazy(() => {expression})"


class FieldTypeDescriber:
    """Builds validator expressions for fields of one declaration direction."""

    def __init__(
        self,
        vocabulary: Vocabulary,
        config: ValidationSchemaConfig,
        resolver: NameResolver,
        scalars: ScalarMapper,
        directives: DirectiveApplier,
        context: GenerationContext,
    ):
        self.vocabulary = vocabulary
        self.config = config
        self.resolver = resolver
        self.scalars = scalars
        self.directives = directives
        self.context = context

    def describe_field(self, field: IRField, indent_count: int = 2) -> str:
        """Render the ``name: expression`` line of an object shape."""
        expression = self.describe(field.type, None, field)
        if self.vocabulary.field_level_refinements:
            expression = self.directives.apply(expression, field)
        line = indent(f"{field.name}: {self.maybe_lazy(field.type, expression)}", indent_count)
        if self.vocabulary.field_level_refinements:
            line = self.apply_default(line, field)
            if not is_non_null_type(field.type):
                line += ".optional()"
        return line

    def describe(self, type_ref: TypeRef, parent: TypeRef | None, field: IRField) -> str:
        """Validator expression for ``type_ref`` nested directly in ``parent``."""
        vocabulary = self.vocabulary
        if is_list_type(type_ref):
            element = self.describe(type_ref.of_type, type_ref, field)
            array = vocabulary.array(self.maybe_lazy(type_ref.of_type, element))
            if not is_non_null_type(parent):
                if not vocabulary.field_level_refinements:
                    array = self.directives.apply(array, field)
                return array + vocabulary.nullable_list
            return array + vocabulary.required_list

        if is_non_null_type(type_ref):
            inner = self.describe(type_ref.of_type, type_ref, field)
            return self.maybe_lazy(type_ref.of_type, inner)

        if is_named_type(type_ref):
            name = type_ref.name
            expression = self.describe_named(name)
            if is_list_type(parent):
                return expression + self._combinator(Nullability.LIST_ELEMENT, name)
            if not vocabulary.field_level_refinements:
                expression = self.directives.apply(expression, field)
                expression = self.apply_default(expression, field)
            if is_non_null_type(parent):
                if self.scalars.should_reject_empty_string(name):
                    return expression + vocabulary.non_empty_string
                return expression + self._combinator(Nullability.REQUIRED, name)
            return expression + self._combinator(Nullability.OPTIONAL, name)

        logger.warning("unhandled type: %r", type_ref)
        return ""

    def describe_named(self, name: str) -> str:
        """Reference to a declared validator, or a scalar's primitive validator."""
        converter = self.resolver.resolve(name)
        kind = converter.target_kind if converter else None
        if is_input_kind(kind) or is_output_kind(kind):
            self.context.references.add(name)
            if self.config.export_type is ExportType.CONST:
                return f"{converter.converted_name}Schema"
            return f"{converter.converted_name}Schema()"
        if kind is DefinitionKind.ENUM:
            self.context.references.add(name)
            return f"{converter.converted_name}Schema"
        return self.scalars.map(name)

    def maybe_lazy(self, type_ref: TypeRef, expression: str) -> str:
        """Defer construction of input object references, which may be cyclic."""
        if is_named_type(type_ref) and is_input_kind(self.resolver.kind_of(type_ref.name)):
            return self.vocabulary.lazy(expression)
        return expression

    def apply_default(self, expression: str, field: IRField) -> str:
        """Append ``.default(...)`` for primitive default values of input values."""
        default = field.default_value
        if not field.is_input or default is None:
            return expression
        if default.kind in (ValueKind.INT, ValueKind.FLOAT, ValueKind.BOOLEAN):
            return f"{expression}.default({default.literal})"
        if default.kind in (ValueKind.STRING, ValueKind.ENUM):
            return f'{expression}.default("{_escape(default.literal)}")'
        return expression

    def _combinator(self, nullability: Nullability, name: str) -> str:
        if (
            nullability is not Nullability.REQUIRED
            and self.vocabulary.bare_input_references
            and is_input_kind(self.resolver.kind_of(name))
        ):
            return ""
        return self.vocabulary.nullability.get(nullability, "")


def _escape(literal: str) -> str:
    return literal.replace("\\", "\\\\").replace('"', '\\"')
