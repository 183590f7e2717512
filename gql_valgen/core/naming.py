"""Name conversion and resolution of referenced type names."""

import re
from dataclasses import dataclass

from .config import ValidationSchemaConfig
from .ir import DefinitionKind, IRSchema

# Words inside an identifier: acronyms, capitalized words, lowercase runs, digits
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")


def pascal_case(name: str, transform_underscore: bool = False) -> str:
    """Convert a name to PascalCase.

    Underscores are kept as word separators unless ``transform_underscore``
    is set, e.g. ``user_input`` becomes ``User_Input`` or ``UserInput``.
    """
    if not transform_underscore:
        return "_".join(pascal_case(part, True) for part in name.split("_"))
    return "".join(word[:1].upper() + word[1:].lower() for word in _WORD_RE.findall(name))


@dataclass(frozen=True)
class NameConverter:
    """A resolved reference: what it points at and its generated identifier."""
    target_kind: DefinitionKind
    converted_name: str


class NameResolver:
    """Converts schema names to generated identifiers and classifies references."""

    def __init__(self, schema: IRSchema, config: ValidationSchemaConfig):
        self.schema = schema
        self.config = config

    def convert_name(
        self,
        name: str,
        use_types_prefix: bool = True,
        transform_underscore: bool = False,
    ) -> str:
        """Apply the naming convention and the type prefix/suffix."""
        if self.config.naming_convention != "keep":
            name = pascal_case(name, transform_underscore)
        if use_types_prefix:
            name = f"{self.config.types_prefix}{name}{self.config.types_suffix}"
        return name

    def convert_enum_value(self, value: str) -> str:
        """Name of an enum member on the generated TypeScript enum."""
        return self.convert_name(value, use_types_prefix=False, transform_underscore=True)

    def args_type_name(self, type_name: str, field_name: str) -> str:
        """Name of the arguments type of an object field, e.g. ``UserPostsArgs``."""
        separator = "_" if self.config.add_underscore_to_args_type else ""
        field_part = self.convert_name(field_name, use_types_prefix=False)
        return f"{type_name}{separator}{field_part}Args"

    def resolve(self, name: str) -> NameConverter | None:
        """Classify a referenced name, or None if the schema does not know it."""
        kind = self.schema.kind_of(name)
        if kind is None:
            return None
        return NameConverter(target_kind=kind, converted_name=self.convert_name(name))

    def kind_of(self, name: str) -> DefinitionKind | None:
        return self.schema.kind_of(name)
