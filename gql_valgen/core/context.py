"""Per-run generation state."""

from dataclasses import dataclass, field


@dataclass
class GeneratedDeclaration:
    """One top-level declaration of the generated module."""
    name: str  # schema type name
    identifier: str  # e.g. "UserSchema"
    text: str
    # Schema type names referenced by the declaration
    dependencies: set[str] = field(default_factory=set)


@dataclass
class GenerationContext:
    """Accumulators owned by a single generation run.

    Attributes:
        enum_declarations: Hoisted enum declarations, in first-visited order
        import_types: Type names to import from ``importFrom``
        references: Type names referenced by the declaration being emitted
    """
    enum_declarations: list[str] = field(default_factory=list)
    import_types: list[str] = field(default_factory=list)
    references: set[str] = field(default_factory=set)

    def start_declaration(self) -> set[str]:
        """Reset the reference set for a new declaration and return it."""
        self.references = set()
        return self.references

    def add_import(self, type_name: str):
        if type_name not in self.import_types:
            self.import_types.append(type_name)
