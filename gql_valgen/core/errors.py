"""Exceptions raised during validation schema generation."""


class ValgenError(Exception):
    """Base exception for gql-valgen errors."""
    pass


class ConfigurationError(ValgenError):
    """Raised when the generator configuration is invalid or contradictory.

    Configuration errors abort the whole run before any output is produced.
    """
    pass


class UnknownTypeError(ValgenError):
    """Raised when a named type cannot be resolved to a definition or scalar.

    Only the declaration being emitted is dropped; the rest of the run continues.
    The driver fills in ``definition`` once it knows which declaration failed.
    """

    def __init__(self, type_name: str, definition: str | None = None):
        self.type_name = type_name
        self.definition = definition
        super().__init__(type_name)

    def __str__(self) -> str:
        message = f"Unknown scalar or type {self.type_name!r}"
        if self.definition:
            message += f" referenced from {self.definition!r}"
        return message
