"""Generator configuration.

Options use the camelCase names of the codegen plugin configuration file
(``schema``, ``validationSchemaExportType``, ``withObjectType`` ...), and can
also be given by their snake_case attribute names from Python.

Example:
    config = ValidationSchemaConfig.from_mapping({
        "schema": "zod",
        "validationSchemaExportType": "const",
        "directives": {"constraint": {"minLength": "min"}},
    })
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Mapping, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class TargetSchema(str, Enum):
    """Target validation libraries."""
    YUP = "yup"
    ZOD = "zod"
    MYZOD = "myzod"


class ExportType(str, Enum):
    """How validators are declared in the generated code."""
    FUNCTION = "function"  # export function XSchema() { return ... }
    CONST = "const"        # export const XSchema = ...;


class ScalarTypes(BaseModel):
    """TypeScript types of a scalar, per direction."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    input: str = "any"
    output: str = "any"


# directive name -> argument name -> API, [API, template...] or {value: API}
DirectiveObjectArguments = dict[str, Union[str, list[str]]]
DirectiveConfig = dict[str, dict[str, Union[str, list[str], DirectiveObjectArguments]]]


class ValidationSchemaConfig(BaseModel):
    """Configuration of one generation run."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    target: TargetSchema = Field(TargetSchema.YUP, alias="schema")
    export_type: ExportType = Field(ExportType.FUNCTION, alias="validationSchemaExportType")
    with_object_type: bool = Field(False, alias="withObjectType")
    directives: DirectiveConfig = Field(default_factory=dict)
    scalar_schemas: dict[str, str] = Field(default_factory=dict, alias="scalarSchemas")
    scalars: dict[str, Union[str, ScalarTypes]] = Field(default_factory=dict)
    enums_as_types: bool = Field(False, alias="enumsAsTypes")
    not_allow_empty_string: bool = Field(False, alias="notAllowEmptyString")
    import_from: str | None = Field(None, alias="importFrom")
    use_type_imports: bool = Field(False, alias="useTypeImports")
    naming_convention: Literal["change-case-all#pascalCase", "keep"] = Field(
        "change-case-all#pascalCase", alias="namingConvention"
    )
    types_prefix: str = Field("", alias="typesPrefix")
    types_suffix: str = Field("", alias="typesSuffix")
    add_underscore_to_args_type: bool = Field(False, alias="addUnderscoreToArgsType")

    @model_validator(mode="after")
    def _check_enum_imports(self):
        # Enums declared with the runtime enum object need a value import
        if self.use_type_imports and not self.enums_as_types:
            raise ValueError(
                "useTypeImports requires enumsAsTypes: enum schemas reference "
                "the enum object at runtime, which a type-only import erases"
            )
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ValidationSchemaConfig":
        """Validate a raw option mapping, raising ConfigurationError on failure.

        Options this generator does not know are ignored, since codegen
        configuration files share one option block between plugins.
        """
        data = dict(data or {})
        known = set(cls.model_fields)
        known.update(f.alias for f in cls.model_fields.values() if f.alias)
        for key in data:
            if key not in known:
                logger.debug("Ignoring unknown option %s", key)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def scalar_ts_type(self, name: str, direction: str) -> str | None:
        """TypeScript type configured for a scalar, or None if not configured."""
        configured = self.scalars.get(name)
        if configured is None:
            return None
        if isinstance(configured, str):
            return configured
        return getattr(configured, direction)


def load_config(path: str | Path, overrides: Mapping[str, Any] | None = None) -> ValidationSchemaConfig:
    """Load configuration from a YAML or JSON file.

    ``overrides`` take precedence over the file's values.
    """
    path = Path(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of options")
    logger.debug("Loaded %d options from %s", len(data), path)
    data.update(overrides or {})
    return ValidationSchemaConfig.from_mapping(data)
