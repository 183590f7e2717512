"""Directive-driven refinements.

Maps directives applied to schema fields onto chained validator calls, as
configured by the ``directives`` option:

    directives:
      constraint:
        minLength: min                # .min(<minLength>)
        startsWith: [matches, /^$1/]  # .matches(/^<startsWith>/)
        format:
          email: email                # .email() when format is "email"

so that ``@constraint(minLength: 1, format: "email")`` becomes
``.min(1).email()``.
"""

import json
import re
from typing import Any

from .ir import IRDirective, IRField, ValueKind

# Normalized config: directive -> argument -> [API, template...] or {value: [API, template...]}
FormattedDirectiveConfig = dict[str, dict[str, Any]]

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")
_REGEXP_RE = re.compile(r"^/.*/[dgimsuy]*$")
_MISSING = object()


def format_directive_config(config: dict[str, dict[str, Any]]) -> FormattedDirectiveConfig:
    """Normalize shorthand entries into lists of ``[API, template...]``."""
    formatted = {}
    for directive, arguments in config.items():
        formatted_arguments = {}
        for argument, value in arguments.items():
            if isinstance(value, list):
                formatted_arguments[argument] = list(value)
            elif isinstance(value, str):
                formatted_arguments[argument] = [value, "$1"]
            else:
                formatted_arguments[argument] = format_directive_object_arguments(value)
        formatted[directive] = formatted_arguments
    return formatted


def format_directive_object_arguments(arguments: dict[str, Any]) -> dict[str, list[str]]:
    """Normalize a value-matched table, where a plain API takes no arguments."""
    return {
        matched: list(value) if isinstance(value, list) else [value]
        for matched, value in arguments.items()
    }


def is_convertible_regexp(value: str) -> bool:
    """Check if a string is a regular expression literal such as ``/^a/i``."""
    return bool(_REGEXP_RE.match(value))


def _js_string(value: Any) -> str:
    """String conversion as a JavaScript template literal would do it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(_js_string(v) for v in value)
    return str(value)


def stringify(value: Any, quote_string: bool = False) -> str:
    """Render an argument value as a TypeScript expression."""
    if isinstance(value, list):
        return ",".join(stringify(v, True) for v in value)
    if isinstance(value, str):
        if is_convertible_regexp(value):
            return value
        if quote_string:
            return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (bool, int, float)):
        return _js_string(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def apply_arg_to_api_schema_template(template: str, api_args: list[Any]) -> str:
    """Substitute ``$1``, ``$2`` ... in a template with directive argument values."""
    for match in _PLACEHOLDER_RE.finditer(template):
        placeholder = match.group(0)
        index = int(match.group(1)) - 1
        api_arg = api_args[index] if 0 <= index < len(api_args) else _MISSING
        if api_arg is _MISSING:
            template = template.replace(placeholder, "", 1)
            continue
        if template == placeholder:
            return stringify(api_arg)
        template = template.replace(placeholder, _js_string(api_arg), 1)
    if template != "":
        return stringify(template, True)
    return template


def _api_args(value: Any) -> list[Any]:
    return value if isinstance(value, list) else [value]


def build_api_schema(validation_schema: list[str] | None, value: Any) -> str:
    """Build one ``.api(args)`` call, or '' when nothing is configured."""
    if not validation_schema:
        return ""
    api, *templates = validation_schema
    args = [apply_arg_to_api_schema_template(t, _api_args(value)) for t in templates]
    return f".{api}({', '.join(args)})"


def build_api_from_directive_object_arguments(
    config: dict[str, list[str]], value: Any, kind: ValueKind
) -> str:
    """Select the API whose key equals the argument value (strings and enums only)."""
    if kind not in (ValueKind.STRING, ValueKind.ENUM):
        return ""
    return build_api_schema(config.get(value), value)


def build_api_from_directive(config: dict[str, Any], directive: IRDirective) -> str:
    calls = []
    for argument in directive.arguments:
        validation_schema = config.get(argument.name)
        if isinstance(validation_schema, dict):
            calls.append(build_api_from_directive_object_arguments(
                validation_schema, argument.value, argument.kind
            ))
        else:
            calls.append(build_api_schema(validation_schema, argument.value))
    return "".join(calls)


def build_api(config: FormattedDirectiveConfig, directives: list[IRDirective]) -> str:
    """Chained calls for every configured directive, in the order applied."""
    return "".join(
        build_api_from_directive(config[directive.name], directive)
        for directive in directives
        if directive.name in config
    )


class DirectiveApplier:
    """Appends configured directive refinements to validator expressions."""

    def __init__(self, directives: dict[str, dict[str, Any]]):
        self.config = format_directive_config(directives)

    def apply(self, expression: str, field: IRField) -> str:
        if not self.config or not field.directives:
            return expression
        return expression + build_api(self.config, field.directives)
