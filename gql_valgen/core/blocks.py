"""TypeScript declaration blocks rendered from Jinja2 templates."""

from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader("gql_valgen", "templates"),
    autoescape=select_autoescape(),
    keep_trailing_newline=True,
)


def indent(text: str, count: int = 1) -> str:
    """Prefix text with ``count`` levels of two-space indentation."""
    return "  " * count + text


def const_block(name: str, content: str, exported: bool = True) -> str:
    """``export const <name> = <content>;``"""
    return _env.get_template("const.ts.j2").render(name=name, content=content, exported=exported)


def function_block(name: str, body: str, exported: bool = True) -> str:
    """``export function <name> {<body>}``; ``name`` includes the signature."""
    return _env.get_template("function.ts.j2").render(name=name, body=body, exported=exported)


def type_block(name: str, content: str, exported: bool = True) -> str:
    """``export type <name> = <content>;``"""
    return _env.get_template("type.ts.j2").render(name=name, content=content, exported=exported)
