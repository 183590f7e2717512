"""Dependency ordering of generated declarations.

With ``const`` exports a declaration is evaluated where it stands, so every
schema it references eagerly must already be defined above it.
"""

import logging

from .context import GeneratedDeclaration

logger = logging.getLogger(__name__)


def order_declarations(declarations: list[GeneratedDeclaration]) -> list[GeneratedDeclaration]:
    """Reorder declarations so dependencies come first.

    Only dependencies that are themselves declarations of this run count.
    Dependencies are visited in source order. Declarations that reference
    each other in a cycle are kept together in their relative source order;
    cyclic input references are lazy and do not depend on evaluation order.
    """
    by_name = {d.name: d for d in declarations}
    ordered = [
        by_name[name]
        for component in strongly_connected_components(declarations)
        for name in component
    ]
    if len(ordered) != len(declarations):
        logger.warning(
            "unexpected declaration count after sorting: want %d but got %d, keeping source order",
            len(declarations), len(ordered),
        )
        return list(declarations)
    return ordered


def strongly_connected_components(declarations: list[GeneratedDeclaration]) -> list[list[str]]:
    """Tarjan's algorithm, iterative, dependencies first.

    Components come out after every component they depend on; the names
    within a component are in source order.
    """
    by_name = {d.name: d for d in declarations}
    position = {d.name: i for i, d in enumerate(declarations)}

    def dependencies_of(name: str) -> list[str]:
        return sorted(
            (dep for dep in by_name[name].dependencies if dep in by_name and dep != name),
            key=position.__getitem__,
        )

    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    stack: list[str] = []
    on_stack: set[str] = set()
    components: list[list[str]] = []

    def enter(name: str):
        index[name] = lowlink[name] = len(index)
        stack.append(name)
        on_stack.add(name)

    for root in by_name:
        if root in index:
            continue
        enter(root)
        work = [(root, iter(dependencies_of(root)))]
        while work:
            name, dependencies = work[-1]
            for dep in dependencies:
                if dep not in index:
                    enter(dep)
                    work.append((dep, iter(dependencies_of(dep))))
                    break
                if dep in on_stack:
                    lowlink[name] = min(lowlink[name], index[dep])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[name])
                if lowlink[name] == index[name]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == name:
                            break
                    components.append(sorted(component, key=position.__getitem__))
    return components
