"""Tests for dependency ordering of declarations."""

import logging

from gql_valgen.core.context import GeneratedDeclaration
from gql_valgen.core.ordering import order_declarations, strongly_connected_components


def decl(name, *dependencies):
    return GeneratedDeclaration(
        name=name,
        identifier=f"{name}Schema",
        text=f"export const {name}Schema = ...;\n",
        dependencies=set(dependencies),
    )


def names(declarations):
    return [d.name for d in declarations]


class TestOrderDeclarations:
    """Tests for order_declarations."""

    def test_already_ordered(self):
        declarations = [decl("A"), decl("B", "A")]
        assert names(order_declarations(declarations)) == ["A", "B"]

    def test_dependency_moved_up(self):
        declarations = [decl("A", "B"), decl("B")]
        assert names(order_declarations(declarations)) == ["B", "A"]

    def test_chain(self):
        declarations = [decl("A", "B"), decl("B", "C"), decl("C")]
        assert names(order_declarations(declarations)) == ["C", "B", "A"]

    def test_source_order_tie_break(self):
        declarations = [decl("X"), decl("A", "D", "C"), decl("C"), decl("D")]
        assert names(order_declarations(declarations)) == ["X", "C", "D", "A"]

    def test_unknown_dependencies_ignored(self):
        declarations = [decl("A", "Color", "String"), decl("B")]
        assert names(order_declarations(declarations)) == ["A", "B"]

    def test_self_reference(self):
        declarations = [decl("A", "A")]
        assert names(order_declarations(declarations)) == ["A"]

    def test_cycle(self, caplog):
        declarations = [decl("A", "B"), decl("B", "A"), decl("C")]
        with caplog.at_level(logging.WARNING):
            ordered = order_declarations(declarations)
        assert names(ordered) == ["A", "B", "C"]
        assert caplog.text == ""

    def test_empty(self):
        assert order_declarations([]) == []

    def test_cycle_keeps_source_order(self):
        declarations = [decl("A", "B"), decl("B", "C"), decl("C", "A")]
        assert names(order_declarations(declarations)) == ["A", "B", "C"]

    def test_cycle_after_its_dependencies(self):
        declarations = [decl("C", "A"), decl("A", "B"), decl("B", "A", "D"), decl("D")]
        assert names(order_declarations(declarations)) == ["D", "A", "B", "C"]

    def test_long_chain(self):
        count = 5000
        declarations = [decl(f"T{i}", f"T{i + 1}") for i in range(count - 1)]
        declarations.append(decl(f"T{count - 1}"))
        ordered = names(order_declarations(declarations))
        assert ordered == [f"T{i}" for i in reversed(range(count))]

    def test_duplicate_names_keep_source_order(self, caplog):
        declarations = [decl("A", "B"), decl("B"), decl("A")]
        with caplog.at_level(logging.WARNING):
            ordered = order_declarations(declarations)
        assert ordered == declarations
        assert "keeping source order" in caplog.text


class TestStronglyConnectedComponents:
    """Tests for strongly_connected_components."""

    def test_components(self):
        declarations = [decl("A", "B"), decl("B", "A"), decl("C", "C"), decl("D", "A")]
        assert strongly_connected_components(declarations) == [["A", "B"], ["C"], ["D"]]
