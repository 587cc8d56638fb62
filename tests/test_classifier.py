"""Tests for docinject.classifier."""

from __future__ import annotations

from docinject.classifier import ComponentClassifier
from docinject.models import ShapeKind
from tests._fixtures.trees import first_of, nodes_of


def _classify_first(parse, source: str, *kinds: str):
    module = parse(source)
    node = first_of(module, *kinds)
    return ComponentClassifier().classify(node, module)


def test_class_declaration_is_class_component(parse) -> None:
    candidate = _classify_first(
        parse,
        "class Foo extends React.Component { render() { return <div />; } }",
        "class_declaration",
    )
    assert candidate is not None
    assert candidate.shape is ShapeKind.CLASS_COMPONENT
    assert candidate.bound_name == "Foo"


def test_class_expression_takes_variable_name(parse) -> None:
    candidate = _classify_first(
        parse, "const Foo = class Inner extends React.Component {};", "class"
    )
    assert candidate is not None
    assert candidate.bound_name == "Foo"


def test_arrow_function_is_function_component(parse) -> None:
    candidate = _classify_first(parse, "export const Bar = () => <div />;", "arrow_function")
    assert candidate is not None
    assert candidate.shape is ShapeKind.FUNCTION_COMPONENT
    assert candidate.bound_name == "Bar"


def test_function_declaration_uses_own_name(parse) -> None:
    candidate = _classify_first(
        parse, "function Baz() { return <div />; }", "function_declaration"
    )
    assert candidate is not None
    assert candidate.bound_name == "Baz"


def test_anonymous_definitions_are_skipped(parse) -> None:
    assert _classify_first(parse, "export default () => <div />;", "arrow_function") is None
    assert (
        _classify_first(parse, "export default class extends React.Component {}", "class")
        is None
    )


def test_factory_calls_are_factory_components(parse) -> None:
    for source in (
        "const Foo = React.createClass({ render() { return null; } });",
        "var Foo = createReactClass({});",
        "let Foo = React.CreateClass({});",
    ):
        candidate = _classify_first(parse, source, "call_expression")
        assert candidate is not None, source
        assert candidate.shape is ShapeKind.FACTORY_CALL_COMPONENT
        assert candidate.bound_name == "Foo"


def test_create_element_assignment_is_element_component(parse) -> None:
    candidate = _classify_first(
        parse, "const Greeting = React.createElement('h1', null, 'hi');", "call_expression"
    )
    assert candidate is not None
    assert candidate.shape is ShapeKind.ELEMENT_ASSIGNMENT_COMPONENT
    assert candidate.bound_name == "Greeting"


def test_unbound_factory_calls_are_skipped(parse) -> None:
    assert _classify_first(parse, "React.createClass({});", "call_expression") is None

    module = parse("render(React.createElement(App));")
    classifier = ComponentClassifier()
    calls = nodes_of(module, "call_expression")
    assert len(calls) == 2
    assert classifier.shape_of(calls[1]) is ShapeKind.ELEMENT_ASSIGNMENT_COMPONENT
    assert all(classifier.classify(call, module) is None for call in calls)


def test_unrelated_nodes_are_not_components(parse) -> None:
    module = parse(
        """
        class Store {}
        function sum(a, b) { return a + b; }
        const value = compute();
        """
    )
    classifier = ComponentClassifier()
    nodes = nodes_of(module, *ComponentClassifier.NODE_KINDS)
    assert nodes
    assert all(classifier.classify(node, module) is None for node in nodes)


def test_predicates_can_be_replaced(parse) -> None:
    module = parse("class Widget {}")
    node = first_of(module, "class_declaration")

    default = ComponentClassifier()
    permissive = ComponentClassifier(component_class=lambda node: True)

    assert default.classify(node, module) is None
    candidate = permissive.classify(node, module)
    assert candidate is not None
    assert candidate.bound_name == "Widget"
    assert candidate.module is module
