"""End-to-end tests for the docinject pass."""

from __future__ import annotations

import textwrap
from pathlib import Path

from docinject.config import InjectConfig
from docinject.injector import DocgenInjector
from docinject.models import UNDEFINED
from docinject.syntax import parse_module
from tests._fixtures.extractors import FakeExtractor


def _source(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


FOO_DEFAULT_EXPORT = _source(
    """
    import React from "react";

    class Foo extends React.Component {
      render() {
        return <div>{this.props.label}</div>;
      }
    }

    export default Foo;
    """
)


def test_unnamed_record_is_attached_to_bound_name() -> None:
    extractor = FakeExtractor([{"displayName": UNDEFINED, "props": {}}])
    output = DocgenInjector(extractor=extractor).transform(FOO_DEFAULT_EXPORT, "Foo.js")

    assert output == FOO_DEFAULT_EXPORT + "Foo.__docgenInfo = {props: {}};\n"
    assert extractor.calls[0]["source"] == FOO_DEFAULT_EXPORT
    assert extractor.calls[0]["filename"] == "Foo.js"


def test_unexported_component_is_left_alone() -> None:
    source = _source(
        """
        class Bar extends React.Component {
          render() { return null; }
        }
        """
    )
    extractor = FakeExtractor([{"displayName": "Bar"}])
    output = DocgenInjector(extractor=extractor).transform(source, "Bar.js")

    assert output == source
    assert extractor.calls == []


def test_extractor_failure_leaves_module_unmodified() -> None:
    extractor = FakeExtractor(error=SyntaxError("Unexpected token (3:4)"))
    injector = DocgenInjector(extractor=extractor)
    module = parse_module(FOO_DEFAULT_EXPORT, "Foo.js")

    assert injector.process(module) is False
    assert module.body.appended == ()
    assert module.render() == FOO_DEFAULT_EXPORT


def test_empty_extraction_leaves_module_unmodified() -> None:
    output = DocgenInjector(extractor=FakeExtractor([])).transform(FOO_DEFAULT_EXPORT)
    assert output == FOO_DEFAULT_EXPORT


def test_two_components_get_independent_assignments() -> None:
    source = _source(
        """
        export const A = () => <a />;
        export function B() { return <b />; }
        """
    )
    extractor = FakeExtractor(
        [
            {"displayName": "A", "description": "", "props": {}},
            {"displayName": "B", "description": "", "props": {}},
        ]
    )
    output = DocgenInjector(extractor=extractor).transform(source, "AB.js")

    appended = output[len(source):].splitlines()
    assert appended == [
        'A.__docgenInfo = {displayName: "A", description: "", props: {}};',
        'B.__docgenInfo = {displayName: "B", description: "", props: {}};',
    ]
    assert len(extractor.calls) == 1


def test_methods_are_dropped_unless_requested() -> None:
    record = {"displayName": "Foo", "methods": [{"name": "focus"}], "props": {}}

    stripped = DocgenInjector(extractor=FakeExtractor([record])).transform(FOO_DEFAULT_EXPORT)
    kept = DocgenInjector(
        InjectConfig(include_methods=True), extractor=FakeExtractor([record])
    ).transform(FOO_DEFAULT_EXPORT)

    assert "__docgenInfo" in stripped
    assert "methods" not in stripped
    assert 'methods: [{name: "focus"}]' in kept


def test_collection_name_registers_component(tmp_path: Path) -> None:
    config = InjectConfig(root=tmp_path, collection_name="STORYBOOK_REACT_CLASSES")
    extractor = FakeExtractor([{"displayName": "Foo", "props": {}}])
    output = DocgenInjector(config, extractor=extractor).transform(
        FOO_DEFAULT_EXPORT, str(tmp_path / "src" / "Foo.js")
    )

    assert output.endswith(
        'Foo.__docgenInfo = {displayName: "Foo", props: {}};\n'
        'if (typeof STORYBOOK_REACT_CLASSES !== "undefined") {\n'
        '  STORYBOOK_REACT_CLASSES["src/Foo.js"] = '
        '{name: "Foo", docgenInfo: Foo.__docgenInfo, path: "src/Foo.js"};\n'
        "}\n"
    )


def test_legacy_global_option_enables_registry(tmp_path: Path) -> None:
    config = InjectConfig.from_options({"DOC_GEN_GLOBAL": "DOCS"}, root=tmp_path)
    extractor = FakeExtractor([{"displayName": "Foo"}])
    output = DocgenInjector(config, extractor=extractor).transform(
        FOO_DEFAULT_EXPORT, str(tmp_path / "Foo.js")
    )
    assert 'DOCS["Foo.js"] = {name: "Foo"' in output


def test_rerunning_on_output_is_a_no_op() -> None:
    extractor = FakeExtractor([{"displayName": "Foo", "props": {}}])
    injector = DocgenInjector(extractor=extractor)

    once = injector.transform(FOO_DEFAULT_EXPORT, "Foo.js")
    twice = injector.transform(once, "Foo.js")

    assert once != FOO_DEFAULT_EXPORT
    assert twice == once
    assert len(extractor.calls) == 1


def test_factory_component_exported_through_module_exports() -> None:
    source = _source(
        """
        var createReactClass = require("create-react-class");

        var Legacy = createReactClass({
          render: function () { return null; }
        });

        module.exports = Legacy;
        """
    )
    extractor = FakeExtractor([{"description": "Old style"}])
    output = DocgenInjector(extractor=extractor).transform(source, "Legacy.js")

    assert output.endswith('Legacy.__docgenInfo = {description: "Old style"};\n')


def test_wrapped_default_export_is_instrumented() -> None:
    source = _source(
        """
        const Card = ({ title }) => <section>{title}</section>;
        export default connect(mapStateToProps)(withTheme(Card));
        """
    )
    extractor = FakeExtractor([{"description": "", "props": {"title": {"required": False}}}])
    output = DocgenInjector(extractor=extractor).transform(source, "Card.js")

    assert output.endswith("Card.__docgenInfo = {description: \"\", props: {title: {required: false}}};\n")


def test_configured_resolver_reaches_extractor() -> None:
    extractor = FakeExtractor([])
    config = InjectConfig(resolver="findAllComponentDefinitions")
    DocgenInjector(config, extractor=extractor).transform(FOO_DEFAULT_EXPORT)
    assert extractor.calls[0]["resolver"] == "findAllComponentDefinitions"


def test_module_without_components_is_untouched() -> None:
    source = "export const add = (a, b) => a + b;\n"
    extractor = FakeExtractor([{"displayName": "X"}])
    assert DocgenInjector(extractor=extractor).transform(source) == source
    assert extractor.calls == []


def test_display_name_that_is_not_an_identifier_keeps_output_parseable() -> None:
    source = _source(
        """
        class Foo extends React.Component {
          render() {
            return <button />;
          }
        }
        Foo.displayName = "Fancy Button";
        export default withRouter(Foo);
        """
    )
    extractor = FakeExtractor([{"displayName": "Fancy Button", "props": {}}])
    output = DocgenInjector(extractor=extractor).transform(source, "Foo.js")

    assert output == source + 'Foo.__docgenInfo = {displayName: "Fancy Button", props: {}};\n'
    assert not parse_module(output).root.has_error


def test_call_shaped_display_name_is_not_emitted_as_an_expression() -> None:
    extractor = FakeExtractor([{"displayName": "withRouter(Foo)", "props": {}}])
    output = DocgenInjector(extractor=extractor).transform(FOO_DEFAULT_EXPORT, "Foo.js")

    assert "withRouter(Foo).__docgenInfo" not in output
    assert output.endswith('Foo.__docgenInfo = {displayName: "withRouter(Foo)", props: {}};\n')
    assert not parse_module(output).root.has_error
