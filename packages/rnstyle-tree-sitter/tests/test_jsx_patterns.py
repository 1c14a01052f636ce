import pytest
from rnstyle_tree_sitter import ASTWalker, JSXPatterns, TSXParser


def first_of_type(result, type_name):
    nodes = ASTWalker.find_all_by_type(result.tree.root_node, type_name)
    assert nodes, f"no {type_name} in tree"
    return nodes[0]


def test_style_attribute_with_object_value():
    parser = TSXParser()
    result = parser.parse_string("<View style={{ flex: 1 }} />;")

    attribute = first_of_type(result, "jsx_attribute")
    assert JSXPatterns.attribute_name(attribute, result.source) == "style"
    assert JSXPatterns.is_style_attribute(attribute, result.source)

    value = JSXPatterns.attribute_value(attribute)
    assert JSXPatterns.is_object_literal(value)
    assert ASTWalker.get_text(value, result.source) == "{ flex: 1 }"


def test_style_attribute_with_reference_value():
    parser = TSXParser()
    result = parser.parse_string("<View style={styles.container} />;")

    value = JSXPatterns.attribute_value(first_of_type(result, "jsx_attribute"))
    assert JSXPatterns.is_reference_expression(value)
    assert not JSXPatterns.is_object_literal(value)


def test_bare_identifier_is_reference():
    parser = TSXParser()
    result = parser.parse_string("<View style={container} />;")

    value = JSXPatterns.attribute_value(first_of_type(result, "jsx_attribute"))
    assert value.type == "identifier"
    assert JSXPatterns.is_reference_expression(value)


def test_valueless_attribute_has_no_value():
    parser = TSXParser()
    result = parser.parse_string("<Button disabled />;")

    attribute = first_of_type(result, "jsx_attribute")
    assert JSXPatterns.attribute_value(attribute) is None
    assert not JSXPatterns.is_style_attribute(attribute, result.source)


def test_attribute_value_skips_comments():
    parser = TSXParser()
    result = parser.parse_string("<View style={/* inline */ { margin: 2 }} />;")

    value = JSXPatterns.attribute_value(first_of_type(result, "jsx_attribute"))
    assert JSXPatterns.is_object_literal(value)


def test_string_attribute_value_is_not_unwrapped():
    parser = TSXParser()
    result = parser.parse_string('<div style="color: red" />;')

    value = JSXPatterns.attribute_value(first_of_type(result, "jsx_attribute"))
    assert value.type == "string"


def test_element_tag_node_for_paired_and_self_closing():
    parser = TSXParser()
    result = parser.parse_string("<View><Text /></View>;")

    paired = first_of_type(result, "jsx_element")
    closing = first_of_type(result, "jsx_self_closing_element")
    assert JSXPatterns.is_jsx_element(paired)
    assert JSXPatterns.is_jsx_element(closing)
    assert ASTWalker.get_text(JSXPatterns.element_tag_node(paired), result.source) == "View"
    assert ASTWalker.get_text(JSXPatterns.element_tag_node(closing), result.source) == "Text"


def test_member_expression_tag():
    parser = TSXParser()
    result = parser.parse_string("<Animated.View />;")

    tag = JSXPatterns.element_tag_node(first_of_type(result, "jsx_self_closing_element"))
    assert tag.type != "identifier"
    assert ASTWalker.get_text(tag, result.source) == "Animated.View"


def test_plain_properties_skip_spread_shorthand_and_computed():
    parser = TSXParser()
    result = parser.parse_string("x = { ...base, flex, [key]: 1, 'quoted': 2, color: 'red' };")

    obj = first_of_type(result, "object")
    names = [JSXPatterns.property_key_name(p, result.source) for p in JSXPatterns.plain_properties(obj)]
    assert names == ["quoted", "color"]


@pytest.mark.parametrize(
    "code, expected",
    [
        ("StyleSheet.create({});", True),
        ("StyleSheet.compose(a, b);", False),
        ("Sheet.create({});", False),
        ("create({});", False),
        ("this.StyleSheet.create({});", False),
    ],
)
def test_is_registry_call(code, expected):
    parser = TSXParser()
    result = parser.parse_string(code)

    call = first_of_type(result, "call_expression")
    assert JSXPatterns.is_registry_call(call, result.source, "StyleSheet", "create") is expected


def test_call_arguments():
    parser = TSXParser()
    result = parser.parse_string("StyleSheet.create({ a: {} }, /* note */ extra);")

    arguments = JSXPatterns.call_arguments(first_of_type(result, "call_expression"))
    assert [a.type for a in arguments] == ["object", "identifier"]


def test_import_and_directive_statements():
    parser = TSXParser()
    result = parser.parse_string("'use client';\nimport React from 'react';\nfoo();\n")

    directive, import_stmt, call = result.tree.root_node.named_children
    assert JSXPatterns.is_directive(directive)
    assert JSXPatterns.is_import_statement(import_stmt)
    assert not JSXPatterns.is_directive(call)
    assert not JSXPatterns.is_import_statement(call)


def test_parse_errors_are_collected():
    parser = TSXParser()
    result = parser.parse_string("const x = <View style={{ flex: 1 }} ;")

    assert result.errors
    assert result.tree is not None


def test_clean_source_has_no_errors():
    parser = TSXParser()
    result = parser.parse_string("const x = <View style={{ flex: 1 }} />;")

    assert result.errors == []
