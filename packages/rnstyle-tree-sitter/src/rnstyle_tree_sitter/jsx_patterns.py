"""JSX / JavaScript-specific AST pattern recognition."""

from typing import List, Optional

from tree_sitter import Node
from .ast_walker import ASTWalker

JSX_ELEMENT_TYPES = ("jsx_element", "jsx_self_closing_element")
REFERENCE_TYPES = ("identifier", "member_expression")


class JSXPatterns:
    """Recognize JSX and object-literal patterns in the AST."""

    @staticmethod
    def is_jsx_element(node: Node) -> bool:
        """Paired (<View>...</View>) or self-closing (<View />) markup element."""
        return node.type in JSX_ELEMENT_TYPES

    @staticmethod
    def is_object_literal(node: Node) -> bool:
        return node.type == "object"

    @staticmethod
    def is_reference_expression(node: Node) -> bool:
        """Bare identifier (`foo`) or property access (`styles.foo`).

        A style attribute holding one of these already points somewhere
        else and is not extracted again.
        """
        return node.type in REFERENCE_TYPES

    @staticmethod
    def attribute_name(node: Node, source: bytes | str) -> str | None:
        if node.type != "jsx_attribute" or not node.children:
            return None
        return ASTWalker.get_text(node.children[0], source)

    @staticmethod
    def is_style_attribute(node: Node, source: bytes | str, attribute_name: str = "style") -> bool:
        return JSXPatterns.attribute_name(node, source) == attribute_name

    @staticmethod
    def attribute_value(node: Node) -> Optional[Node]:
        """Value of a jsx_attribute with one `{...}` expression container unwrapped.

        Returns None for valueless attributes (`<Foo disabled />`) and for
        empty containers (`style={}`).
        """
        children = node.children
        value = None
        for i, child in enumerate(children):
            if child.type == "=" and i + 1 < len(children):
                value = children[i + 1]
                break
        if value is None or value.type != "jsx_expression":
            return value

        inner = [c for c in value.named_children if c.type != "comment"]
        return inner[0] if inner else None

    @staticmethod
    def element_tag_node(element: Node) -> Optional[Node]:
        """Name node of an element's tag (`View`, `Animated.View`, `svg:rect`)."""
        if element.type == "jsx_element":
            opening = ASTWalker.get_child_of_type(element, "jsx_opening_element")
        elif element.type == "jsx_self_closing_element":
            opening = element
        else:
            return None
        if opening is None:
            return None
        return opening.child_by_field_name("name")

    @staticmethod
    def plain_properties(obj: Node) -> List[Node]:
        """`key: value` pairs of an object literal.

        Shorthand properties, methods, spreads and computed keys are left out.
        """
        result = []
        for child in obj.named_children:
            if child.type != "pair":
                continue
            key = child.child_by_field_name("key")
            if key is None or key.type == "computed_property_name":
                continue
            result.append(child)
        return result

    @staticmethod
    def property_key_name(pair: Node, source: bytes | str) -> str:
        """Key of a pair as a name; quoted keys lose their quotes."""
        key = pair.child_by_field_name("key")
        text = ASTWalker.get_text(key, source)
        if key.type == "string" and len(text) >= 2:
            return text[1:-1]
        return text

    @staticmethod
    def is_registry_call(node: Node, source: bytes | str, type_name: str, method_name: str) -> bool:
        """Check for a `<type_name>.<method_name>(...)` call, e.g. `StyleSheet.create(...)`."""
        if node.type != "call_expression":
            return False

        function = node.child_by_field_name("function")
        if function is None or function.type != "member_expression":
            return False

        target = function.child_by_field_name("object")
        method = function.child_by_field_name("property")
        if target is None or method is None or target.type != "identifier":
            return False

        return (
            ASTWalker.get_text(target, source) == type_name
            and ASTWalker.get_text(method, source) == method_name
        )

    @staticmethod
    def call_arguments(call: Node) -> List[Node]:
        arguments = call.child_by_field_name("arguments")
        # Tagged templates put a template_string where the argument list would be
        if arguments is None or arguments.type != "arguments":
            return []
        return [c for c in arguments.named_children if c.type != "comment"]

    @staticmethod
    def is_import_statement(node: Node) -> bool:
        return node.type == "import_statement"

    @staticmethod
    def is_directive(node: Node) -> bool:
        """Prologue directive such as `'use client';`."""
        if node.type != "expression_statement":
            return False
        named = [c for c in node.named_children if c.type != "comment"]
        return len(named) == 1 and named[0].type == "string"

    @staticmethod
    def is_hash_bang(node: Node) -> bool:
        """`#!/usr/bin/env node` on the first line."""
        return node.type == "hash_bang_line"

    @staticmethod
    def is_comment(node: Node) -> bool:
        return node.type == "comment"
