from rnstyle_tree_sitter import ASTWalker, JSXPatterns, TSXParser

INDENT = "  "


class StyleFormatter:
    """Re-renders an inline style object one property per line.

    Values are copied verbatim; only `key: value` pairs survive, so
    spreads, shorthands and computed keys are dropped.
    """

    def __init__(self, parser: TSXParser | None = None):
        self.parser = parser or TSXParser()

    def format(self, style_text: str) -> str:
        # Parenthesized so the braces parse as an object, not a block
        parse_result = self.parser.parse_string(f"({style_text})")
        source = parse_result.source_bytes

        obj = ASTWalker.find_first(parse_result.tree.root_node, JSXPatterns.is_object_literal)
        if obj is None:
            return style_text

        lines = []
        for pair in JSXPatterns.plain_properties(obj):
            key = ASTWalker.get_text(pair.child_by_field_name("key"), source)
            value = ASTWalker.get_text(pair.child_by_field_name("value"), source)
            lines.append(f"{INDENT}{key}: {value}")

        if not lines:
            return "{}"
        return "{\n" + ",\n".join(lines) + "\n}"
