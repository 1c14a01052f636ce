from typing import Optional

from tree_sitter import Node
from rnstyle_tree_sitter import ASTWalker, JSXPatterns, ParseResult

from .exceptions import MalformedTreeError
from .logger import get_logger
from .models import ExtractorConfig, StyleAttributeMatch
from .resolver import resolve_owner

log = get_logger("locator")


class StyleLocator:
    """Finds the inline style object under the cursor."""

    def __init__(self, config: ExtractorConfig):
        self.config = config

    def locate(self, parse_result: ParseResult, offset: int) -> Optional[StyleAttributeMatch]:
        """Innermost `style={{...}}` attribute whose range contains the character offset.

        Returns None when there is nothing to extract. Raises
        MalformedTreeError when the attribute has no owning element.
        """
        byte_offset = parse_result.offsets.char_to_byte(offset)
        found = self._search(parse_result.tree.root_node, byte_offset, parse_result.source_bytes)
        if found is None:
            return None

        attribute, style_object = found
        owner = resolve_owner(attribute)
        if owner is None:
            raise MalformedTreeError(
                f"style attribute at line {attribute.start_point[0] + 1} has no enclosing element"
            )
        log.debug(
            "matched %s attribute on line %d", self.config.style_attribute, attribute.start_point[0] + 1
        )
        return StyleAttributeMatch(attribute=attribute, style_object=style_object, owner=owner)

    def _search(self, node: Node, byte_offset: int, source: bytes) -> Optional[tuple[Node, Node]]:
        # Children first, so a nested element's attribute beats anything enclosing it
        for child in node.children:
            if ASTWalker.contains_byte(child, byte_offset):
                found = self._search(child, byte_offset, source)
                if found is not None:
                    return found

        if node.type != "jsx_attribute":
            return None
        if not JSXPatterns.is_style_attribute(node, source, self.config.style_attribute):
            return None

        value = JSXPatterns.attribute_value(node)
        if value is None:
            return None
        if JSXPatterns.is_reference_expression(value):
            log.debug("style on line %d is already a reference, skipping", node.start_point[0] + 1)
            return None
        if not JSXPatterns.is_object_literal(value):
            log.debug("style on line %d is a %s, not an object literal", node.start_point[0] + 1, value.type)
            return None
        return node, value
