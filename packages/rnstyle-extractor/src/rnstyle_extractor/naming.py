from typing import AbstractSet

from tree_sitter import Node
from rnstyle_tree_sitter import ASTWalker, JSXPatterns

FALLBACK_BASE_NAME = "element"


def element_tag_name(element: Node, source: bytes | str) -> str:
    """Tag of a plain identifier element (`View`); anything else (`Animated.View`, `svg:rect`) is `element`."""
    tag = JSXPatterns.element_tag_node(element)
    if tag is None or tag.type != "identifier":
        return FALLBACK_BASE_NAME
    return ASTWalker.get_text(tag, source)


def generate_name(tag_name: str, existing_names: AbstractSet[str]) -> str:
    """Registry entry name for an element: `Text` -> `text`, then `text1`, `text2`, ... when taken."""
    base = tag_name[:1].lower() + tag_name[1:] if tag_name else FALLBACK_BASE_NAME
    if base not in existing_names:
        return base

    counter = 1
    while f"{base}{counter}" in existing_names:
        counter += 1
    return f"{base}{counter}"
