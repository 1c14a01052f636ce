from typing import Optional

from tree_sitter import Node
from rnstyle_tree_sitter import ASTWalker
from rnstyle_tree_sitter.jsx_patterns import JSX_ELEMENT_TYPES


def resolve_owner(attribute: Node) -> Optional[Node]:
    """Nearest ancestor of an attribute that is a markup element (paired or self-closing)."""
    return ASTWalker.find_parent_of_type(attribute, *JSX_ELEMENT_TYPES)
