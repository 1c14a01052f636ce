from tree_sitter import Node
from typing import Callable, Iterator, Optional, List


class ASTWalker:
    """Utilities for traversing and searching the TSX AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the AST"""
        callback(node)
        for child in node.children:
            ASTWalker.walk(child, callback)

    @staticmethod
    def iter_preorder(node: Node) -> Iterator[Node]:
        """Yield the node and all of its descendants in pre-order"""
        yield node
        for child in node.children:
            yield from ASTWalker.iter_preorder(child)

    @staticmethod
    def find_first(node: Node, predicate: Callable[[Node], bool]) -> Optional[Node]:
        """Return the first node (pre-order) matching the predicate, stopping as soon as one is found"""
        for candidate in ASTWalker.iter_preorder(node):
            if predicate(candidate):
                return candidate
        return None

    @staticmethod
    def find_parent_of_type(node: Node, *type_names: str) -> Optional[Node]:
        """Find the first parent node whose type is one of type_names"""
        current = node.parent
        while current:
            if current.type in type_names:
                return current
            current = current.parent
        return None

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Source text covered by a node"""
        data = source.encode("utf-8") if isinstance(source, str) else source
        return data[node.start_byte:node.end_byte].decode("utf-8")

    @staticmethod
    def contains_byte(node: Node, byte_offset: int) -> bool:
        """Containment test, inclusive at both ends so a cursor just after a node still hits it"""
        return node.start_byte <= byte_offset <= node.end_byte
