import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult

# .jsx and .tsx sources are both parsed with the TSX grammar
TSX_LANGUAGE = Language(tsts.language_tsx())


class TSXParser:
    """Parses React sources into tree-sitter trees"""

    def __init__(self):
        self.parser = Parser(TSX_LANGUAGE)

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf-8"))
        result = ParseResult(tree=tree, source=source, errors=[])
        if tree.root_node.has_error:
            result.errors = self._collect_errors(tree.root_node, result.source_bytes)
        return result

    def _collect_errors(self, root: Node, data: bytes) -> list[str]:
        errors = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR":
                text = data[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
                errors.append(f"syntax error at {node.start_point[0] + 1}:{node.start_point[1] + 1}: {text[:40]!r}")
            elif node.is_missing:
                errors.append(f"missing '{node.type}' at {node.start_point[0] + 1}:{node.start_point[1] + 1}")
            if node.has_error:
                stack.extend(reversed(node.children))
        return errors
