from .ast_walker import ASTWalker
from .jsx_patterns import JSXPatterns
from .node_types import ParseResult
from .offsets import OffsetMap
from .parser import TSXParser

__all__ = ["ASTWalker", "JSXPatterns", "OffsetMap", "ParseResult", "TSXParser"]
