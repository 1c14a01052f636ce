from dataclasses import dataclass, field
from typing import List
from tree_sitter import Tree

from .offsets import OffsetMap


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: str
    errors: List[str]
    offsets: OffsetMap = field(init=False, repr=False)

    def __post_init__(self):
        self.offsets = OffsetMap(self.source)

    @property
    def source_bytes(self) -> bytes:
        return self.offsets.data
