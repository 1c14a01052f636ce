from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

from tree_sitter import Node


@dataclass
class ExtractorConfig:
    registry_type: str = "StyleSheet"
    factory_method: str = "create"
    registry_identifier: str = "styles"
    style_attribute: str = "style"
    fallback_indent: str = "    "


@dataclass(frozen=True)
class TextRange:
    """Half-open [start, end) range of character offsets in the original document"""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid range [{self.start}, {self.end})")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: "TextRange") -> bool:
        # Touching ranges do not overlap; an empty range overlaps only when strictly inside
        if self.is_empty and other.is_empty:
            return self.start == other.start
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class TextEdit:
    range: TextRange
    new_content: str


@dataclass
class EditPlan:
    """Edits over original-document offsets, applied together as one atomic change"""
    edits: List[TextEdit] = field(default_factory=list)

    def overlapping_pairs(self) -> List[tuple]:
        pairs = []
        for i, first in enumerate(self.edits):
            for second in self.edits[i + 1:]:
                if first.range.overlaps(second.range):
                    pairs.append((first, second))
        return pairs

    def apply(self, source: str) -> str:
        """Applies non-overlapping edits in a single pass over the original text."""
        sorted_edits = sorted(self.edits, key=lambda e: (e.range.start, e.range.end))
        result = []; last_offset = 0
        for edit in sorted_edits:
            if edit.range.start < last_offset:
                raise ValueError(f"edit at {edit.range.start} overlaps a previous edit")
            result.append(source[last_offset:edit.range.start])
            result.append(edit.new_content)
            last_offset = edit.range.end
        result.append(source[last_offset:])
        return "".join(result)


@dataclass
class StyleAttributeMatch:
    """A `style` attribute holding an object literal, with the element that owns it"""
    attribute: Node
    style_object: Node
    owner: Node


@dataclass
class RegistryInfo:
    """The `StyleSheet.create({...})` call of a source unit"""
    call: Node
    object_node: Node
    existing_names: FrozenSet[str]
    identifier: str


class ExtractionStatus(str, Enum):
    APPLIED = "applied"
    NO_OP = "no-op"
    FATAL = "fatal"


@dataclass
class ExtractionResult:
    status: ExtractionStatus
    plan: Optional[EditPlan] = None
    entry_name: Optional[str] = None
    message: str = ""

    @classmethod
    def applied(cls, plan: EditPlan, entry_name: str) -> "ExtractionResult":
        return cls(ExtractionStatus.APPLIED, plan, entry_name, f"Added style: {entry_name}")

    @classmethod
    def no_op(cls, reason: str) -> "ExtractionResult":
        return cls(ExtractionStatus.NO_OP, message=reason)

    @classmethod
    def fatal(cls, reason: str) -> "ExtractionResult":
        return cls(ExtractionStatus.FATAL, message=reason)

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.APPLIED
