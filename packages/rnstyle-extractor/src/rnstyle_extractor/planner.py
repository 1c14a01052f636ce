import re
from typing import Optional

from tree_sitter import Node
from rnstyle_tree_sitter import JSXPatterns, ParseResult

from .exceptions import OverlappingEditsError
from .logger import get_logger
from .models import EditPlan, ExtractorConfig, RegistryInfo, StyleAttributeMatch, TextEdit, TextRange

log = get_logger("planner")

LEADING_WHITESPACE = re.compile(r"^\s+")


class EditPlanner:
    """Turns a located style and a chosen entry name into the text edits of one extraction."""

    def __init__(self, config: ExtractorConfig):
        self.config = config

    def plan(
        self,
        match: StyleAttributeMatch,
        registry: Optional[RegistryInfo],
        name: str,
        formatted_style: str,
        parse_result: ParseResult,
    ) -> EditPlan:
        if registry is not None:
            identifier = registry.identifier
            insertion = self._append_entry(registry, name, formatted_style, parse_result)
        else:
            identifier = self.config.registry_identifier
            insertion = self._create_registry(identifier, name, formatted_style, parse_result)

        replacement = TextEdit(
            range=self._char_range(match.style_object, parse_result),
            new_content=f"{identifier}.{name}",
        )
        plan = EditPlan(edits=[insertion, replacement])
        if plan.overlapping_pairs():
            raise OverlappingEditsError(
                f"registry insertion at {insertion.range.start} falls inside the style being replaced"
            )
        return plan

    def _append_entry(
        self, registry: RegistryInfo, name: str, formatted_style: str, parse_result: ParseResult
    ) -> TextEdit:
        # Right after the opening brace of the registry object
        brace = parse_result.offsets.byte_to_char(registry.object_node.start_byte)
        call_start = parse_result.offsets.byte_to_char(registry.call.start_byte)
        indent = self.line_indentation(parse_result, call_start)
        log.debug("appending '%s' to existing registry '%s'", name, registry.identifier)
        return TextEdit(
            range=TextRange(brace + 1, brace + 1),
            new_content=f"\n{indent}{name}: {formatted_style},",
        )

    def _create_registry(
        self, identifier: str, name: str, formatted_style: str, parse_result: ParseResult
    ) -> TextEdit:
        offset = self.find_insert_offset(parse_result)
        log.debug("creating registry '%s' at offset %d", identifier, offset)
        block = (
            f"\nconst {identifier} = {self.config.registry_type}.{self.config.factory_method}({{\n"
            f"    {name}: {formatted_style}\n"
            "});\n"
        )
        return TextEdit(range=TextRange(offset, offset), new_content=block)

    def line_indentation(self, parse_result: ParseResult, offset: int) -> str:
        """Leading whitespace of the line holding offset, or the fallback indent if it has none."""
        line, _ = parse_result.offsets.position_at(offset)
        found = LEADING_WHITESPACE.match(parse_result.offsets.line_text(line))
        return found.group(0) if found else self.config.fallback_indent

    def find_insert_offset(self, parse_result: ParseResult) -> int:
        """Where a new registry goes: below the leading imports, past one blank line if present."""
        last_import = self._last_leading_import(parse_result.tree.root_node)
        if last_import is None:
            return 0

        source = parse_result.source
        end = parse_result.offsets.byte_to_char(last_import.end_byte)
        newline = source.find("\n", end)
        if newline == -1:
            return len(source)

        next_line = newline + 1
        next_newline = source.find("\n", next_line)
        next_text = source[next_line:] if next_newline == -1 else source[next_line:next_newline]
        if next_text.strip() == "" and next_newline != -1:
            return next_newline + 1
        return next_line

    def _last_leading_import(self, root: Node) -> Optional[Node]:
        """Last import of the leading block, or the shebang line when there are no imports."""
        last = None
        for child in root.named_children:
            if JSXPatterns.is_import_statement(child):
                last = child
            elif JSXPatterns.is_hash_bang(child):
                last = last or child
            elif JSXPatterns.is_comment(child) or JSXPatterns.is_directive(child):
                continue
            else:
                break
        return last

    def _char_range(self, node: Node, parse_result: ParseResult) -> TextRange:
        offsets = parse_result.offsets
        return TextRange(offsets.byte_to_char(node.start_byte), offsets.byte_to_char(node.end_byte))
