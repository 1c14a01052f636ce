from rnstyle_extractor.models import ExtractionResult, TextEdit
from rnstyle_tree_sitter import OffsetMap

from .models import ExtractionReport, Position, TextEditModel


def text_edit_to_model(edit: TextEdit, offsets: OffsetMap) -> TextEditModel:
    """Convert an internal edit to the external Pydantic model, adding line/character positions"""
    start_line, start_char = offsets.position_at(edit.range.start)
    end_line, end_char = offsets.position_at(edit.range.end)
    return TextEditModel(
        start=edit.range.start,
        end=edit.range.end,
        start_position=Position(line=start_line, character=start_char),
        end_position=Position(line=end_line, character=end_char),
        new_text=edit.new_content,
    )


def result_to_report(result: ExtractionResult, file_path: str, source: str) -> ExtractionReport:
    edits = []
    if result.plan is not None:
        offsets = OffsetMap(source)
        edits = [text_edit_to_model(e, offsets) for e in result.plan.edits]
    return ExtractionReport(
        file_path=file_path,
        status=result.status.value,
        message=result.message,
        entry_name=result.entry_name,
        edits=edits,
    )
