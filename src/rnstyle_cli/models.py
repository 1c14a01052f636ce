from pydantic import BaseModel


class Position(BaseModel):
    line: int
    character: int


class TextEditModel(BaseModel):
    start: int
    end: int
    start_position: Position
    end_position: Position
    new_text: str


class ExtractionReport(BaseModel):
    """External, JSON-serializable view of an extraction for editor plugins"""

    file_path: str
    status: str
    message: str
    entry_name: str | None = None
    edits: list[TextEditModel] = []
