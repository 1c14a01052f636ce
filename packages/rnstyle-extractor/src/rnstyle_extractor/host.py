"""Editor integration: the capabilities a host editor provides, and the command built on them."""

from typing import List, Protocol

from .engine import ExtractionEngine
from .logger import get_logger
from .models import EditPlan, ExtractionResult

log = get_logger("host")


class EditorHost(Protocol):
    """Capabilities injected by the host editor"""

    def get_document_text(self) -> str: ...

    def get_cursor_offset(self) -> int: ...

    def apply_edits(self, plan: EditPlan) -> bool: ...

    def notify(self, message: str) -> None: ...


class InMemoryEditor:
    """A text buffer with a cursor, standing in for a real editor"""

    def __init__(self, text: str, cursor_offset: int = 0):
        self.text = text
        self.cursor_offset = cursor_offset
        self.notifications: List[str] = []
        self.history: List[str] = []

    def get_document_text(self) -> str:
        return self.text

    def get_cursor_offset(self) -> int:
        return self.cursor_offset

    def apply_edits(self, plan: EditPlan) -> bool:
        # All or nothing: the buffer only changes if every edit applies
        try:
            new_text = plan.apply(self.text)
        except ValueError as e:
            log.error("could not apply edits: %s", e)
            return False
        self.history.append(self.text)
        self.text = new_text
        return True

    def undo(self) -> bool:
        if not self.history:
            return False
        self.text = self.history.pop()
        return True

    def notify(self, message: str) -> None:
        self.notifications.append(message)


def convert_style(host: EditorHost, engine: ExtractionEngine | None = None) -> ExtractionResult:
    """Extract the style under the host's cursor and apply the edits through the host."""
    engine = engine or ExtractionEngine()
    result = engine.extract(host.get_document_text(), host.get_cursor_offset())

    if result.ok:
        if not host.apply_edits(result.plan):
            result = ExtractionResult.fatal("Failed to apply edits")
    host.notify(result.message)
    return result
