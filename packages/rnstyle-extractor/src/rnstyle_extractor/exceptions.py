"""Exceptions raised inside the extraction pipeline.

None of these leave ExtractionEngine.extract(); the engine turns them
into an ExtractionResult.
"""


class ExtractionError(Exception):
    """Base exception for extraction failures."""


class NoMatchError(ExtractionError):
    """The cursor is not inside an extractable style attribute."""

    def __init__(self, message: str = "No style object found at cursor position"):
        super().__init__(message)


class UnsupportedShapeError(ExtractionError):
    """Input has a shape deliberately left alone (e.g. a non-object registry argument)."""


class MalformedTreeError(ExtractionError):
    """The syntax tree violates structural assumptions (an attribute outside any element)."""


class OverlappingEditsError(ExtractionError):
    """The planned edits would touch the same text."""
