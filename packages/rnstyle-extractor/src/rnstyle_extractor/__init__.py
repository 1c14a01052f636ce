from .engine import ExtractionEngine
from .exceptions import (
    ExtractionError,
    MalformedTreeError,
    NoMatchError,
    OverlappingEditsError,
    UnsupportedShapeError,
)
from .host import EditorHost, InMemoryEditor, convert_style
from .models import (
    EditPlan,
    ExtractionResult,
    ExtractionStatus,
    ExtractorConfig,
    RegistryInfo,
    StyleAttributeMatch,
    TextEdit,
    TextRange,
)

__all__ = [
    "ExtractionEngine",
    "ExtractionError",
    "MalformedTreeError",
    "NoMatchError",
    "OverlappingEditsError",
    "UnsupportedShapeError",
    "EditorHost",
    "InMemoryEditor",
    "convert_style",
    "EditPlan",
    "ExtractionResult",
    "ExtractionStatus",
    "ExtractorConfig",
    "RegistryInfo",
    "StyleAttributeMatch",
    "TextEdit",
    "TextRange",
]
