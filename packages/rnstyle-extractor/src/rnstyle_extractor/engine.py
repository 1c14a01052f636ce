from rnstyle_tree_sitter import ASTWalker, ParseResult, TSXParser

from .exceptions import (
    MalformedTreeError,
    NoMatchError,
    OverlappingEditsError,
    UnsupportedShapeError,
)
from .locator import StyleLocator
from .logger import get_logger
from .models import ExtractionResult, ExtractorConfig
from .naming import element_tag_name, generate_name
from .planner import EditPlanner
from .registry import RegistryScanner
from .style_formatter import StyleFormatter

log = get_logger("engine")


class ExtractionEngine:
    """Core engine moving an inline style object into the file's style registry."""

    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or ExtractorConfig()
        self.parser = TSXParser()
        self.locator = StyleLocator(self.config)
        self.scanner = RegistryScanner(self.config)
        self.formatter = StyleFormatter(self.parser)
        self.planner = EditPlanner(self.config)

    def extract(self, source: str, offset: int) -> ExtractionResult:
        """Plan the extraction of the style object at a character offset.

        Never raises for bad input: the outcome is reported through the
        result's status (APPLIED, NO_OP or FATAL).
        """
        try:
            return self._extract(source, offset)
        except (NoMatchError, UnsupportedShapeError) as e:
            log.info("nothing extracted: %s", e)
            return ExtractionResult.no_op(str(e))
        except (MalformedTreeError, OverlappingEditsError) as e:
            log.error("extraction aborted: %s", e)
            return ExtractionResult.fatal(str(e))

    def _extract(self, source: str, offset: int) -> ExtractionResult:
        if not 0 <= offset <= len(source):
            raise NoMatchError(f"Cursor offset {offset} is outside the document")

        try:
            parse_result = self.parser.parse_string(source)
        except UnicodeEncodeError as e:
            # Lone surrogates from a UTF-16 buffer have no UTF-8 form
            raise MalformedTreeError(f"Document is not valid Unicode text: {e.reason} at {e.start}") from e
        for error in parse_result.errors:
            log.debug(error)

        match = self.locator.locate(parse_result, offset)
        if match is None:
            raise NoMatchError()

        registry = self.scanner.find_registry(parse_result)
        existing = registry.existing_names if registry else frozenset()
        name = generate_name(element_tag_name(match.owner, parse_result.source_bytes), existing)

        style_text = ASTWalker.get_text(match.style_object, parse_result.source_bytes)
        formatted = self.formatter.format(style_text)

        plan = self.planner.plan(match, registry, name, formatted, parse_result)
        log.info("extracting style into '%s'", name)
        return ExtractionResult.applied(plan, name)

    def parse(self, source: str) -> ParseResult:
        return self.parser.parse_string(source)
