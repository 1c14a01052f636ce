from typing import Optional

from tree_sitter import Node
from rnstyle_tree_sitter import ASTWalker, JSXPatterns, ParseResult

from .exceptions import UnsupportedShapeError
from .logger import get_logger
from .models import ExtractorConfig, RegistryInfo

log = get_logger("registry")


class RegistryScanner:
    """Finds the file's `StyleSheet.create({...})` registry and the entry names it defines."""

    def __init__(self, config: ExtractorConfig):
        self.config = config

    def find_registry_call(self, parse_result: ParseResult) -> Optional[Node]:
        """First registry factory call in pre-order; later ones are never considered."""
        source = parse_result.source_bytes
        return ASTWalker.find_first(
            parse_result.tree.root_node,
            lambda n: JSXPatterns.is_registry_call(
                n, source, self.config.registry_type, self.config.factory_method
            ),
        )

    def find_registry(self, parse_result: ParseResult) -> Optional[RegistryInfo]:
        call = self.find_registry_call(parse_result)
        if call is None:
            log.debug("no %s.%s call found", self.config.registry_type, self.config.factory_method)
            return None

        arguments = JSXPatterns.call_arguments(call)
        if not arguments or not JSXPatterns.is_object_literal(arguments[0]):
            raise UnsupportedShapeError(
                f"{self.config.registry_type}.{self.config.factory_method} on line "
                f"{call.start_point[0] + 1} is not called with an object literal"
            )

        source = parse_result.source_bytes
        object_node = arguments[0]
        names = frozenset(
            JSXPatterns.property_key_name(pair, source)
            for pair in JSXPatterns.plain_properties(object_node)
        )
        identifier = self._bound_identifier(call, source) or self.config.registry_identifier
        log.debug("registry '%s' on line %d defines %d entries", identifier, call.start_point[0] + 1, len(names))
        return RegistryInfo(call=call, object_node=object_node, existing_names=names, identifier=identifier)

    def _bound_identifier(self, call: Node, source: bytes) -> Optional[str]:
        """Name of the variable a registry call initializes, e.g. `s` in `const s = StyleSheet.create(...)`."""
        parent = call.parent
        if parent is None or parent.type != "variable_declarator":
            return None
        if parent.child_by_field_name("value") != call:
            return None
        name = parent.child_by_field_name("name")
        if name is None or name.type != "identifier":
            return None
        return ASTWalker.get_text(name, source)
