"""
Interface Extractor

Locates `type <Name> interface { ... }` in a compilation unit and returns
its method elements, one raw line per method, in declaration order.

The declaration is found by walking the tree-sitter parse tree rather than
by text matching, so braces nested inside method signatures and single-line
interfaces are handled.
"""

from tree_sitter import Node

from codegraph_mockgen.common.exceptions import InterfaceNotFoundError
from codegraph_mockgen.common.text import collapse_whitespace
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.parsing.parser_registry import ParserRegistry, get_registry

logger = get_logger(__name__)


class InterfaceExtractor:
    """Extracts raw method lines of a named interface from Go source."""

    def __init__(self, registry: ParserRegistry | None = None):
        self.registry = registry or get_registry()

    def extract(self, source: str, interface_name: str) -> list[str]:
        """
        Extract the method lines of an interface.

        Args:
            source: Full text of one compilation unit
            interface_name: Bare interface identifier

        Returns:
            One trimmed line per interface element, comments excluded

        Raises:
            InterfaceNotFoundError: No such interface declaration
        """
        tree = self.registry.parse_go(source)
        body = self._find_interface(tree.root_node, interface_name)
        if body is None:
            logger.warning("interface_not_found", interface=interface_name)
            raise InterfaceNotFoundError(
                f"couldn't find interface {interface_name}", {"interface": interface_name}
            )

        lines = [
            collapse_whitespace(child.text.decode("utf-8"))
            for child in body.named_children
            if child.type != "comment"
        ]
        logger.debug("interface_extracted", interface=interface_name, methods=len(lines))
        return lines

    def _find_interface(self, root: Node, name: str) -> Node | None:
        # depth-first, source order; type declarations may sit inside functions
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "type_spec":
                name_node = node.child_by_field_name("name")
                type_node = node.child_by_field_name("type")
                if (
                    name_node is not None
                    and type_node is not None
                    and type_node.type == "interface_type"
                    and name_node.text.decode("utf-8") == name
                ):
                    return type_node
            stack.extend(reversed(node.named_children))
        return None
