"""
Parser Registry for Tree-sitter

Holds the Go grammar and hands out parsers. Language objects are shared,
Parser objects are not thread-safe and are cached per thread.
"""

import threading

try:
    import tree_sitter_go
    from tree_sitter import Language, Parser, Tree
except ImportError as e:
    raise ImportError("tree-sitter-go is required. Install with: pip install tree-sitter tree-sitter-go") from e

from codegraph_mockgen.infra.observability.logging import get_logger

logger = get_logger(__name__)


class ParserRegistry:
    """
    Registry for language parsers.

    Supports:
    - Go
    """

    def __init__(self):
        self._languages: dict[str, Language] = {}
        self._local = threading.local()
        self._setup_languages()

    def _setup_languages(self):
        """Setup Tree-sitter languages"""
        self._languages["go"] = Language(tree_sitter_go.language())
        logger.debug("parser_language_loaded", language="go")

    def get_parser(self, language: str) -> Parser | None:
        """
        Get this thread's parser for the specified language.

        Args:
            language: Language name

        Returns:
            Parser instance or None if language not supported
        """
        language = language.lower()
        parsers: dict[str, Parser] = getattr(self._local, "parsers", None) or {}
        if language in parsers:
            return parsers[language]

        lang = self._languages.get(language)
        if lang is None:
            return None

        parser = Parser(lang)
        parsers[language] = parser
        self._local.parsers = parsers
        return parser

    def supports_language(self, language: str) -> bool:
        """Check if language is supported"""
        return language.lower() in self._languages

    def parse_go(self, source: str) -> Tree:
        """Parse Go source text into a syntax tree."""
        parser = self.get_parser("go")
        return parser.parse(source.encode("utf-8"))


# Global registry instance
_registry: ParserRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ParserRegistry()
    return _registry
