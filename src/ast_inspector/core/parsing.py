"""Thin wrapper around the tree-sitter parser and query engine.

One ``SyntaxParser`` owns one configured grammar. A tree-sitter ``Parser`` is
not safe for concurrent use, so every call into it holds the instance lock.
"""

from __future__ import annotations

import logging
import threading
from typing import cast

from tree_sitter import Language, Node, Parser, Query, QueryCursor, QueryError, Tree
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from ast_inspector.core.errors import ParseFailure, QueryFailure
from ast_inspector.core.languages import DEFAULT_LANGUAGE, normalize_language

logger = logging.getLogger(__name__)


class SyntaxParser:
    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language_name = normalize_language(language)
        self.language: Language = get_language(cast(SupportedLanguage, self.language_name))
        self._parser: Parser = get_parser(cast(SupportedLanguage, self.language_name))
        self._lock = threading.Lock()

    def parse(self, source: str | bytes) -> Tree:
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        try:
            with self._lock:
                tree = self._parser.parse(source_bytes)
        except (ValueError, TypeError) as exc:
            raise ParseFailure(f"Could not parse {self.language_name} source: {exc}") from exc
        if tree is None:
            raise ParseFailure(f"Could not parse {self.language_name} source.")
        return tree

    def compile_query(self, query: str) -> Query:
        try:
            return Query(self.language, query)
        except (QueryError, ValueError) as exc:
            raise QueryFailure(f"Invalid query: {exc}") from exc

    def captures(self, tree: Tree, query: str) -> list[Node]:
        """Run ``query`` over ``tree`` and return captured nodes in engine capture order.

        Captures are ordered by start offset, then by the index of the pattern
        that produced them; inside one match an enclosing node precedes the
        nodes it contains. A node captured by several matches appears once per
        match.
        """
        compiled = self.compile_query(query)
        with self._lock:
            matches = QueryCursor(compiled).matches(tree.root_node)
        ranked: list[tuple[int, int, int, int, Node]] = []
        for pattern_index, by_name in matches:
            for captured in by_name.values():
                for node in captured:
                    ranked.append((node.start_byte, pattern_index, -node.end_byte, len(ranked), node))
        ranked.sort(key=lambda entry: entry[:4])
        return [entry[4] for entry in ranked]


class ParserRegistry:
    """Process-wide owner of one ``SyntaxParser`` per language.

    Built once at startup and handed to request handlers; parsers are created
    lazily on first use and reused afterwards.
    """

    def __init__(self, default_language: str = DEFAULT_LANGUAGE) -> None:
        self.default_language = normalize_language(default_language)
        self._parsers: dict[str, SyntaxParser] = {}
        self._lock = threading.Lock()

    def get(self, language: str | None = None) -> SyntaxParser:
        name = normalize_language(language) if language else self.default_language
        with self._lock:
            parser = self._parsers.get(name)
            if parser is None:
                logger.info("Loading %s grammar", name)
                parser = SyntaxParser(name)
                self._parsers[name] = parser
        return parser

    def loaded(self) -> list[str]:
        with self._lock:
            return sorted(self._parsers)
