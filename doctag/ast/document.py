"""
Tree-sitter infrastructure for source literals.
Provides grammar loading, named queries and node text helpers.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree


class JsDocument:
    """
    Wrapper for Tree-sitter parsed JavaScript source with query system.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode("utf-8")
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = Parser(self.get_language())
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query_matches(self, query_name: str) -> List[Dict[str, List[Node]]]:
        """
        Execute a named query and return captures grouped per match.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of {capture_name: [nodes]} dicts, one per match

        Raises:
            ValueError: If query is not defined
        """
        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])
        return [captures for _, captures in cursor.matches(self.root_node)]

    def get_node_text(self, node: Node) -> str:
        """Get text content of a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def get_line_range(self, node: Node) -> Tuple[int, int]:
        """Get line range for a node (0-based)."""
        return node.start_point[0], node.end_point[0]
