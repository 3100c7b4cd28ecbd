"""
Main processing pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .aggregator import DocAggregator
from .ast import iter_class_literals
from .config import DoctagConfig
from .errors import ConfigValueError
from .extractor import ConfigLiteralExtractor
from .formatter import Formatter, InlineFormatter
from .render import RenderDispatcher, RenderedDoc
from .scanner import split_block
from .tags.base import ClassConfig, DocRecord, Fragment
from .tags.registry import TagRegistry

logger = logging.getLogger(__name__)


@dataclass
class ParsedComment:
    body: str
    fragments: List[Fragment]
    record: DocRecord
    unresolved: List[str] = field(default_factory=list)


@dataclass
class DefinedClass:
    cls: ClassConfig
    line: int
    errors: List[ConfigValueError] = field(default_factory=list)


class Engine:
    """
    Engine coordinating class.

    Manages interaction between components:
    - TagRegistry with all available tags
    - DocAggregator for doc-comments
    - ConfigLiteralExtractor for Ext.define() literals
    - RenderDispatcher for HTML output
    """

    def __init__(self, config: Optional[DoctagConfig] = None,
                 registry: Optional[TagRegistry] = None,
                 formatter: Optional[Formatter] = None):
        self.config = config or DoctagConfig()
        self.registry = registry or TagRegistry.discover(self.config)
        self.formatter = formatter or InlineFormatter(self.config.format.link_template)

        self.aggregator = DocAggregator(self.registry)
        self.extractor = ConfigLiteralExtractor(self.registry)
        self.dispatcher = RenderDispatcher(self.registry)

        self._patterns = frozenset(self.registry.patterns())
        self._multiline = frozenset(self.registry.multiline_patterns())

    def parse_comment(self, text: str) -> ParsedComment:
        block = split_block(text, self._patterns, self._multiline)
        fragments = self.aggregator.parse_block(block)
        unresolved: List[str] = []
        record = self.aggregator.aggregate(fragments, unresolved)
        return ParsedComment(body=block.body, fragments=fragments, record=record, unresolved=unresolved)

    def render_comment(self, text: str, name: Optional[str] = None) -> RenderedDoc:
        parsed = self.parse_comment(text)
        body = self.formatter.format(parsed.body) if parsed.body else ""
        return self.dispatcher.render(parsed.record, body, self.formatter, name=name)

    def define_classes(self, source: str) -> List[DefinedClass]:
        """Все Ext.define() исходника → классы с извлечёнными свойствами."""
        out: List[DefinedClass] = []
        for literal in iter_class_literals(source):
            cls: ClassConfig = {"name": literal.name}
            errors = self.extractor.extract(cls, literal.properties)
            logger.debug(f"Extracted class {literal.name} ({len(literal.properties)} properties)")
            out.append(DefinedClass(cls=cls, line=literal.line, errors=errors))
        return out


__all__ = ["Engine", "ParsedComment", "DefinedClass"]
