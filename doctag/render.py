"""
Рендеринг HTML тегов для записи документации.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .errors import FormatterNotSetError, RenderError
from .formatter import Formatter
from .tags.base import DocRecord, RenderPosition, Tag
from .tags.registry import TagRegistry

logger = logging.getLogger(__name__)


class RenderContext:
    """
    Read-only вид на готовую запись + форматтер.

    Форматтер передаётся явно, а не хранится в объекте тега.
    """

    def __init__(self, record: Mapping[str, Any], formatter: Optional[Formatter] = None):
        self.record: Mapping[str, Any] = MappingProxyType(dict(record))
        self._formatter = formatter

    def __getitem__(self, key: str) -> Any:
        return self.record[key]

    def __contains__(self, key: object) -> bool:
        return key in self.record

    def get(self, key: str, default: Any = None) -> Any:
        return self.record.get(key, default)

    def format(self, markdown: str) -> str:
        """Markdown/{@link} → HTML через переданный форматтер."""
        if self._formatter is None:
            raise FormatterNotSetError("No formatter supplied to RenderContext")
        return self._formatter.format(markdown)


@dataclass
class RenderedDoc:
    top: str = ""
    body: str = ""
    bottom: str = ""
    errors: List[RenderError] = field(default_factory=list)

    @property
    def html(self) -> str:
        return self.top + self.body + self.bottom


class RenderDispatcher:
    """
    Вызывает render() тегов с заданной позицией.

    Порядок внутри позиции: порядок регистрации. Ошибка одного тега
    превращается в RenderError и не мешает остальным.
    """

    def __init__(self, registry: TagRegistry):
        self.registry = registry
        self._top = registry.renderable(RenderPosition.TOP)
        self._bottom = registry.renderable(RenderPosition.BOTTOM)

    def render(self, record: DocRecord, body: str = "", formatter: Optional[Formatter] = None,
               name: Optional[str] = None) -> RenderedDoc:
        context = RenderContext(record, formatter)
        doc = RenderedDoc(body=body)
        doc.top = self._render_group(self._top, context, name, doc.errors)
        doc.bottom = self._render_group(self._bottom, context, name, doc.errors)
        return doc

    def render_many(self, records: Iterable[Tuple[str, DocRecord, str]],
                    formatter: Optional[Formatter] = None) -> List[RenderedDoc]:
        """Рендерит записи (name, record, body) независимо друг от друга."""
        return [self.render(record, body, formatter, name=name) for name, record, body in records]

    @staticmethod
    def _render_group(tags: List[Tag], context: RenderContext, name: Optional[str],
                      errors: List[RenderError]) -> str:
        parts: List[str] = []
        for tag in tags:
            try:
                parts.append(tag.render(context) or "")
            except Exception as e:
                err = RenderError(f"Failed to render: {e}", tag=tag.pattern, record=name, cause=e)
                logger.warning(str(err))
                errors.append(err)
        return "".join(parts)


__all__ = ["RenderContext", "RenderedDoc", "RenderDispatcher"]
