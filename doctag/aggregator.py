"""
Сборка записи документации из фрагментов одного комментария.

Фрагменты группируются по идентичности ("tagname") с сохранением порядка
появления, затем для каждой группы вызывается combine() тега-владельца,
а результат кладётся в запись под его key.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .errors import TagDefinitionError
from .scanner import AnnotationScanner, SplitBlock
from .tags.base import (
    CombinesFragments, DocRecord, Fragment, FragmentGroup, ParsesAnnotation, Tag,
)
from .tags.registry import TagRegistry

logger = logging.getLogger(__name__)


class DocAggregator:
    """
    Группирует фрагменты и вызывает combine().

    Коллизии key между разными тегами разрешаются по правилу
    «последняя запись побеждает»: группы обрабатываются в порядке
    регистрации тегов-владельцев, а при равенстве в порядке появления.
    """

    def __init__(self, registry: TagRegistry):
        self.registry = registry

    # --- parsing --------------------------------------------------------

    def parse_occurrence(self, pattern: str, scanner: AnnotationScanner) -> List[Fragment]:
        """
        Разбирает одно вхождение @pattern.

        Returns:
            Список фрагментов (возможно пустой)
        """
        tag = self.registry.by_pattern(pattern)
        if tag is None:
            logger.warning(f"No tag registered for @{pattern}; occurrence ignored")
            return []
        if not isinstance(tag, ParsesAnnotation):
            # Тег-флаг без параметров: @static, @private
            return [{"tagname": tag.pattern}]
        return _as_fragments(tag, tag.parse(scanner))

    def parse_block(self, block: SplitBlock) -> List[Fragment]:
        fragments: List[Fragment] = []
        for occ in block.occurrences:
            fragments.extend(self.parse_occurrence(occ.pattern, occ.scanner()))
        return fragments

    # --- aggregation ----------------------------------------------------

    @staticmethod
    def group(fragments: Sequence[Fragment]) -> Dict[str, FragmentGroup]:
        groups: Dict[str, FragmentGroup] = {}
        for frag in fragments:
            groups.setdefault(frag["tagname"], []).append(frag)
        return groups

    def aggregate(self, fragments: Sequence[Fragment],
                  unresolved: Optional[List[str]] = None) -> DocRecord:
        """
        Превращает плоский список фрагментов в запись документации.

        Args:
            fragments: Фрагменты в порядке появления в комментарии
            unresolved: Если передан, сюда добавляются идентичности без владельца

        Returns:
            Словарь key → значение
        """
        owned: List[tuple[int, int, Tag, FragmentGroup]] = []
        for order, (identity, group) in enumerate(self.group(fragments).items()):
            tag = self.registry.resolve(identity)
            if tag is None or not isinstance(tag, CombinesFragments):
                logger.warning(f"Fragments tagged '{identity}' have no combining tag; skipped")
                if unresolved is not None:
                    unresolved.append(identity)
                continue
            owned.append((self.registry.index_of(tag), order, tag, group))

        record: DocRecord = {}
        for _, _, tag, group in sorted(owned, key=lambda item: (item[0], item[1])):
            record[tag.key] = tag.combine(group)
        return record


def _as_fragments(tag: Tag, result) -> List[Fragment]:
    if result is None:
        return []
    items = [result] if isinstance(result, dict) else list(result)
    for item in items:
        if not isinstance(item, dict) or "tagname" not in item:
            raise TagDefinitionError(
                f"{type(tag).__name__}.parse() must return dicts with 'tagname', got {item!r}"
            )
    return items


__all__ = ["DocAggregator"]
