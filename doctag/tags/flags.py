"""
Теги-флаги без параметров: запись получает key = True.
"""

from __future__ import annotations

from .base import FragmentGroup, Signature, Tag, TagDescriptor


class BooleanTag(Tag):
    """Любое количество вхождений сводится к True."""

    def combine(self, fragments: FragmentGroup) -> bool:
        return True


class StaticTag(BooleanTag):
    descriptor = TagDescriptor(
        pattern="static",
        key="static",
        signature=Signature(long="static", short="STA"),
    )


class ChainableTag(BooleanTag):
    descriptor = TagDescriptor(
        pattern="chainable",
        key="chainable",
        signature=Signature(long="chainable", short="&gt;", tooltip="Returns this object"),
    )
