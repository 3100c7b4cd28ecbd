from __future__ import annotations

from typing import Optional

from ..scanner import AnnotationScanner
from .base import Fragment, FragmentGroup, Tag, TagDescriptor


class SinceTag(Tag):
    """@since 4.1.0: версия, в которой появился класс или член."""
    descriptor = TagDescriptor(pattern="since", key="since")

    def parse(self, p: AnnotationScanner) -> Fragment:
        p.hw()
        return {"tagname": "since", "version": p.rest()}

    def combine(self, fragments: FragmentGroup) -> Optional[str]:
        return fragments[0]["version"] or None
