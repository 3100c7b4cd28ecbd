from __future__ import annotations

import logging
from typing import Any, Dict

from ..scanner import AnnotationScanner
from .base import Fragment, FragmentGroup, Tag, TagDescriptor

logger = logging.getLogger(__name__)


class EventTag(Tag):
    """
    @event name Description...

    Объявляет член класса типа "event". Текст до следующего тега служит
    описанием события.
    """
    descriptor = TagDescriptor(pattern="event", key="event", member_type="event", multiline=True)

    def parse(self, p: AnnotationScanner) -> Fragment:
        p.hw()
        name = p.ident_chain()
        if name is None:
            p.warn("event name expected")
        p.hw()
        return {"tagname": "event", "name": name, "doc": p.rest()}

    def combine(self, fragments: FragmentGroup) -> Dict[str, Any]:
        # Один комментарий описывает одно событие
        if len(fragments) > 1:
            ignored = ", ".join(str(f["name"]) for f in fragments[1:])
            logger.warning(f"Multiple @event tags in one comment; ignoring: {ignored}")
        frag = fragments[0]
        return {"name": frag["name"], "doc": frag["doc"]}
