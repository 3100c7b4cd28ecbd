from __future__ import annotations

from typing import Dict, List

from ..render import RenderContext
from ..scanner import AnnotationScanner
from .base import Fragment, FragmentGroup, RenderPosition, Tag, TagDescriptor


class SeeTag(Tag):
    """@see Ext.Panel#title Optional comment: список «см. также» под описанием."""
    descriptor = TagDescriptor(pattern="see", key="see", render_position=RenderPosition.BOTTOM)

    def parse(self, p: AnnotationScanner) -> Fragment:
        p.hw()
        target = p.match(r"\S+") or ""
        p.hw()
        return {"tagname": "see", "target": target, "text": p.rest()}

    def combine(self, fragments: FragmentGroup) -> List[Dict[str, str]]:
        return [{"target": f["target"], "text": f["text"]} for f in fragments if f["target"]]

    def render(self, context: RenderContext) -> str:
        items = context.get("see")
        if not items:
            return ""
        lines = []
        for item in items:
            text = f"{{@link {item['target']}}} {item['text']}".strip()
            lines.append(f"<li>{context.format(text)}</li>")
        return "<h3 class='pa'>See also</h3><ul>" + "".join(lines) + "</ul>"
