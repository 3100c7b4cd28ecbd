"""
@deprecated / @removed: предупреждение над описанием.
"""

from __future__ import annotations

from typing import Any, Dict

from ..render import RenderContext
from ..scanner import AnnotationScanner
from .base import Fragment, FragmentGroup, RenderPosition, Signature, Tag, TagDescriptor

_VERSION = r"[0-9][0-9A-Za-z.\-]*"


class _DeprecationTag(Tag):
    # Слово в тексте предупреждения: "deprecated" / "removed"
    word: str

    def parse(self, p: AnnotationScanner) -> Fragment:
        p.hw()
        version = p.match(_VERSION)
        p.hw()
        return {"tagname": self.pattern, "version": version, "text": p.rest()}

    def combine(self, fragments: FragmentGroup) -> Dict[str, Any]:
        frag = fragments[0]
        return {"version": frag["version"], "text": frag["text"]}

    def render(self, context: RenderContext) -> str:
        data = context.get(self.key)
        if not data:
            return ""
        what = "event" if "event" in context else "member"
        since = f" since {data['version']}" if data.get("version") else ""
        text = context.format(data["text"]) if data.get("text") else ""
        return (
            f"<div class='rounded-box {self.pattern}-box {self.pattern}-tag-box'>"
            f"<p>This {what} has been <strong>{self.word}</strong>{since}</p>"
            f"{text}"
            "</div>"
        )


class DeprecatedTag(_DeprecationTag):
    word = "deprecated"
    descriptor = TagDescriptor(
        pattern="deprecated",
        key="deprecated",
        multiline=True,
        signature=Signature(long="deprecated", short="DEP"),
        render_position=RenderPosition.TOP,
    )


class RemovedTag(_DeprecationTag):
    word = "removed"
    descriptor = TagDescriptor(
        pattern="removed",
        key="removed",
        multiline=True,
        signature=Signature(long="removed", short="REM"),
        render_position=RenderPosition.TOP,
    )
