"""
Форматирование текста тегов в HTML.

Formatter: внешний интерфейс (Markdown + перекрёстные ссылки).
InlineFormatter: минимальная реализация (экранирование, {@link},
`код` и абзацы по пустым строкам).
"""

from __future__ import annotations

import html
import re
from typing import Protocol, runtime_checkable

_LINK = re.compile(r"\{@link\s+(?P<cls>[$\w.]*)(?:#(?P<member>[$\w-]+))?(?:\s+(?P<text>[^}]*))?\}")
_CODE = re.compile(r"`([^`]+)`")
_PARA_SPLIT = re.compile(r"\n[ \t]*\n+")

DEFAULT_LINK_TEMPLATE = "#!/api/{cls}{member}"


@runtime_checkable
class Formatter(Protocol):
    def format(self, text: str) -> str:
        ...


class InlineFormatter:
    """
    Args:
        link_template: Шаблон URL ссылки; {cls}: имя класса,
            {member}: "-имя" члена или пустая строка
    """

    def __init__(self, link_template: str = DEFAULT_LINK_TEMPLATE):
        self.link_template = link_template

    def _link(self, m: re.Match) -> str:
        cls = m.group("cls") or ""
        member = m.group("member")
        href = self.link_template.format(cls=cls, member=f"-{member}" if member else "")
        text = (m.group("text") or "").strip()
        if not text:
            text = f"{cls}.{member}" if cls and member else (member or cls)
        return f'<a href="{html.escape(href)}">{text}</a>'

    def format_inline(self, text: str) -> str:
        out = html.escape(text, quote=False)
        out = _LINK.sub(self._link, out)
        return _CODE.sub(r"<code>\1</code>", out)

    def format(self, text: str) -> str:
        paragraphs = [p.strip() for p in _PARA_SPLIT.split(text.strip()) if p.strip()]
        return "".join(f"<p>{self.format_inline(p)}</p>" for p in paragraphs)


__all__ = ["Formatter", "InlineFormatter", "DEFAULT_LINK_TEMPLATE"]
