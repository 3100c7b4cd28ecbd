"""
Minimal annotation scanner.

Splits a doc-comment into the main text and @tag occurrences and gives each
occurrence a positioned cursor (AnnotationScanner) that tag parse() hooks
consume. Only known patterns open an occurrence; unknown @words stay text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Collection, List, Optional, Pattern, Union

logger = logging.getLogger(__name__)

Regex = Union[str, Pattern[str]]

_IDENT = re.compile(r"[$A-Za-z_][$\w]*")
_IDENT_CHAIN = re.compile(r"[$A-Za-z_][$\w]*(?:\.[$A-Za-z_][$\w]*)*")
_TAG_LINE = re.compile(r"^[ \t]*@(?P<name>[$A-Za-z_][$\w-]*)")
_COMMENT_OPEN = re.compile(r"^\s*/\*\*+[ \t]?")
_COMMENT_CLOSE = re.compile(r"[ \t]*\*+/\s*$")
_COMMENT_STAR = re.compile(r"^[ \t]*\*(?!/)[ \t]?")


def _compile(regex: Regex) -> Pattern[str]:
    return regex if isinstance(regex, re.Pattern) else re.compile(regex)


class AnnotationScanner:
    """
    Курсор по тексту одного вхождения @тега.

    Позиция изначально стоит сразу после имени тега. Методы match/ident/...
    продвигают курсор, look: только проверяет.
    """

    def __init__(self, text: str, *, pattern: str = "", line: int = 0):
        self.input = text
        self.pos = 0
        self.pattern = pattern
        self.line = line

    def eos(self) -> bool:
        """Достигнут ли конец текста вхождения."""
        return self.pos >= len(self.input)

    def look(self, regex: Regex) -> bool:
        return _compile(regex).match(self.input, self.pos) is not None

    def match(self, regex: Regex) -> Optional[str]:
        m = _compile(regex).match(self.input, self.pos)
        if m is None:
            return None
        self.pos = m.end()
        return m.group(0)

    def hw(self) -> str:
        """Пропускает горизонтальные пробелы."""
        return self.match(r"[ \t]*") or ""

    def ws(self) -> str:
        """Пропускает любые пробелы, включая переводы строк."""
        return self.match(r"\s*") or ""

    def ident(self) -> Optional[str]:
        return self.match(_IDENT)

    def ident_chain(self) -> Optional[str]:
        """Идентификатор с точками: Ext.form.Panel."""
        return self.match(_IDENT_CHAIN)

    def rest(self) -> str:
        """Забирает весь оставшийся текст (без крайних пробелов)."""
        text = self.input[self.pos:]
        self.pos = len(self.input)
        return text.strip()

    def warn(self, message: str) -> None:
        logger.warning(f"@{self.pattern} (line {self.line + 1}): {message}")


@dataclass
class Occurrence:
    pattern: str
    line: int
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def scanner(self) -> AnnotationScanner:
        return AnnotationScanner(self.text, pattern=self.pattern, line=self.line)


@dataclass
class SplitBlock:
    body: str
    occurrences: List[Occurrence]


def strip_comment(text: str) -> str:
    """Убирает обрамление /** ... */ и ведущие звёздочки строк."""
    if not _COMMENT_OPEN.match(text):
        return text
    lines = text.splitlines()
    lines[0] = _COMMENT_OPEN.sub("", lines[0], count=1)
    lines[-1] = _COMMENT_CLOSE.sub("", lines[-1], count=1)
    return "\n".join(_COMMENT_STAR.sub("", ln, count=1) for ln in lines)


def split_block(text: str, patterns: Collection[str], multiline: Collection[str]) -> SplitBlock:
    """
    Делит комментарий на основной текст и вхождения известных тегов.

    Строка, начинающаяся с @pattern, открывает вхождение. Последующие строки
    без тега относятся к нему, только если тег multiline, иначе к основному тексту.
    """
    body: List[str] = []
    occurrences: List[Occurrence] = []
    current: Optional[Occurrence] = None

    for lineno, line in enumerate(strip_comment(text).splitlines()):
        m = _TAG_LINE.match(line)
        if m and m.group("name") in patterns:
            current = Occurrence(pattern=m.group("name"), line=lineno, lines=[line[m.end():]])
            occurrences.append(current)
            continue
        if m:
            logger.debug(f"Unknown tag @{m.group('name')} at line {lineno + 1} kept as text")
        if current is not None and current.pattern in multiline:
            current.lines.append(line)
        else:
            current = None
            body.append(line)

    return SplitBlock(body="\n".join(body).strip(), occurrences=occurrences)


__all__ = ["AnnotationScanner", "Occurrence", "SplitBlock", "strip_comment", "split_block"]
