"""
Контракт тега документации.

Тег описывается неизменяемым TagDescriptor и набором необязательных
возможностей (hooks). Каждая возможность описана отдельным runtime_checkable
Protocol, и диспетчеры проверяют её наличие через isinstance(), а не
полагаются на унаследованные пустые методы.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING, Any, ClassVar, Dict, List, Mapping, Optional, Protocol, Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from ..render import RenderContext
    from ..scanner import AnnotationScanner

# Один фрагмент распарсенной аннотации; обязательно содержит "tagname".
Fragment = Dict[str, Any]
# Фрагменты одной идентичности в порядке появления в комментарии.
FragmentGroup = List[Fragment]
# Итоговая запись класса/члена: key → значение после combine().
DocRecord = Dict[str, Any]
# Класс, собираемый из Ext.define(); изменяется на месте.
ClassConfig = Dict[str, Any]
# Что может вернуть parse(): ничего, один фрагмент или несколько.
ParseResult = Union[None, Fragment, List[Fragment]]


class RenderPosition(str, enum.Enum):
    """Куда вставлять HTML тега относительно основного текста."""
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Signature:
    """
    Бейдж в сигнатуре члена.

    short/long: короткая и полная надписи, tooltip: текст всплывающей подсказки.
    """
    short: str
    long: str
    tooltip: Optional[str] = None


@dataclass(frozen=True)
class TagDescriptor:
    """
    Декларативная часть тега.

    pattern: имя @тега без "@", например "since"
    multiline: принадлежат ли тегу последующие строки без тега
    key: ключ, под которым результат combine() хранится в записи
    member_type: тип члена класса, который вводит тег (например "event")
    signature: бейдж для списков членов
    config_pattern: имя свойства в Ext.define(), обрабатываемого тегом
    config_default: значение по умолчанию, если свойство отсутствует
    render_position: top/bottom; без него тег не рендерится
    """
    pattern: str
    multiline: bool = False
    key: Optional[str] = None
    member_type: Optional[str] = None
    signature: Optional[Signature] = None
    config_pattern: Optional[str] = None
    config_default: Optional[Mapping[str, Any]] = None
    render_position: Optional[RenderPosition] = None


class Tag:
    """
    Базовый класс реализаций тегов.

    Несёт только дескриптор и удобные свойства доступа к нему.
    Хуки (parse/combine/extract_from_config/render) реализации объявляют
    сами, по мере надобности.
    """
    descriptor: ClassVar[TagDescriptor]

    @property
    def pattern(self) -> str:
        return self.descriptor.pattern

    @property
    def key(self) -> Optional[str]:
        return self.descriptor.key

    @property
    def multiline(self) -> bool:
        return self.descriptor.multiline

    @property
    def member_type(self) -> Optional[str]:
        return self.descriptor.member_type

    @property
    def signature(self) -> Optional[Signature]:
        return self.descriptor.signature

    @property
    def config_pattern(self) -> Optional[str]:
        return self.descriptor.config_pattern

    @property
    def config_default(self) -> Optional[Mapping[str, Any]]:
        return self.descriptor.config_default

    @property
    def render_position(self) -> Optional[RenderPosition]:
        return self.descriptor.render_position

    def __repr__(self) -> str:
        return f"<{type(self).__name__} @{self.pattern}>"


# ---- Capabilities --------------------------------------------------------

@runtime_checkable
class ParsesAnnotation(Protocol):
    def parse(self, scanner: AnnotationScanner) -> ParseResult:
        """
        Вызывается, когда сканер встретил @pattern; сканер стоит сразу за именем.
        Может вызываться несколько раз за один комментарий.
        """
        ...


@runtime_checkable
class CombinesFragments(Protocol):
    def combine(self, fragments: FragmentGroup) -> Any:
        """Сводит все фрагменты одной идентичности в значение для key."""
        ...


@runtime_checkable
class ExtractsConfig(Protocol):
    def extract_from_config(self, cls: ClassConfig, ast_value: Any) -> None:
        """Переносит значение свойства Ext.define() в cls."""
        ...


@runtime_checkable
class RendersMarkup(Protocol):
    def render(self, context: RenderContext) -> str:
        """Возвращает HTML для вставки в позицию render_position."""
        ...


__all__ = [
    "Fragment",
    "FragmentGroup",
    "DocRecord",
    "ClassConfig",
    "ParseResult",
    "RenderPosition",
    "Signature",
    "TagDescriptor",
    "Tag",
    "ParsesAnnotation",
    "CombinesFragments",
    "ExtractsConfig",
    "RendersMarkup",
]
