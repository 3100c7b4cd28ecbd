"""
Exceptions of the tag layer.

User-facing errors (a broken doctag.yaml, a config value a tag cannot
interpret) inherit from DoctagUserError and are printed by the CLI as clean
messages without stack traces.

Defects in tag implementations or in the deployment (duplicate patterns,
missing modules, a formatter that was never supplied) do NOT inherit from
DoctagUserError: they propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional


class DoctagUserError(Exception):
    """
    Base class for all user-facing errors in doctag.

    These errors indicate problems that the user can fix:
    configuration issues, unreadable input, bad config literal values.
    """
    pass


class ConfigLoadError(DoctagUserError):
    """Ошибка чтения doctag.yaml с указанием файла и поля."""
    pass


class ConfigValueError(DoctagUserError):
    """
    Тег не смог интерпретировать значение свойства в Ext.define().

    Хранит имя тега и имя свойства, чтобы источник ошибки был однозначен.
    """

    def __init__(self, message: str, *, tag: str, property: str, cls_name: Optional[str] = None):
        super().__init__(message)
        self.tag = tag
        self.property = property
        self.cls_name = cls_name

    def __str__(self) -> str:
        parts = [super().__str__(), f"Tag: @{self.tag}", f"Property: {self.property}"]
        if self.cls_name:
            parts.append(f"Class: {self.cls_name}")
        return " | ".join(parts)


class TagDefinitionError(RuntimeError):
    """Некорректно объявленный тег. Это дефект реализации, а не пользовательская ошибка."""
    pass


class TagDiscoveryError(RuntimeError):
    """Зарегистрированный модуль или класс тега недоступен в текущей сборке."""
    pass


class FormatterNotSetError(RuntimeError):
    """format()/render() вызваны без форматтера."""
    pass


class RenderError(Exception):
    """
    Ошибка рендеринга одного тега для одной записи документации.

    Не прерывает рендеринг остальных тегов и записей.
    """

    def __init__(self, message: str, *, tag: str, record: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.tag = tag
        self.record = record
        self.cause = cause

    def __str__(self) -> str:
        parts = [super().__str__(), f"Tag: @{self.tag}"]
        if self.record:
            parts.append(f"Record: {self.record}")
        return " | ".join(parts)


__all__ = [
    "DoctagUserError",
    "ConfigLoadError",
    "ConfigValueError",
    "TagDefinitionError",
    "TagDiscoveryError",
    "FormatterNotSetError",
    "RenderError",
]
