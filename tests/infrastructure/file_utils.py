"""
Утилиты для создания файлов и директорий в тестах.
"""

from __future__ import annotations

import textwrap
from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Записывает текст в файл, создавая родительские директории при необходимости.

    Args:
        p: Путь к файлу
        text: Содержимое для записи

    Returns:
        Путь к созданному файлу
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_comment(p: Path, text: str) -> Path:
    """Файл с doc-комментарием; текст автоматически dedent'ится."""
    return write(p, textwrap.dedent(text).strip() + "\n")


def write_source_file(p: Path, content: str) -> Path:
    """Создает исходный файл JavaScript с dedent'ом содержимого."""
    return write(p, textwrap.dedent(content).strip() + "\n")
