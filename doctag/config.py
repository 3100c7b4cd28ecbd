from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML

from .errors import ConfigLoadError
from .formatter import DEFAULT_LINK_TEMPLATE

CONFIG_FILE = "doctag.yaml"

_yaml = YAML(typ="safe")


@dataclass
class TagModuleCfg:
    """Сторонний тег: модуль и имя класса."""
    module: str
    class_name: str

    @staticmethod
    def from_dict(d: Dict[str, Any], where: str) -> TagModuleCfg:
        if not isinstance(d, dict):
            raise ConfigLoadError(f"{where}: expected mapping with 'module' and 'class_name'")
        module = d.get("module")
        class_name = d.get("class_name")
        if not isinstance(module, str) or not module:
            raise ConfigLoadError(f"{where}.module: expected non-empty string")
        if not isinstance(class_name, str) or not class_name:
            raise ConfigLoadError(f"{where}.class_name: expected non-empty string")
        return TagModuleCfg(module=module, class_name=class_name)


@dataclass
class TagsCfg:
    disabled: List[str] = field(default_factory=list)
    modules: List[TagModuleCfg] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> TagsCfg:
        if not d:
            return TagsCfg()
        if not isinstance(d, dict):
            raise ConfigLoadError("tags: expected mapping")

        disabled = d.get("disabled") or []
        if not isinstance(disabled, list) or not all(isinstance(x, str) for x in disabled):
            raise ConfigLoadError("tags.disabled: expected list of tag names")

        modules = d.get("modules") or []
        if not isinstance(modules, list):
            raise ConfigLoadError("tags.modules: expected list")

        return TagsCfg(
            # "@since" и "since" эквивалентны
            disabled=[x.lstrip("@") for x in disabled],
            modules=[TagModuleCfg.from_dict(m, f"tags.modules[{i}]") for i, m in enumerate(modules)],
        )


@dataclass
class FormatCfg:
    link_template: str = DEFAULT_LINK_TEMPLATE

    def __post_init__(self):
        # Шаблон подставляется в каждую {@link}; ошибку ловим при загрузке
        try:
            self.link_template.format(cls="", member="")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ConfigLoadError(
                f"format.link_template: invalid template, expected {{cls}} and {{member}} placeholders only ({e!r})"
            ) from e

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> FormatCfg:
        if not d:
            return FormatCfg()
        if not isinstance(d, dict):
            raise ConfigLoadError("format: expected mapping")
        tpl = d.get("link_template", DEFAULT_LINK_TEMPLATE)
        if not isinstance(tpl, str):
            raise ConfigLoadError("format.link_template: expected string")
        return FormatCfg(link_template=tpl)


@dataclass
class DoctagConfig:
    tags: TagsCfg = field(default_factory=TagsCfg)
    format: FormatCfg = field(default_factory=FormatCfg)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> DoctagConfig:
        """Load configuration from YAML dictionary."""
        if not d:
            return DoctagConfig()
        unknown = sorted(set(d) - {"tags", "format"})
        if unknown:
            raise ConfigLoadError(f"Unknown top-level keys: {', '.join(unknown)}")
        return DoctagConfig(
            tags=TagsCfg.from_dict(d.get("tags")),
            format=FormatCfg.from_dict(d.get("format")),
        )


def load_config(path: Optional[Path] = None, root: Optional[Path] = None) -> DoctagConfig:
    """
    Загружает doctag.yaml.

    Args:
        path: Явный путь к файлу; должен существовать
        root: Каталог для поиска doctag.yaml (по умолчанию cwd);
              если файла там нет, берётся конфигурация по умолчанию

    Raises:
        ConfigLoadError: Файл не найден (при явном path) или некорректен
    """
    if path is None:
        path = (root or Path.cwd()) / CONFIG_FILE
        if not path.is_file():
            return DoctagConfig()
    elif not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        raise ConfigLoadError(f"Failed to read {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigLoadError(f"YAML must be a mapping: {path}")

    try:
        return DoctagConfig.from_dict(raw)
    except ConfigLoadError as e:
        raise ConfigLoadError(f"{path}: {e}") from e


__all__ = ["CONFIG_FILE", "DoctagConfig", "TagsCfg", "TagModuleCfg", "FormatCfg", "load_config"]
