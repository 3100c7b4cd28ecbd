from __future__ import annotations

import logging
from typing import Any, Iterable, List, Set, Tuple

from .errors import ConfigValueError
from .tags.base import ClassConfig, ExtractsConfig, Tag
from .tags.registry import TagRegistry

logger = logging.getLogger(__name__)


class ConfigLiteralExtractor:
    """
    Переносит свойства литерала Ext.define() в ClassConfig через теги.

    Свойство обрабатывает тег, чей config_pattern совпадает с именем свойства.
    После обхода всех свойств для тегов с config_default, чьё свойство так и
    не встретилось, применяется значение по умолчанию: ровно один раз.
    """

    def __init__(self, registry: TagRegistry):
        self.registry = registry

    def extract(self, cls: ClassConfig, properties: Iterable[Tuple[str, Any]]) -> List[ConfigValueError]:
        """
        Args:
            cls: Собираемый класс (изменяется на месте)
            properties: Пары (имя свойства, узел значения) в порядке литерала

        Returns:
            Ошибки интерпретации значений; остальные свойства всё равно обработаны
        """
        errors: List[ConfigValueError] = []
        matched: Set[str] = set()

        for name, ast_value in properties:
            tag = self.registry.by_config_pattern(name)
            if tag is None:
                continue
            matched.add(name)
            if isinstance(tag, ExtractsConfig):
                self._invoke(tag, cls, name, ast_value, errors)

        for tag in self.registry.with_config_default():
            if tag.config_pattern in matched:
                continue
            self._apply_default(tag, cls, errors)

        return errors

    def _apply_default(self, tag: Tag, cls: ClassConfig, errors: List[ConfigValueError]) -> None:
        default = tag.config_default
        if isinstance(tag, ExtractsConfig) and tag.config_pattern in default:
            self._invoke(tag, cls, tag.config_pattern, default[tag.config_pattern], errors)
        else:
            cls.update(default)

    @staticmethod
    def _invoke(tag: Tag, cls: ClassConfig, name: str, ast_value: Any,
                errors: List[ConfigValueError]) -> None:
        try:
            tag.extract_from_config(cls, ast_value)
        except ConfigValueError as e:
            logger.error(str(e))
            errors.append(e)
        except Exception as e:
            # Ошибка стороннего хука не должна прерывать разбор остальных свойств
            err = ConfigValueError(
                str(e), tag=tag.pattern, property=name, cls_name=cls.get("name"),
            )
            err.__cause__ = e
            logger.error(str(err))
            errors.append(err)


__all__ = ["ConfigLiteralExtractor"]
