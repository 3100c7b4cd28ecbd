from __future__ import annotations

from typing import Any

from ..ast.literals import literal_value
from ..errors import ConfigValueError
from .base import ClassConfig, TagDescriptor
from .flags import BooleanTag


class SingletonTag(BooleanTag):
    """
    @singleton в комментарии или `singleton: true` в Ext.define().
    Если свойство не задано, класс получает singleton = False.
    """
    descriptor = TagDescriptor(
        pattern="singleton",
        key="singleton",
        config_pattern="singleton",
        config_default={"singleton": False},
    )

    def extract_from_config(self, cls: ClassConfig, ast_value: Any) -> None:
        value = literal_value(ast_value)
        if not isinstance(value, bool):
            raise ConfigValueError(
                f"expected boolean, got {value!r}",
                tag=self.pattern, property="singleton", cls_name=cls.get("name"),
            )
        cls["singleton"] = value
