"""
Теги со списком имён классов: @mixins, @requires, @uses.
"""

from __future__ import annotations

from typing import Any, List

from ..ast.literals import literal_value
from ..errors import ConfigValueError
from ..scanner import AnnotationScanner
from .base import ClassConfig, Fragment, FragmentGroup, Tag, TagDescriptor


def _merge(target: List[str], names: List[str]) -> List[str]:
    for name in names:
        if name not in target:
            target.append(name)
    return target


class ClassListTag(Tag):

    def parse(self, p: AnnotationScanner) -> Fragment:
        names = []
        while True:
            p.match(r"[ \t,]*")
            name = p.ident_chain()
            if name is None:
                break
            names.append(name)
        return {"tagname": self.key, self.key: names}

    def combine(self, fragments: FragmentGroup) -> List[str]:
        result: List[str] = []
        for frag in fragments:
            _merge(result, frag[self.key])
        return result

    def extract_from_config(self, cls: ClassConfig, ast_value: Any) -> None:
        value = literal_value(ast_value)
        if isinstance(value, str):
            names = [value]
        elif isinstance(value, dict):
            # mixins: {observable: "Ext.util.Observable"}
            names = list(value.values())
        else:
            names = value
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigValueError(
                f"expected class name or list of class names, got {value!r}",
                tag=self.pattern, property=self.config_pattern, cls_name=cls.get("name"),
            )
        _merge(cls.setdefault(self.key, []), names)


class MixinsTag(ClassListTag):
    descriptor = TagDescriptor(pattern="mixins", key="mixins", config_pattern="mixins")


class RequiresTag(ClassListTag):
    descriptor = TagDescriptor(pattern="requires", key="requires", config_pattern="requires")


class UsesTag(ClassListTag):
    descriptor = TagDescriptor(pattern="uses", key="uses", config_pattern="uses")
