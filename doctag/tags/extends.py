from __future__ import annotations

from typing import Any, Optional

from ..ast.literals import literal_value
from ..errors import ConfigValueError
from ..scanner import AnnotationScanner
from .base import ClassConfig, Fragment, FragmentGroup, Tag, TagDescriptor


def _parse_parent(p: AnnotationScanner) -> Optional[Fragment]:
    p.hw()
    name = p.ident_chain()
    if name is None:
        p.warn("parent class name expected")
        return None
    return {"tagname": "extends", "extends": name}


class ExtendsTag(Tag):
    """@extends Ext.Base или `extend: "Ext.Base"` в Ext.define()."""
    descriptor = TagDescriptor(pattern="extends", key="extends", config_pattern="extend")

    def parse(self, p: AnnotationScanner) -> Optional[Fragment]:
        return _parse_parent(p)

    def combine(self, fragments: FragmentGroup) -> str:
        return fragments[0]["extends"]

    def extract_from_config(self, cls: ClassConfig, ast_value: Any) -> None:
        value = literal_value(ast_value)
        if not isinstance(value, str):
            raise ConfigValueError(
                f"expected class name string, got {value!r}",
                tag=self.pattern, property="extend", cls_name=cls.get("name"),
            )
        cls["extends"] = value


class ExtendAliasTag(Tag):
    """@extend: синоним @extends, попадает в ту же группу."""
    descriptor = TagDescriptor(pattern="extend")

    def parse(self, p: AnnotationScanner) -> Optional[Fragment]:
        return _parse_parent(p)
