"""
@alias widget.foo и @xtype foo.

Оба тега порождают фрагменты группы "aliases", а итогом служит словарь
префикс → список имён, например {"widget": ["foo", "bar"]}.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..ast.literals import literal_value
from ..errors import ConfigValueError
from ..scanner import AnnotationScanner
from .base import ClassConfig, Fragment, FragmentGroup, Tag, TagDescriptor

Aliases = Dict[str, List[str]]


def _add_alias(aliases: Aliases, alias: str) -> None:
    prefix, _, name = alias.rpartition(".")
    names = aliases.setdefault(prefix, [])
    if name not in names:
        names.append(name)


class AliasTag(Tag):
    descriptor = TagDescriptor(pattern="alias", key="aliases", config_pattern="alias")

    def parse(self, p: AnnotationScanner) -> List[Fragment]:
        frags = []
        while True:
            p.match(r"[ \t,]*")
            alias = p.ident_chain()
            if alias is None:
                break
            frags.append({"tagname": "aliases", "alias": alias})
        return frags

    def combine(self, fragments: FragmentGroup) -> Aliases:
        aliases: Aliases = {}
        for frag in fragments:
            _add_alias(aliases, frag["alias"])
        return aliases

    def extract_from_config(self, cls: ClassConfig, ast_value: Any) -> None:
        value = literal_value(ast_value)
        items = [value] if isinstance(value, str) else value
        if not isinstance(items, list) or not all(isinstance(v, str) for v in items):
            raise ConfigValueError(
                f"expected string or array of strings, got {value!r}",
                tag=self.pattern, property="alias", cls_name=cls.get("name"),
            )
        aliases = cls.setdefault("aliases", {})
        for alias in items:
            _add_alias(aliases, alias)


class XtypeTag(Tag):
    """@xtype foo == @alias widget.foo"""
    descriptor = TagDescriptor(pattern="xtype")

    def parse(self, p: AnnotationScanner) -> Optional[Fragment]:
        p.hw()
        name = p.ident_chain()
        if name is None:
            p.warn("xtype name expected")
            return None
        return {"tagname": "aliases", "alias": f"widget.{name}"}
