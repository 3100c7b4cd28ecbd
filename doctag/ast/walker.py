"""
Поиск литералов Ext.define() в исходнике JavaScript.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from tree_sitter import Node

from .document import JsDocument
from .literals import literal_value, node_text, property_name

# Вызовы, объявляющие класс конфигурационным литералом
DEFINE_CALLS = {("Ext", "define")}


@dataclass
class ClassLiteral:
    name: str
    line: int
    properties: List[Tuple[str, Node]] = field(default_factory=list)


def _collect_properties(body: Node) -> List[Tuple[str, Node]]:
    props: List[Tuple[str, Node]] = []
    for child in body.named_children:
        if child.type == "pair":
            name = property_name(child.child_by_field_name("key"))
            if name is not None:
                props.append((name, child.child_by_field_name("value")))
        elif child.type == "method_definition":
            name_node = child.child_by_field_name("name")
            if name_node is not None:
                props.append((node_text(name_node), child))
    return props


def iter_class_literals(source: str) -> Iterator[ClassLiteral]:
    """Возвращает Ext.define("Name", {...}) в порядке появления в исходнике."""
    doc = JsDocument(source)
    found = []
    for captures in doc.query_matches("class_literals"):
        ns = node_text(captures["namespace"][0])
        method = node_text(captures["method"][0])
        if (ns, method) not in DEFINE_CALLS:
            continue
        call = captures["define_call"][0]
        name = literal_value(captures["class_name"][0])
        body = captures["class_body"][0]
        start_line, _ = doc.get_line_range(call)
        found.append(ClassLiteral(name=name, line=start_line, properties=_collect_properties(body)))
    found.sort(key=lambda c: c.line)
    yield from found


__all__ = ["ClassLiteral", "iter_class_literals", "DEFINE_CALLS"]
