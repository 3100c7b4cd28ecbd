"""
Value nodes of object literals → Python values.

Строки, числа, true/false, null/undefined, массивы и объекты
превращаются в соответствующие значения Python; прочие выражения
(идентификаторы, вызовы, функции): в исходный текст узла.
Значения, уже являющиеся объектами Python, возвращаются как есть:
так теги одинаково обрабатывают узлы AST и config_default.
"""

from __future__ import annotations

import codecs
from typing import Any, Optional

from tree_sitter import Node

_SKIP = {"comment"}


def node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _string_value(node: Node) -> str:
    parts = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(codecs.decode(node_text(child), "unicode_escape"))
    return "".join(parts)


def _number_value(node: Node) -> Any:
    text = node_text(node).replace("_", "")
    try:
        return int(text, 0)
    except ValueError:
        return float(text)


def property_name(key: Node) -> Optional[str]:
    """Имя свойства по узлу ключа пары; None для вычисляемых ключей."""
    if key.type in ("property_identifier", "number"):
        return node_text(key)
    if key.type == "string":
        return _string_value(key)
    return None


def literal_value(value: Any) -> Any:
    if not isinstance(value, Node):
        return value

    kind = value.type
    if kind == "string":
        return _string_value(value)
    if kind == "template_string" and not any(c.type == "template_substitution" for c in value.named_children):
        return "".join(node_text(c) for c in value.named_children if c.type == "string_fragment")
    if kind == "number":
        return _number_value(value)
    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind in ("null", "undefined"):
        return None
    if kind == "parenthesized_expression" and value.named_child_count == 1:
        return literal_value(value.named_children[0])
    if kind == "array":
        return [literal_value(c) for c in value.named_children if c.type not in _SKIP]
    if kind == "object":
        out = {}
        for child in value.named_children:
            if child.type == "pair":
                name = property_name(child.child_by_field_name("key"))
                if name is not None:
                    out[name] = literal_value(child.child_by_field_name("value"))
            elif child.type == "shorthand_property_identifier":
                out[node_text(child)] = node_text(child)
        return out
    return node_text(value)


__all__ = ["literal_value", "property_name", "node_text"]
