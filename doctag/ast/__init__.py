from __future__ import annotations

# Public API of ast package:
#  • iter_class_literals: Ext.define() literals of a JavaScript source
#  • literal_value: value node → Python value
from .literals import literal_value, property_name
from .walker import ClassLiteral, iter_class_literals

__all__ = ["ClassLiteral", "iter_class_literals", "literal_value", "property_name"]
