"""
Tree-sitter query definitions for JavaScript class literals.
"""

from __future__ import annotations

QUERIES = {
    # Ext.define("Name", { ... })
    "class_literals": """
    (call_expression
      function: (member_expression
        object: (identifier) @namespace
        property: (property_identifier) @method)
      arguments: (arguments
        .
        (string) @class_name
        .
        (object) @class_body)) @define_call
    """,
}
