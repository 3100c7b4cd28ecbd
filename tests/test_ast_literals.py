import textwrap

from doctag.ast import iter_class_literals, literal_value

SOURCE = textwrap.dedent("""
    Ext.define('My.Panel', {
        extend: 'Ext.panel.Panel',
        "singleton": true,
        alias: ['widget.mypanel', 'widget.other'],
        mixins: { observable: 'Ext.util.Observable' },
        width: 0x10,
        ratio: 1.5,
        nothing: null,
        title: "Line\\nbreak",
        handler: someFunction,
        initComponent: function () {
            this.callParent();
        }
    });

    Foo.define('Not.A.Class', { extend: 'X' });

    Ext.define("My.Other", {});
""")


def _props(literal):
    return {name: node for name, node in literal.properties}


def test_finds_ext_define_literals_in_order():
    literals = list(iter_class_literals(SOURCE))
    assert [c.name for c in literals] == ["My.Panel", "My.Other"]
    assert literals[1].properties == []


def test_property_names_in_literal_order():
    panel = next(iter_class_literals(SOURCE))
    assert [name for name, _ in panel.properties] == [
        "extend", "singleton", "alias", "mixins", "width", "ratio",
        "nothing", "title", "handler", "initComponent",
    ]


def test_literal_values():
    props = _props(next(iter_class_literals(SOURCE)))
    assert literal_value(props["extend"]) == "Ext.panel.Panel"
    assert literal_value(props["singleton"]) is True
    assert literal_value(props["alias"]) == ["widget.mypanel", "widget.other"]
    assert literal_value(props["mixins"]) == {"observable": "Ext.util.Observable"}
    assert literal_value(props["width"]) == 16
    assert literal_value(props["ratio"]) == 1.5
    assert literal_value(props["nothing"]) is None
    assert literal_value(props["title"]) == "Line\nbreak"
    assert literal_value(props["handler"]) == "someFunction"


def test_plain_python_values_pass_through():
    assert literal_value(False) is False
    assert literal_value(["a"]) == ["a"]


def test_define_classes(engine):
    classes = engine.define_classes(SOURCE)
    panel, other = (c.cls for c in classes)
    assert panel == {
        "name": "My.Panel",
        "extends": "Ext.panel.Panel",
        "singleton": True,
        "aliases": {"widget": ["mypanel", "other"]},
        "mixins": ["Ext.util.Observable"],
    }
    assert other == {"name": "My.Other", "singleton": False}
    assert classes[0].line == 1
    assert all(not c.errors for c in classes)


def test_define_classes_reports_bad_values(engine):
    classes = engine.define_classes("Ext.define('A', { singleton: 'yes', extend: 'B' });")
    cls = classes[0]
    assert [(e.tag, e.property) for e in cls.errors] == [("singleton", "singleton")]
    assert cls.cls["extends"] == "B"
