from doctag.formatter import Formatter, InlineFormatter


def test_paragraphs_and_escaping():
    out = InlineFormatter().format("a < b\n\nsecond")
    assert out == "<p>a &lt; b</p><p>second</p>"


def test_link_with_member_and_text():
    out = InlineFormatter().format_inline("{@link Ext.Panel#setTitle the setter}")
    assert out == '<a href="#!/api/Ext.Panel-setTitle">the setter</a>'


def test_link_to_member_of_same_class():
    out = InlineFormatter().format_inline("{@link #show}")
    assert out == '<a href="#!/api/-show">show</a>'


def test_custom_link_template():
    out = InlineFormatter("/api/{cls}.html").format_inline("{@link Ext.Base}")
    assert out == '<a href="/api/Ext.Base.html">Ext.Base</a>'


def test_inline_code():
    assert InlineFormatter().format_inline("call `init()`") == "call <code>init()</code>"


def test_inline_formatter_satisfies_protocol():
    assert isinstance(InlineFormatter(), Formatter)
