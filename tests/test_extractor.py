from doctag.errors import ConfigValueError
from doctag.extractor import ConfigLiteralExtractor
from doctag.tags import TagRegistry
from tests.infrastructure.tag_builders import make_registry, make_tag


def _counting_tag(calls):
    def extract(cls, value):
        calls.append(value)
        cls["flag"] = value
    return make_tag("flag", config_pattern="flag", config_default={"flag": "default"}, extract=extract)


def test_singleton_default_applied_when_property_absent(registry: TagRegistry):
    cls = {"name": "My.Cls"}
    errors = ConfigLiteralExtractor(registry).extract(cls, [("title", "Hello")])
    assert errors == []
    assert cls["singleton"] is False


def test_singleton_explicit_value_wins(registry: TagRegistry):
    cls = {"name": "My.Cls"}
    ConfigLiteralExtractor(registry).extract(cls, [("singleton", True)])
    assert cls["singleton"] is True


def test_default_applied_exactly_once():
    calls = []
    ex = ConfigLiteralExtractor(make_registry(_counting_tag(calls)))
    cls = {}
    ex.extract(cls, [("other", 1), ("another", 2)])
    assert calls == ["default"]
    assert cls == {"flag": "default"}


def test_default_never_applied_when_property_present():
    calls = []
    ex = ConfigLiteralExtractor(make_registry(_counting_tag(calls)))
    cls = {}
    ex.extract(cls, [("flag", "explicit")])
    assert calls == ["explicit"]
    assert cls == {"flag": "explicit"}


def test_default_merged_when_tag_has_no_hook():
    ex = ConfigLiteralExtractor(make_registry(
        make_tag("abstract", config_pattern="abstract", config_default={"abstract": False, "final": True}),
    ))
    cls = {}
    ex.extract(cls, [])
    assert cls == {"abstract": False, "final": True}


def test_unmatched_properties_ignored():
    ex = ConfigLiteralExtractor(make_registry(make_tag("x")))
    cls = {"name": "A"}
    assert ex.extract(cls, [("title", "t"), ("width", 10)]) == []
    assert cls == {"name": "A"}


def test_bad_value_reported_and_other_properties_processed(registry: TagRegistry):
    cls = {"name": "My.Cls"}
    errors = ConfigLiteralExtractor(registry).extract(
        cls, [("singleton", "yes"), ("extend", "Ext.Base")]
    )
    assert len(errors) == 1
    err = errors[0]
    assert isinstance(err, ConfigValueError)
    assert err.tag == "singleton"
    assert err.property == "singleton"
    assert "@singleton" in str(err) and "My.Cls" in str(err)
    assert cls["extends"] == "Ext.Base"
    # Свойство присутствовало: значение по умолчанию не применяется
    assert "singleton" not in cls


def test_generic_hook_failure_wrapped_with_tag_and_property():
    def extract(cls, value):
        raise ValueError("cannot read")

    ex = ConfigLiteralExtractor(make_registry(make_tag("width", config_pattern="width", extract=extract)))
    errors = ex.extract({"name": "C"}, [("width", "x")])
    assert [(e.tag, e.property, e.cls_name) for e in errors] == [("width", "width", "C")]


def test_unexpected_hook_exception_does_not_stop_extraction():
    def broken(cls, value):
        return value.text

    calls = []
    ex = ConfigLiteralExtractor(make_registry(
        make_tag("broken", config_pattern="broken", extract=broken),
        _counting_tag(calls),
        make_tag("final", config_pattern="final", config_default={"final": False}),
    ))
    cls = {"name": "C"}
    errors = ex.extract(cls, [("broken", 1), ("flag", 2)])

    assert [(e.tag, e.property) for e in errors] == [("broken", "broken")]
    assert isinstance(errors[0].__cause__, AttributeError)
    assert calls == [2]
    assert cls == {"name": "C", "flag": 2, "final": False}


def test_class_lists_merge_across_properties(registry: TagRegistry):
    cls = {}
    ConfigLiteralExtractor(registry).extract(cls, [
        ("requires", ["Ext.A", "Ext.B"]),
        ("uses", "Ext.C"),
        ("mixins", {"observable": "Ext.util.Observable"}),
        ("alias", ["widget.a", "widget.b"]),
    ])
    assert cls["requires"] == ["Ext.A", "Ext.B"]
    assert cls["uses"] == ["Ext.C"]
    assert cls["mixins"] == ["Ext.util.Observable"]
    assert cls["aliases"] == {"widget": ["a", "b"]}
