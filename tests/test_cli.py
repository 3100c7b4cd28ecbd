from pathlib import Path

from tests.infrastructure.cli_utils import jload, run_cli
from tests.infrastructure.file_utils import write, write_comment, write_source_file


def test_cli_list(tmpproj: Path):
    cp = run_cli(tmpproj, "list")
    assert cp.returncode == 0, cp.stderr
    tags = {t["pattern"]: t for t in jload(cp.stdout)["tags"]}
    assert "removed" not in tags
    assert tags["todo"]["render_position"] == "bottom"
    assert tags["singleton"]["config_default"] == {"singleton": False}
    assert tags["private"]["signature"] == {
        "short": "PRI", "long": "private", "tooltip": "For internal use only; may change without notice",
    }
    assert tags["since"]["hooks"] == ["parse", "combine"]
    assert tags["static"]["hooks"] == ["combine"]


def test_cli_parse(tmpproj: Path):
    cp = run_cli(tmpproj, "parse", "panel.txt")
    assert cp.returncode == 0, cp.stderr
    data = jload(cp.stdout)
    assert data["body"] == "A panel with a title."
    assert data["record"]["since"] == "4.1"
    assert data["record"]["private"] is True
    assert data["record"]["todo"] == ["Drop the legacy path"]


def test_cli_render(tmpproj: Path):
    cp = run_cli(tmpproj, "render", "panel.txt")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.startswith("<div class='rounded-box deprecated-box")
    assert "<p>A panel with a title.</p>" in cp.stdout


def test_cli_define(tmpproj: Path):
    cp = run_cli(tmpproj, "define", "panel.js")
    assert cp.returncode == 0, cp.stderr
    classes = jload(cp.stdout)["classes"]
    assert classes == [{
        "line": 1,
        "cls": {
            "name": "My.Panel",
            "extends": "Ext.panel.Panel",
            "aliases": {"widget": ["mypanel"]},
            "requires": ["Ext.button.Button"],
            "singleton": False,
        },
        "errors": [],
    }]


def test_cli_define_reports_errors(tmp_path: Path):
    write(tmp_path / "bad.js", "Ext.define('A', { singleton: 42 });\n")
    cp = run_cli(tmp_path, "define", "bad.js")
    assert cp.returncode == 1
    errors = jload(cp.stdout)["classes"][0]["errors"]
    assert errors == [{"tag": "singleton", "property": "singleton", "message": "expected boolean, got 42"}]
    assert "Property: singleton" in cp.stderr


def test_cli_missing_input(tmp_path: Path):
    cp = run_cli(tmp_path, "parse", "absent.txt")
    assert cp.returncode == 2
    assert "Input file not found" in cp.stderr


def test_cli_bad_config(tmp_path: Path):
    write(tmp_path / "doctag.yaml", "tags: 5\n")
    cp = run_cli(tmp_path, "list")
    assert cp.returncode == 2
    assert "tags: expected mapping" in cp.stderr


def test_cli_render_deprecated_event(tmp_path: Path):
    write_comment(tmp_path / "event.txt", """
        /**
         * @event beforeclose
         * Fires before the window closes.
         * @deprecated 5.0 Listen to `close` instead.
         */
    """)
    cp = run_cli(tmp_path, "render", "event.txt")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.startswith(
        "<div class='rounded-box deprecated-box deprecated-tag-box'>"
        "<p>This event has been <strong>deprecated</strong> since 5.0</p>"
        "<p>Listen to <code>close</code> instead.</p></div>"
    )


def test_cli_define_several_classes(tmp_path: Path):
    write_source_file(tmp_path / "app.js", """
        Ext.define('App.First', {
            singleton: true
        });

        Ext.define('App.Second', {
            extend: 'App.First',
            uses: 'Ext.util.Format'
        });
    """)
    cp = run_cli(tmp_path, "define", "app.js")
    assert cp.returncode == 0, cp.stderr
    classes = jload(cp.stdout)["classes"]
    assert [(c["line"], c["cls"]["name"]) for c in classes] == [(1, "App.First"), (5, "App.Second")]
    assert classes[0]["cls"]["singleton"] is True
    assert classes[1]["cls"] == {
        "name": "App.Second",
        "extends": "App.First",
        "uses": ["Ext.util.Format"],
        "singleton": False,
    }


def test_cli_bad_link_template(tmp_path: Path):
    write(tmp_path / "doctag.yaml", "format:\n  link_template: \"/api/{class}.html\"\n")
    cp = run_cli(tmp_path, "list")
    assert cp.returncode == 2
    assert "format.link_template: invalid template" in cp.stderr


def test_cli_version(tmp_path: Path):
    cp = run_cli(tmp_path, "--version")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.startswith("doctag ")
