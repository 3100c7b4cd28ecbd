import textwrap
from pathlib import Path

import pytest

from doctag.config import DoctagConfig
from doctag.engine import Engine
from doctag.formatter import InlineFormatter
from doctag.tags import TagRegistry

# Импорт из унифицированной инфраструктуры
from tests.infrastructure.file_utils import write


@pytest.fixture(scope="session")
def registry() -> TagRegistry:
    """Реестр встроенных тегов; неизменяем, поэтому общий на всю сессию."""
    return TagRegistry.discover()


@pytest.fixture
def engine(registry: TagRegistry) -> Engine:
    return Engine(DoctagConfig(), registry=registry)


@pytest.fixture
def formatter() -> InlineFormatter:
    return InlineFormatter()


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Минимальный проект: doctag.yaml, комментарий и исходник с Ext.define()."""
    root = tmp_path
    write(
        root / "doctag.yaml",
        textwrap.dedent("""
        tags:
          disabled: ["@removed"]
          modules:
            - module: tests.infrastructure.sample_tags
              class_name: TodoTag
        format:
          link_template: "/api/{cls}.html#{member}"
        """).strip() + "\n",
    )
    write(
        root / "panel.txt",
        textwrap.dedent("""
        /**
         * A panel with a title.
         * @since 4.1
         * @deprecated 5.0 Use {@link Ext.Panel} instead.
         * @todo Drop the legacy path
         * @private
         */
        """).strip() + "\n",
    )
    write(
        root / "panel.js",
        textwrap.dedent("""
        Ext.define('My.Panel', {
            extend: 'Ext.panel.Panel',
            alias: 'widget.mypanel',
            requires: ['Ext.button.Button']
        });
        """).strip() + "\n",
    )
    return root
