from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List

from .api_schema import (
    ClassError, DefinedClassM, DefineResult, ParsedCommentM, SignatureM, TagInfo, TagList,
)
from .config import load_config
from .engine import Engine
from .errors import DoctagUserError
from .tags.base import CombinesFragments, ExtractsConfig, ParsesAnnotation, RendersMarkup, Tag
from .version import tool_version

_HOOKS = (
    ("parse", ParsesAnnotation),
    ("combine", CombinesFragments),
    ("extract_from_config", ExtractsConfig),
    ("render", RendersMarkup),
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="doctag",
        description="Doc-comment tags: parse, extract from Ext.define(), render",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--config", type=Path, help="путь к doctag.yaml (по умолчанию ./doctag.yaml)")
    p.add_argument("--debug", action="store_true", help="подробный лог в stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="Зарегистрированные теги (JSON)")

    sp_parse = sub.add_parser("parse", help="Комментарий → запись документации (JSON)")
    sp_parse.add_argument("input", help="файл с комментарием или - для stdin")

    sp_render = sub.add_parser("render", help="Комментарий → HTML")
    sp_render.add_argument("input", help="файл с комментарием или - для stdin")
    sp_render.add_argument("--name", help="имя записи для сообщений об ошибках")

    sp_define = sub.add_parser("define", help="Ext.define() в исходнике JavaScript → классы (JSON)")
    sp_define.add_argument("input", help="файл .js или - для stdin")

    return p


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("DOCTAG_DEBUG") else logging.INFO
    root = logging.getLogger("doctag")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _read_input(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    path = Path(arg)
    if not path.is_file():
        raise DoctagUserError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _jdumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def _tag_info(tag: Tag) -> TagInfo:
    sig = tag.signature
    return TagInfo(
        pattern=tag.pattern,
        key=tag.key,
        multiline=tag.multiline,
        member_type=tag.member_type,
        signature=SignatureM(short=sig.short, long=sig.long, tooltip=sig.tooltip) if sig else None,
        config_pattern=tag.config_pattern,
        config_default=dict(tag.config_default) if tag.config_default is not None else None,
        render_position=tag.render_position.value if tag.render_position else None,
        hooks=[name for name, proto in _HOOKS if isinstance(tag, proto)],
    )


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.debug))

    try:
        engine = Engine(load_config(ns.config))

        if ns.cmd == "list":
            result = TagList(tags=[_tag_info(t) for t in engine.registry])
            sys.stdout.write(_jdumps(result.model_dump(mode="json")))
            return 0

        if ns.cmd == "parse":
            parsed = engine.parse_comment(_read_input(ns.input))
            result = ParsedCommentM(body=parsed.body, record=parsed.record, unresolved=parsed.unresolved)
            sys.stdout.write(_jdumps(result.model_dump(mode="json")))
            return 0

        if ns.cmd == "render":
            doc = engine.render_comment(_read_input(ns.input), name=ns.name)
            sys.stdout.write(doc.html + "\n")
            for err in doc.errors:
                sys.stderr.write(str(err) + "\n")
            return 1 if doc.errors else 0

        if ns.cmd == "define":
            classes = engine.define_classes(_read_input(ns.input))
            result = DefineResult(classes=[
                DefinedClassM(
                    line=c.line + 1,
                    cls=c.cls,
                    errors=[ClassError(tag=e.tag, property=e.property, message=e.args[0]) for e in c.errors],
                )
                for c in classes
            ])
            sys.stdout.write(_jdumps(result.model_dump(mode="json")))
            return 1 if any(c.errors for c in classes) else 0

    except DoctagUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
