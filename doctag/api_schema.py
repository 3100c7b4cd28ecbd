"""
JSON-схема вывода CLI.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SignatureM(BaseModel):
    short: str
    long: str
    tooltip: Optional[str] = None


class TagInfo(BaseModel):
    pattern: str
    key: Optional[str] = None
    multiline: bool = False
    member_type: Optional[str] = None
    signature: Optional[SignatureM] = None
    config_pattern: Optional[str] = None
    config_default: Optional[Dict[str, Any]] = None
    render_position: Optional[str] = None
    hooks: List[str] = Field(default_factory=list)


class TagList(BaseModel):
    tags: List[TagInfo]


class ParsedCommentM(BaseModel):
    body: str
    record: Dict[str, Any]
    unresolved: List[str] = Field(default_factory=list)


class ClassError(BaseModel):
    tag: str
    property: str
    message: str


class DefinedClassM(BaseModel):
    line: int
    cls: Dict[str, Any]
    errors: List[ClassError] = Field(default_factory=list)


class DefineResult(BaseModel):
    classes: List[DefinedClassM]


__all__ = [
    "SignatureM", "TagInfo", "TagList", "ParsedCommentM",
    "ClassError", "DefinedClassM", "DefineResult",
]
