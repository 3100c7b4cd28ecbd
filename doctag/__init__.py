from __future__ import annotations

# Public API:
#  • Engine: parse comments, extract Ext.define() classes, render HTML
#  • TagRegistry / Tag / TagDescriptor: the tag contract and its registry
from .aggregator import DocAggregator
from .engine import Engine
from .extractor import ConfigLiteralExtractor
from .render import RenderContext, RenderDispatcher, RenderedDoc
from .tags import RenderPosition, Signature, Tag, TagDescriptor, TagRegistry, register_lazy

__all__ = [
    "ConfigLiteralExtractor",
    "DocAggregator",
    "Engine",
    "RenderContext",
    "RenderDispatcher",
    "RenderPosition",
    "RenderedDoc",
    "Signature",
    "Tag",
    "TagDescriptor",
    "TagRegistry",
    "register_lazy",
]
