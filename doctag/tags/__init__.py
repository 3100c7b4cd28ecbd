from __future__ import annotations

# Public API of tags package:
#  • Tag, TagDescriptor and the capability protocols: the contract
#  • TagRegistry / discover_all: building the set of available tags
#  • register_lazy: adding third-party tags without importing them eagerly
from .base import (
    ClassConfig,
    CombinesFragments,
    DocRecord,
    ExtractsConfig,
    Fragment,
    FragmentGroup,
    ParsesAnnotation,
    RenderPosition,
    RendersMarkup,
    Signature,
    Tag,
    TagDescriptor,
)
from .registry import TagRegistry, TagSpec, discover_all, register_lazy

__all__ = [
    "ClassConfig",
    "CombinesFragments",
    "DocRecord",
    "ExtractsConfig",
    "Fragment",
    "FragmentGroup",
    "ParsesAnnotation",
    "RenderPosition",
    "RendersMarkup",
    "Signature",
    "Tag",
    "TagDescriptor",
    "TagRegistry",
    "TagSpec",
    "discover_all",
    "register_lazy",
]

# ---- Static registration of built-in tags -----------------------------------
# Only module:class strings here; modules are imported by discover_all().
# Order of registration is the enumeration order of the registry.

register_lazy(module=".since", class_name="SinceTag")
register_lazy(module=".deprecated", class_name="DeprecatedTag")
register_lazy(module=".deprecated", class_name="RemovedTag")
register_lazy(module=".access", class_name="PrivateTag")
register_lazy(module=".access", class_name="ProtectedTag")
register_lazy(module=".flags", class_name="StaticTag")
register_lazy(module=".flags", class_name="ChainableTag")
register_lazy(module=".event", class_name="EventTag")
register_lazy(module=".singleton", class_name="SingletonTag")
register_lazy(module=".extends", class_name="ExtendsTag")
register_lazy(module=".extends", class_name="ExtendAliasTag")
register_lazy(module=".alias", class_name="AliasTag")
register_lazy(module=".alias", class_name="XtypeTag")
register_lazy(module=".class_list", class_name="MixinsTag")
register_lazy(module=".class_list", class_name="RequiresTag")
register_lazy(module=".class_list", class_name="UsesTag")
register_lazy(module=".see", class_name="SeeTag")
