from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Sequence

from ..errors import TagDefinitionError, TagDiscoveryError
from .base import CombinesFragments, RenderPosition, RendersMarkup, Tag

if TYPE_CHECKING:
    from ..config import DoctagConfig

__all__ = [
    "TagSpec",
    "register_lazy",
    "registered_specs",
    "discover_all",
    "TagRegistry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagSpec:
    module: str
    class_name: str


# Явный список реализаций в порядке регистрации
_SPECS: List[TagSpec] = []


def register_lazy(*, module: str, class_name: str) -> None:
    """
    Зарегистрировать тег «по строкам» без импорта модуля.
    Модуль импортируется только при discover_all().
    """
    spec = TagSpec(module=module, class_name=class_name)
    if spec not in _SPECS:
        _SPECS.append(spec)


def registered_specs() -> List[TagSpec]:
    return list(_SPECS)


def _load_tag_from_spec(spec: TagSpec) -> Tag:
    # Поддерживаем как относительные (".since") так и абсолютные имена модулей.
    try:
        mod = importlib.import_module(spec.module, package=__package__)
    except ImportError as e:
        raise TagDiscoveryError(f"Tag module '{spec.module}' cannot be imported: {e}") from e
    cls = getattr(mod, spec.class_name, None)
    if cls is None:
        raise TagDiscoveryError(f"Tag class '{spec.class_name}' not found in {spec.module}")
    if not isinstance(cls, type) or not issubclass(cls, Tag):
        raise TagDiscoveryError(f"{spec.module}.{spec.class_name} is not a subclass of Tag")
    return cls()


def discover_all(extra: Sequence[TagSpec] = (), disabled: Iterable[str] = ()) -> List[Tag]:
    """
    Инстанцирует все зарегистрированные теги (встроенные + extra) в порядке регистрации.
    Теги, чьи pattern перечислены в disabled, пропускаются.
    """
    skip = set(disabled)
    tags: List[Tag] = []
    for spec in [*_SPECS, *(s for s in extra if s not in _SPECS)]:
        tag = _load_tag_from_spec(spec)
        if tag.pattern in skip:
            logger.debug(f"Tag @{tag.pattern} disabled by config")
            continue
        tags.append(tag)
    return tags


class TagRegistry:
    """
    Неизменяемый набор тегов с индексами по pattern, key и config_pattern.

    Все проверки выполняются при построении. Некорректный тег означает дефект
    сборки, поэтому ошибки фатальны (TagDefinitionError).
    """

    def __init__(self, tags: Iterable[Tag]):
        self._tags: tuple[Tag, ...] = tuple(tags)
        self._by_pattern: Dict[str, Tag] = {}
        self._by_config_pattern: Dict[str, Tag] = {}
        self._combiner_by_key: Dict[str, Tag] = {}
        self._index: Dict[int, int] = {}

        for i, tag in enumerate(self._tags):
            self._validate(tag)
            self._index[id(tag)] = i
            self._by_pattern[tag.pattern] = tag
            if tag.config_pattern:
                self._by_config_pattern[tag.config_pattern] = tag
            if isinstance(tag, CombinesFragments):
                prev = self._combiner_by_key.get(tag.key)
                if prev is not None:
                    logger.warning(
                        f"Tags @{prev.pattern} and @{tag.pattern} both combine into key "
                        f"'{tag.key}'; the later one wins"
                    )
                self._combiner_by_key[tag.key] = tag

        logger.debug(f"TagRegistry built with {len(self._tags)} tags")

    @classmethod
    def discover(cls, config: Optional[DoctagConfig] = None) -> TagRegistry:
        """Встроенные теги + модули из конфигурации, за вычетом отключённых."""
        if config is None:
            return cls(discover_all())
        extra = [TagSpec(module=m.module, class_name=m.class_name) for m in config.tags.modules]
        return cls(discover_all(extra=extra, disabled=config.tags.disabled))

    def _validate(self, tag: Tag) -> None:
        name = type(tag).__name__
        desc = getattr(tag, "descriptor", None)
        if desc is None:
            raise TagDefinitionError(f"{name}: descriptor is not defined")
        if not desc.pattern:
            raise TagDefinitionError(f"{name}: pattern must not be empty")
        if desc.pattern.startswith("@"):
            raise TagDefinitionError(f"{name}: pattern '{desc.pattern}' must not contain '@'")
        if desc.pattern in self._by_pattern:
            other = type(self._by_pattern[desc.pattern]).__name__
            raise TagDefinitionError(f"{name}: pattern '@{desc.pattern}' already registered by {other}")
        if isinstance(tag, CombinesFragments) and not desc.key:
            raise TagDefinitionError(f"{name}: combine() is implemented but key is not defined")
        if desc.render_position is not None:
            if not isinstance(desc.render_position, RenderPosition):
                raise TagDefinitionError(
                    f"{name}: render_position must be one of "
                    f"{[p.value for p in RenderPosition]}, got {desc.render_position!r}"
                )
            if not isinstance(tag, RendersMarkup):
                raise TagDefinitionError(f"{name}: render_position is set but render() is not implemented")
        if desc.config_default is not None and not desc.config_pattern:
            raise TagDefinitionError(f"{name}: config_default requires config_pattern")
        if desc.config_pattern and desc.config_pattern in self._by_config_pattern:
            other = type(self._by_config_pattern[desc.config_pattern]).__name__
            raise TagDefinitionError(
                f"{name}: config_pattern '{desc.config_pattern}' already handled by {other}"
            )

    # --- lookup ---------------------------------------------------------

    def by_pattern(self, pattern: str) -> Optional[Tag]:
        return self._by_pattern.get(pattern)

    def by_config_pattern(self, name: str) -> Optional[Tag]:
        return self._by_config_pattern.get(name)

    def resolve(self, identity: str) -> Optional[Tag]:
        """
        Тег-владелец группы фрагментов: тот, чей key совпадает с идентичностью
        и кто умеет combine(); иначе тег с таким pattern.
        """
        tag = self._combiner_by_key.get(identity)
        if tag is not None:
            return tag
        return self._by_pattern.get(identity)

    def index_of(self, tag: Tag) -> int:
        return self._index[id(tag)]

    def renderable(self, position: RenderPosition) -> List[Tag]:
        return [t for t in self._tags if t.render_position is position]

    def with_config_default(self) -> List[Tag]:
        return [t for t in self._tags if t.config_default is not None]

    def patterns(self) -> List[str]:
        return [t.pattern for t in self._tags]

    def multiline_patterns(self) -> List[str]:
        return [t.pattern for t in self._tags if t.multiline]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._by_pattern
