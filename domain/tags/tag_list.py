"""Ordered, duplicate-free tag list with normalizing mutation operations."""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from domain.tags.config import TagConfig, get_config
from domain.tags.errors import InvalidOptionKey
from domain.tags.normalizer import clean
from domain.tags.parser import tokenize
from domain.tags.serializer import serialize

logger = logging.getLogger(__name__)

VALID_OPTIONS = ("parse",)


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
            yield item
        else:
            yield from _flatten(item)


class TagList:
    """
    Ordered set of tag names.

    Every mutation runs the normalizer, so members are never blank, never padded,
    never duplicated, and follow the lowercase/parameterize switches of the active
    configuration.

    Example:
        >>> tags = TagList("Fun", "Happy")
        >>> tags.add("Sad, Happy", parse=True).serialize()
        'Fun, Happy, Sad'
    """

    __slots__ = ("_items", "_config", "owner")

    def __init__(self, *names: Any, owner: Any = None, config: TagConfig | None = None, **options: Any) -> None:
        self._items: list[str] = []
        self._config = config
        self.owner = owner
        if names or options:
            self.add(*names, **options)

    @classmethod
    def from_string(cls, value: str | Iterable[str] | None, config: TagConfig | None = None) -> "TagList":
        """
        Build a TagList from a raw tag string.

        Example:
            >>> TagList.from_string("One , Two,  Three").to_list()
            ['One', 'Two', 'Three']
        """
        tag_list = cls(config=config)
        tag_list.add(tokenize(value, tag_list.config))
        return tag_list

    @property
    def config(self) -> TagConfig:
        """Explicit configuration if one was given, else the shared one (read at call time)."""
        return self._config if self._config is not None else get_config()

    # ---- mutation ----

    def add(self, *names: Any, **options: Any) -> "TagList":
        """
        Add tags. Duplicate or blank tags are ignored.

        Pass ``parse=True`` to split raw tag strings before adding them.
        """
        items = self._extract_and_apply_options(names, options)
        self._items.extend(items)
        self._clean()
        return self

    def append(self, name: Any) -> "TagList":
        return self.add(name)

    def __lshift__(self, name: Any) -> "TagList":
        return self.add(name)

    def concat(self, other: Iterable[Any] | str) -> "TagList":
        """Append every element of ``other`` and normalize."""
        if isinstance(other, str):
            other = [other]
        self._items.extend(_flatten(other))
        self._clean()
        return self

    def remove(self, *names: Any, **options: Any) -> "TagList":
        """
        Remove tags matching the given names, raw or normalized.

        Pass ``parse=True`` to split raw tag strings before matching.
        """
        items = self._extract_and_apply_options(names, options)
        targets = {str(item) for item in items if item is not None}
        targets.update(clean(items, self.config))
        before = len(self._items)
        self._items = [name for name in self._items if name not in targets]
        logger.debug("Removed %d tag(s)", before - len(self._items))
        return self

    def combine(self, other: Iterable[Any] | str) -> "TagList":
        """Return a new list holding this list's tags followed by ``other``'s."""
        return TagList(config=self._config).add(self).add(other)

    def __add__(self, other: Iterable[Any] | str) -> "TagList":
        return self.combine(other)

    # ---- serialization ----

    def serialize(self) -> str:
        """
        Tag string suitable for editing in a form.

        Example:
            >>> TagList("Round", "Square,Cube").serialize()
            'Round, "Square,Cube"'
        """
        return serialize(self._items, self.config)

    def __str__(self) -> str:
        return self.serialize()

    # ---- read-only sequence behaviour ----

    def to_list(self) -> list[str]:
        return list(self._items)

    def copy(self) -> "TagList":
        dup = TagList(owner=self.owner, config=self._config)
        dup._items = list(self._items)
        return dup

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._items[index]

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TagList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"TagList({self._items!r})"

    # ---- internals ----

    def _clean(self) -> None:
        self._items = clean(self._items, self.config)

    def _extract_and_apply_options(self, names: Sequence[Any], options: Mapping[str, Any]) -> list[Any]:
        args = list(names)
        opts = dict(options)
        if args and isinstance(args[-1], Mapping):
            opts = {**args.pop(), **opts}

        unknown = [str(key) for key in opts if key not in VALID_OPTIONS]
        if unknown:
            raise InvalidOptionKey(unknown, VALID_OPTIONS)

        if opts.get("parse"):
            args = [TagList.from_string(a, self._config) if isinstance(a, str) else a for a in args]

        return list(_flatten(args))
