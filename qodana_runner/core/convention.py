"""Lazily resolved, overridable settings.

A ``Property`` holds an optional explicit value and an optional convention.
Either may be a plain value, another ``Property`` or a zero-argument callable;
the latter two are evaluated on read, so a convention can follow settings of
another object that are assigned later.

Resolved values are memoized until any property is written again, which keeps
repeated reads cheap while honouring "last write wins".
"""

from typing import Any, Generic, List, Optional, TypeVar

from ..services.exceptions import ConfigurationError

T = TypeVar('T')

_UNSET = object()


class Property(Generic[T]):
    """A setting with an explicit value slot and a default-producing convention."""

    # Bumped on every write to any property; memoized values from an older
    # generation are recomputed.
    _generation = 0

    def __init__(self, name: str, convention: Any = _UNSET):
        self.name = name
        self._value: Any = _UNSET
        self._convention: Any = convention
        self._memo_generation = -1
        self._memo: Any = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @classmethod
    def _touch(cls) -> None:
        Property._generation += 1

    def set(self, value: Any) -> 'Property[T]':
        """Assign an explicit value. ``None`` clears it."""
        self._value = _UNSET if value is None else value
        self._touch()
        return self

    def convention(self, value: Any) -> 'Property[T]':
        """Assign the default used when no explicit value is set."""
        self._convention = _UNSET if value is None else value
        self._touch()
        return self

    def is_explicit(self) -> bool:
        return self._value is not _UNSET

    def _evaluate(self, source: Any) -> Optional[T]:
        if source is _UNSET:
            return None
        if isinstance(source, Property):
            return source.get_or_none()
        if callable(source) and not isinstance(source, type):
            return source()
        return source

    def _resolve(self) -> Optional[T]:
        if self._value is not _UNSET:
            return self._evaluate(self._value)
        return self._evaluate(self._convention)

    def get_or_none(self) -> Optional[T]:
        """Return the resolved value, or None when absent."""
        if self._memo_generation != Property._generation:
            generation = Property._generation
            self._memo = self._resolve()
            self._memo_generation = generation
        return self._memo

    def get_or_else(self, default: T) -> T:
        value = self.get_or_none()
        return default if value is None else value

    def get(self) -> T:
        """Return the resolved value.

        Raises:
            ConfigurationError: If neither a value nor a convention is available
        """
        value = self.get_or_none()
        if value is None:
            raise ConfigurationError(
                f"No value has been specified for property '{self.name}'"
            )
        return value

    def is_present(self) -> bool:
        return self.get_or_none() is not None


class ListProperty(Property[List[T]]):
    """A list-valued property whose convention defaults to an empty list."""

    def __init__(self, name: str, convention: Any = _UNSET):
        super().__init__(name, [] if convention is _UNSET else convention)

    def add(self, item: T) -> 'ListProperty[T]':
        """Append to the explicit value, starting from the current resolved list."""
        current = self.get_or_else([])
        self.set(current + [item])
        return self

    def get_or_none(self) -> Optional[List[T]]:
        value = super().get_or_none()
        return None if value is None else list(value)

