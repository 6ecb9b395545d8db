from typing import Any, Callable, Generic, TypeVar

__all__ = ("TypeDispatcher",)


R = TypeVar("R")
Converter = Callable[[Any], R]


class TypeDispatcher(Generic[R]):
    """Type-keyed converter registry.

    A value is handed to the converter registered for the closest class in its MRO, so
    ``IntEnum`` members, ``str`` enums and ``datetime`` instances pick up the converter of their
    nearest registered base. Values with no registered base go to the fallback. Resolutions are
    memoized per concrete type.
    """

    __slots__ = ("_cache", "_converters", "_fallback")

    def __init__(self, fallback: "Converter[R]") -> None:
        self._converters: dict[type, Converter[R]] = {}
        self._cache: dict[type, Converter[R]] = {}
        self._fallback = fallback

    def register(self, converter: "Converter[R]", *types: type) -> None:
        """Route values of ``types`` (and their subclasses) to ``converter``."""
        for type_ in types:
            self._converters[type_] = converter
        self._cache.clear()

    def get(self, obj_type: type) -> "Converter[R]":
        """Return the converter for ``obj_type``, or the fallback when none is registered."""
        converter = self._cache.get(obj_type)
        if converter is None:
            converter = next(
                (self._converters[base] for base in obj_type.__mro__ if base in self._converters), self._fallback
            )
            self._cache[obj_type] = converter
        return converter

    def __call__(self, value: Any) -> R:
        return self.get(type(value))(value)

    def clear_cache(self) -> None:
        self._cache.clear()
