from __future__ import annotations
from dataclasses import FrozenInstanceError, dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar

from .errors import IllegalConstruction, UnwrapOnAbsent

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Either ``Some(value)`` or ``Nothing()``.

    Only the two variants may be instantiated. Every combinator leaves the
    receiver untouched and returns either a new option or one of its inputs.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Option[T]":
        if not issubclass(cls, (Some, Nothing)):
            raise IllegalConstruction()
        return super().__new__(cls)

    @classmethod
    def default(cls) -> "Option[T]":
        return Nothing()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    # extraction

    def unwrap(self) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise UnwrapOnAbsent()

    def expect(self, message: str) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise UnwrapOnAbsent(message)

    def unwrap_or(self, fallback: T) -> T:
        return self.value if self.is_some() else fallback  # type: ignore[attr-defined]

    def unwrap_or_else(self, produce: Callable[[], T]) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return produce()

    get_or_else = unwrap_or

    # transformation

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return Nothing()

    def map_or(self, fallback: U, f: Callable[[T], U]) -> U:
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return fallback

    def map_or_else(self, produce_fallback: Callable[[], U], f: Callable[[T], U]) -> U:
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return produce_fallback()

    # combination

    def and_(self, other: "Option[U]") -> "Option[U]":
        if self.is_some():
            return other
        return Nothing()

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return Nothing()

    flat_map = and_then

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self.and_then(lambda v: self if predicate(v) else Nothing())

    def or_(self, other: "Option[T]") -> "Option[T]":
        if self.is_some():
            return self
        return other

    def or_else(self, produce: Callable[[], "Option[T]"]) -> "Option[T]":
        if self.is_some():
            return self
        return produce()

    def xor(self, other: "Option[T]") -> "Option[T]":
        """The one operand that is ``Some``, or a fresh ``Nothing`` when zero or two are."""
        if self.is_some():
            return Nothing() if other.is_some() else self
        if other.is_some():
            return other
        return Nothing()

    def flatten(self) -> "Option[Any]":
        """Remove one level of nesting.

        ``Some(inner)`` gives back ``inner`` whenever it is an option, absent
        ones included. A ``Some`` holding a plain value is returned as is.
        """
        return self.map_or_else(Nothing, lambda v: v if isinstance(v, Option) else self)

    # conversion

    def ok_or(self, error: E) -> "Result[E, T]":
        from .result import Ok, Err
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(error)

    def ok_or_else(self, produce_error: Callable[[], E]) -> "Result[E, T]":
        from .result import Ok, Err
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(produce_error())


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def __repr__(self) -> str: return f"Some({self.value!r})"
    def is_some(self) -> bool: return True


class Nothing(Option[T]):
    __slots__ = ()
    def __setattr__(self, name: str, value: Any) -> None: raise FrozenInstanceError(f"cannot assign to field {name!r}")
    def __delattr__(self, name: str) -> None: raise FrozenInstanceError(f"cannot delete field {name!r}")
    def __repr__(self) -> str: return "Nothing"
    def __eq__(self, other: object) -> bool: return isinstance(other, Nothing)
    def __hash__(self) -> int: return hash(Nothing)
    def is_some(self) -> bool: return False


def some(value: T) -> Option[T]:
    return Some(value)


def nothing() -> Option[Any]:
    return Nothing()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else Nothing()
