from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import UnwrapOnAbsent
from .option import Nothing, Option, Some

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Result(Generic[E, A]):
    """Outcome of ``Option.ok_or``: ``Ok(value)`` or ``Err(error)``.

    Each side is reachable as an option through ``ok()`` and ``err()``;
    the combinators below are written against those.
    """

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def ok(self) -> Option[A]:
        return Some(self.value) if self.is_ok() else Nothing()  # type: ignore[attr-defined]

    def err(self) -> Option[E]:
        return Some(self.error) if self.is_err() else Nothing()  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Result[E, B]":
        return self.ok().map_or(self, lambda v: Ok(f(v)))  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], B]) -> "Result[B, A]":
        return self.err().map_or(self, lambda e: Err(f(e)))  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], "Result[E, B]"]) -> "Result[E, B]":
        return self.ok().map_or(self, f)  # type: ignore[arg-type]

    def unwrap(self) -> A:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        raise UnwrapOnAbsent(f"called unwrap on {self!r}")

    def unwrap_or(self, default: A) -> A:
        return self.ok().unwrap_or(default)

    def unwrap_or_else(self, f: Callable[[E], A]) -> A:
        return self.ok().unwrap_or_else(lambda: f(self.error))  # type: ignore[attr-defined]

    get_or_else = unwrap_or


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def __repr__(self) -> str: return f"Ok({self.value!r})"
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    def __repr__(self) -> str: return f"Err({self.error!r})"
    def is_ok(self) -> bool: return False
