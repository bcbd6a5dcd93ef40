"""Explicit success/failure values for the validation core.

The core never uses exceptions for control flow. Each layer returns either
``Ok(value)`` or ``Err(error)``, where ``error`` is a
:class:`~release_guard.exceptions.ReleaseGuardError` instance. Callers raise it
with :meth:`Err.unwrap` at the boundary where exceptions are wanted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar

from release_guard.exceptions import ReleaseGuardError

T = TypeVar("T")
E = TypeVar("E", bound=ReleaseGuardError)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    @property
    def ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Ok[T] | Err[E]
