"""Result values returned by operations that report failures instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of an operation: a value on success, an error otherwise."""

    success: bool
    value: Optional[T] = None
    error: Optional[E] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> Result[T, E]:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: E) -> Result[T, E]:
        return cls(success=False, error=error)


@dataclass(frozen=True)
class FileError:
    """Filesystem failure, keeping the kind of error the OS reported."""

    path: str
    kind: str
    message: str

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> FileError:
        return cls(path=path, kind=type(exc).__name__, message=exc.strerror or str(exc))

    def __str__(self) -> str:
        return f"{self.kind}: {self.message} ({self.path})"
