"""Core data models shared across routesc components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Optional, Protocol, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class CompileTask:
    """A single routes compilation request.

    ``input_file`` is the routes file to compile. ``additional_imports`` are
    passed through to the generator in caller order. The three flags select
    which routers the generator emits and whether the reverse router is
    namespaced.
    """

    input_file: Path
    additional_imports: Tuple[str, ...] = ()
    forwards_router: bool = True
    reverse_router: bool = True
    namespace_reverse_router: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_file", Path(self.input_file))
        object.__setattr__(self, "additional_imports", tuple(self.additional_imports))


@dataclass(frozen=True)
class CompilationError:
    """Structured problem reported by a parser or generator."""

    message: str
    source: Optional[Path] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        location = [str(part) for part in (self.source, self.line, self.column) if part is not None]
        if not location:
            return self.message
        return f"{':'.join(location)}: {self.message}"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying one or more compilation errors."""

    errors: Tuple[CompilationError, ...]

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Failure requires at least one CompilationError")
        object.__setattr__(self, "errors", errors)

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]


class RoutesParser(Protocol):
    """Contract for the routes file parser."""

    def parse(self, path: Path) -> Result[Sequence[Any]]:
        """Parse ``path`` into rules, or report why it cannot be parsed."""
        ...


class RoutesGenerator(Protocol):
    """Contract for the router source generator."""

    def generate(
        self, task: CompileTask, namespace: str, rules: Sequence[Any]
    ) -> Sequence[Tuple[str, str]]:
        """Return ``(relative_filename, content)`` pairs for the parsed rules."""
        ...


__all__ = [
    "DEFAULT_ENCODING",
    "CompilationError",
    "CompileTask",
    "Failure",
    "Result",
    "RoutesGenerator",
    "RoutesParser",
    "Success",
]
