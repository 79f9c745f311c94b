"""Pipeline orchestration for routes compilation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .config import RoutesConfig
from .logging import configure_logging, get_logger
from .models import (
    DEFAULT_ENCODING,
    CompileTask,
    Failure,
    Result,
    RoutesGenerator,
    RoutesParser,
    Success,
)

ROUTES_SUFFIX = ".routes"
DEFAULT_NAMESPACE = "router"


class OutputPathError(ValueError):
    """Raised when a generator names a file outside the output directory."""


def derive_namespace(path: Path | str) -> str:
    """Return the generator namespace for a routes file name."""
    name = Path(path).name
    if name.endswith(ROUTES_SUFFIX):
        return name[: -len(ROUTES_SUFFIX)]
    return DEFAULT_NAMESPACE


class RoutesCompiler:
    """Coordinates parsing, generation and writing of router sources.

    Every read and write goes through the single ``encoding`` given here, which
    is what lets :func:`routesc.detector.detect` treat undecodable files as
    foreign.
    """

    def __init__(self, parser: RoutesParser, *, encoding: str = DEFAULT_ENCODING) -> None:
        self.parser = parser
        self.encoding = encoding
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config(cls, config: RoutesConfig, parser: RoutesParser) -> RoutesCompiler:
        """Build a compiler from a loaded config.

        Applies the config's ``logging`` section, when present, before
        returning a compiler that uses the configured encoding.
        """
        if config.logging is not None:
            configure_logging(verbose=config.logging.verbose, log_file=config.logging.log_file)
        return cls(parser, encoding=config.encoding)

    def compile(
        self,
        task: CompileTask,
        generator: RoutesGenerator,
        output_dir: Path | str,
    ) -> Result[Tuple[Path, ...]]:
        """Compile ``task`` into ``output_dir``.

        Parse errors come back as a :class:`Failure` and leave the output
        directory untouched. Filesystem errors while writing propagate; some
        outputs may already have been overwritten when that happens.
        """
        namespace = derive_namespace(task.input_file)
        routes_file = task.input_file.absolute()
        self.logger.info("Compiling %s (namespace=%s)", routes_file, namespace)

        parsed = self.parser.parse(routes_file)
        if isinstance(parsed, Failure):
            self.logger.warning(
                "Parsing %s failed with %d error(s)", routes_file, len(parsed.errors)
            )
            return parsed

        rules = parsed.value
        self.logger.debug("Parser produced %d rule(s)", len(rules))
        generated = generator.generate(task, namespace, rules)

        root = Path(output_dir).absolute()
        targets = [(self._resolve_output(root, filename), content) for filename, content in generated]

        written: List[Path] = []
        for target, content in targets:
            self._write(target, content)
            written.append(target)
        self.logger.info("Wrote %d file(s) for %s", len(written), routes_file)
        return Success(tuple(written))

    def compile_all(
        self,
        tasks: Iterable[CompileTask],
        generator: RoutesGenerator,
        output_dir: Path | str,
    ) -> List[Tuple[CompileTask, Result[Tuple[Path, ...]]]]:
        """Compile several tasks in order, pairing each task with its result.

        A failed parse only affects its own task. The caller must make sure
        the tasks do not generate colliding file names.
        """
        results: List[Tuple[CompileTask, Result[Tuple[Path, ...]]]] = []
        for task in tasks:
            results.append((task, self.compile(task, generator, output_dir)))
        failed = sum(1 for _, result in results if not result.ok)
        if failed:
            self.logger.warning("%d of %d routes file(s) failed to compile", failed, len(results))
        return results

    # ------------------------------------------------------------------
    # Internal helpers

    def _resolve_output(self, root: Path, filename: str) -> Path:
        relative = Path(filename)
        if relative.is_absolute():
            raise OutputPathError(f"Generated file name must be relative, got {filename!r}")
        target = root / relative
        resolved_root = root.resolve()
        if not target.resolve().is_relative_to(resolved_root):
            raise OutputPathError(f"Generated file {filename!r} escapes {root}")
        return target

    def _write(self, target: Path, content: str) -> None:
        if not target.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            target.touch()
        target.write_bytes(content.encode(self.encoding))
        self.logger.debug("Wrote %s", target)


def compile_routes(
    file: Path | str,
    additional_imports: Sequence[str],
    forwards_router: bool,
    reverse_router: bool,
    namespace_reverse_router: bool,
    generated_dir: Path | str,
    *,
    parser: RoutesParser,
    generator: RoutesGenerator,
    encoding: str = DEFAULT_ENCODING,
) -> Result[Tuple[Path, ...]]:
    """Compile a routes file from flat arguments."""
    task = CompileTask(
        input_file=Path(file),
        additional_imports=tuple(additional_imports),
        forwards_router=forwards_router,
        reverse_router=reverse_router,
        namespace_reverse_router=namespace_reverse_router,
    )
    compiler = RoutesCompiler(parser, encoding=encoding)
    return compiler.compile(task, generator, generated_dir)


__all__ = [
    "DEFAULT_NAMESPACE",
    "ROUTES_SUFFIX",
    "OutputPathError",
    "RoutesCompiler",
    "compile_routes",
    "derive_namespace",
]
