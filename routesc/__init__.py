"""Routes compiler: provenance-preserving generation of router sources."""

from .config import ConfigError, LoggingSettings, RoutesConfig, load_config
from .detector import GeneratedSource, SourcePosition, detect, remap_position
from .markers import GENERATOR_MARKER, MarkerWriter
from .models import (
    DEFAULT_ENCODING,
    CompilationError,
    CompileTask,
    Failure,
    Result,
    RoutesGenerator,
    RoutesParser,
    Success,
)
from .orchestrator import OutputPathError, RoutesCompiler, compile_routes, derive_namespace

__all__ = [
    "DEFAULT_ENCODING",
    "GENERATOR_MARKER",
    "CompilationError",
    "CompileTask",
    "ConfigError",
    "Failure",
    "GeneratedSource",
    "LoggingSettings",
    "MarkerWriter",
    "OutputPathError",
    "Result",
    "RoutesCompiler",
    "RoutesConfig",
    "RoutesGenerator",
    "RoutesParser",
    "SourcePosition",
    "Success",
    "compile_routes",
    "derive_namespace",
    "detect",
    "load_config",
    "remap_position",
]
