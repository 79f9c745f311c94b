"""Configuration loading for routesc (.routesc.yml)."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import DEFAULT_ENCODING, CompileTask

CONFIG_FILENAME = ".routesc.yml"
DEFAULT_OUTPUT_DIR = "target/routes"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CompileDefaults:
    """Task settings applied to every routes file compiled from this config."""

    additional_imports: List[str] = field(default_factory=list)
    forwards_router: bool = True
    reverse_router: bool = True
    namespace_reverse_router: bool = False


@dataclass
class LoggingSettings:
    """Console verbosity and optional log file for compilation runs."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class RoutesConfig:
    """Represents the settings defined in .routesc.yml."""

    root: Path
    encoding: str = DEFAULT_ENCODING
    output_dir: Optional[Path] = None
    compile: CompileDefaults = field(default_factory=CompileDefaults)
    logging: Optional[LoggingSettings] = None

    def __post_init__(self) -> None:
        if self.output_dir is None:
            self.output_dir = self.root / DEFAULT_OUTPUT_DIR

    def task_for(self, routes_file: Path | str) -> CompileTask:
        """Build a compile task for ``routes_file`` using the configured defaults."""
        path = Path(routes_file)
        if not path.is_absolute():
            path = self.root / path
        return CompileTask(
            input_file=path,
            additional_imports=tuple(self.compile.additional_imports),
            forwards_router=self.compile.forwards_router,
            reverse_router=self.compile.reverse_router,
            namespace_reverse_router=self.compile.namespace_reverse_router,
        )


def load_config(config_path: Path) -> RoutesConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RoutesConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    encoding = _as_str(data.get("encoding")) or DEFAULT_ENCODING
    try:
        encoding = codecs.lookup(encoding).name
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding {encoding!r} in {CONFIG_FILENAME}") from exc

    output_dir_str = _as_str(data.get("output_dir"))
    output_dir = root / output_dir_str if output_dir_str else None

    compile_data = _as_dict(data.get("compile"))
    defaults = CompileDefaults()
    if compile_data:
        defaults.additional_imports = _as_str_list(compile_data.get("additional_imports"))
        defaults.forwards_router = _bool_or(compile_data.get("forwards_router"), defaults.forwards_router)
        defaults.reverse_router = _bool_or(compile_data.get("reverse_router"), defaults.reverse_router)
        defaults.namespace_reverse_router = _bool_or(
            compile_data.get("namespace_reverse_router"), defaults.namespace_reverse_router
        )

    logging_data = data.get("logging")
    logging_settings = None
    if isinstance(logging_data, dict):
        log_file_str = _as_str(logging_data.get("log_file"))
        logging_settings = LoggingSettings(
            verbose=_bool_or(logging_data.get("verbose"), False),
            log_file=root / log_file_str if log_file_str else None,
        )

    return RoutesConfig(
        root=root,
        encoding=encoding,
        output_dir=output_dir,
        compile=defaults,
        logging=logging_settings,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _bool_or(value: Any, default: bool) -> bool:
    parsed = _as_bool(value)
    return default if parsed is None else parsed


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CompileDefaults",
    "ConfigError",
    "LoggingSettings",
    "RoutesConfig",
    "load_config",
]
