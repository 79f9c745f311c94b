"""Tests for routesc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from routesc.config import CompileDefaults, ConfigError, LoggingSettings, RoutesConfig, load_config
from routesc.models import CompileTask


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, RoutesConfig)
    assert config.root == tmp_path.resolve()
    assert config.encoding == "utf-8"
    assert config.output_dir == tmp_path.resolve() / "target" / "routes"
    assert config.compile == CompileDefaults()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".routesc.yml"
    config_file.write_text(
        """
encoding: UTF8
output_dir: build/generated
compile:
  additional_imports:
    - controllers.Assets
    - "models._"
  forwards_router: false
  reverse_router: "yes"
  namespace_reverse_router: true
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.encoding == "utf-8"
    assert config.output_dir == tmp_path.resolve() / "build" / "generated"
    assert config.compile.additional_imports == ["controllers.Assets", "models._"]
    assert config.compile.forwards_router is False
    assert config.compile.reverse_router is True
    assert config.compile.namespace_reverse_router is True


def test_load_config_accepts_sibling_file_path(tmp_path: Path) -> None:
    (tmp_path / ".routesc.yml").write_text("output_dir: out\n", encoding="utf-8")

    config = load_config(tmp_path / "conf.routes")

    assert config.output_dir == tmp_path.resolve() / "out"


def test_load_config_inline_imports_and_empty_file(tmp_path: Path) -> None:
    config_file = tmp_path / ".routesc.yml"
    config_file.write_text("compile:\n  additional_imports: [a.B, c.D]\n", encoding="utf-8")
    assert load_config(config_file).compile.additional_imports == ["a.B", "c.D"]

    config_file.write_text("\n\n", encoding="utf-8")
    assert load_config(config_file).compile == CompileDefaults()


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".routesc.yml").write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".routesc.yml").write_text("compile: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_load_config_rejects_unknown_encoding(tmp_path: Path) -> None:
    (tmp_path / ".routesc.yml").write_text("encoding: klingon-8\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unknown encoding"):
        load_config(tmp_path)


def test_task_for_applies_defaults(tmp_path: Path) -> None:
    config = RoutesConfig(
        root=tmp_path,
        compile=CompileDefaults(
            additional_imports=["controllers.Assets"],
            forwards_router=True,
            reverse_router=False,
            namespace_reverse_router=True,
        ),
    )

    task = config.task_for("conf/app.routes")

    assert task == CompileTask(
        input_file=tmp_path / "conf" / "app.routes",
        additional_imports=("controllers.Assets",),
        forwards_router=True,
        reverse_router=False,
        namespace_reverse_router=True,
    )
    assert config.task_for(Path("/abs/app.routes")).input_file == Path("/abs/app.routes")


def test_load_config_parses_logging_section(tmp_path: Path) -> None:
    (tmp_path / ".routesc.yml").write_text(
        "logging:\n  verbose: yes\n  log_file: logs/routesc.log\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.logging == LoggingSettings(
        verbose=True, log_file=tmp_path.resolve() / "logs" / "routesc.log"
    )
    (tmp_path / "bare").mkdir()
    assert load_config(tmp_path / "bare").logging is None
