from __future__ import annotations

from pathlib import Path

import pytest

from infrastructure.config.settings import ConverterSettings, SettingsError, load_settings


def test_defaults_without_file_or_env() -> None:
    settings = load_settings(environ={})

    assert settings == ConverterSettings()
    assert settings.features_dir == Path("features")
    assert settings.pattern == "*.feature"


def test_yaml_file_then_env_override(tmp_path: Path) -> None:
    config = tmp_path / "feature2curl.yaml"
    config.write_text(
        "features_dir: src/test/karate\noutput_dir: out\nlog_level: debug\n",
        encoding="utf-8",
    )

    settings = load_settings(config, environ={"FEATURE2CURL_OUTPUT_DIR": "env-out"})

    assert settings.features_dir == Path("src/test/karate")
    assert settings.output_dir == Path("env-out")
    assert settings.log_level == "debug"


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(config, environ={})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    config = tmp_path / "list.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(config, environ={})


def test_merged_skips_none() -> None:
    settings = ConverterSettings().merged({"pattern": None, "output_dir": "x"})

    assert settings.pattern == "*.feature"
    assert settings.output_dir == Path("x")
